# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work log API endpoints."""

import math
import uuid
from datetime import date, datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from timewise.api.deps import (
    get_current_actor,
    get_db,
    get_now,
    get_system_config,
    raise_http_error,
)
from timewise.models import WorkLog, WorkLogStatus
from timewise.schemas.common import MessageResponse, PaginationMeta
from timewise.schemas.system_config import SystemConfig
from timewise.schemas.worklog import (
    DailyTotalResponse,
    WorkLogCreate,
    WorkLogListResponse,
    WorkLogPermissions,
    WorkLogResponse,
    WorkLogUpdate,
)
from timewise.services.exceptions import AccessDenied, WorkLogError
from timewise.services.permissions import (
    Actor,
    PermissionResult,
    can_view_all_data,
    compute_worklog_permission,
)
from timewise.services.time_utils import (
    convert_to_decimal_hours,
    format_time_spent,
)
from timewise.services.worklog_service import WorkLogService

router = APIRouter()


def _entry_to_response(
    entry: WorkLog, permission: PermissionResult | None = None
) -> WorkLogResponse:
    """Convert a WorkLog to a response schema."""
    return WorkLogResponse(
        id=entry.id,
        user_id=entry.user_id,
        date=entry.date,
        verticle=entry.verticle,
        country=entry.country,
        task=entry.task,
        task_description=entry.task_description,
        hours=entry.hours,
        minutes=entry.minutes,
        decimal_hours=convert_to_decimal_hours(entry.hours, entry.minutes),
        time_spent_display=format_time_spent(entry.hours, entry.minutes),
        status=entry.status,
        created_at=entry.created_at,
        updated_at=entry.updated_at,
        permissions=(
            WorkLogPermissions(
                can_view=permission.can_view,
                can_edit=permission.can_edit,
                can_delete=permission.can_delete,
                edit_days_remaining=permission.edit_days_remaining,
            )
            if permission
            else None
        ),
    )


@router.get("", response_model=WorkLogListResponse)
def list_worklogs(
    verticle: str | None = Query(None),
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    entry_status: WorkLogStatus | None = Query(None, alias="status"),
    user_id: uuid.UUID | None = Query(None, alias="userId"),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
    config: SystemConfig = Depends(get_system_config),
    now: datetime = Depends(get_now),
) -> WorkLogListResponse:
    """List work logs visible to the current user."""
    service = WorkLogService(db)
    entries, total = service.list_entries(
        actor,
        verticle=verticle,
        start_date=start_date,
        end_date=end_date,
        status=entry_status,
        user_id=user_id,
        page=page,
        limit=limit,
    )
    return WorkLogListResponse(
        data=[
            _entry_to_response(
                e, compute_worklog_permission(e, actor, now, config.edit_time_limit)
            )
            for e in entries
        ],
        meta=PaginationMeta(
            total=total,
            page=page,
            per_page=limit,
            pages=math.ceil(total / limit) if total else 0,
        ),
    )


@router.post("", response_model=WorkLogResponse, status_code=status.HTTP_201_CREATED)
def create_worklog(
    data: WorkLogCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
    config: SystemConfig = Depends(get_system_config),
    now: datetime = Depends(get_now),
) -> WorkLogResponse:
    """Create a work log."""
    service = WorkLogService(db)
    try:
        entry = service.create_entry(actor, data, now, config)
    except WorkLogError as e:
        raise_http_error(e)
    permission = compute_worklog_permission(entry, actor, now, config.edit_time_limit)
    return _entry_to_response(entry, permission)


@router.get("/daily-total", response_model=DailyTotalResponse)
def get_daily_total(
    entry_date: date = Query(..., alias="date"),
    user_id: uuid.UUID | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
    config: SystemConfig = Depends(get_system_config),
) -> DailyTotalResponse:
    """Total hours logged by a user on a day."""
    owner_id = user_id or actor.id
    if owner_id != actor.id and not can_view_all_data(actor.role):
        raise_http_error(AccessDenied())

    total = WorkLogService(db).get_daily_total(owner_id, entry_date)
    return DailyTotalResponse(
        user_id=owner_id,
        date=entry_date,
        total_hours=total,
        remaining_hours=max(0.0, round(config.max_hours_per_day - total, 2)),
    )


@router.get("/{entry_id}", response_model=WorkLogResponse)
def get_worklog(
    entry_id: uuid.UUID,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
    config: SystemConfig = Depends(get_system_config),
    now: datetime = Depends(get_now),
) -> WorkLogResponse:
    """Get a specific work log."""
    service = WorkLogService(db)
    try:
        entry, permission = service.get_entry_for_actor(
            actor, entry_id, now, config.edit_time_limit
        )
    except WorkLogError as e:
        raise_http_error(e)
    return _entry_to_response(entry, permission)


@router.put("/{entry_id}", response_model=WorkLogResponse)
def update_worklog(
    entry_id: uuid.UUID,
    data: WorkLogUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
    config: SystemConfig = Depends(get_system_config),
    now: datetime = Depends(get_now),
) -> WorkLogResponse:
    """Update a work log within the rolling edit window."""
    service = WorkLogService(db)
    try:
        entry = service.update_entry(actor, entry_id, data, now, config)
    except WorkLogError as e:
        raise_http_error(e)
    permission = compute_worklog_permission(entry, actor, now, config.edit_time_limit)
    return _entry_to_response(entry, permission)


@router.post("/{entry_id}/reject", response_model=WorkLogResponse)
def reject_worklog(
    entry_id: uuid.UUID,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
) -> WorkLogResponse:
    """Reject a work log (admin only)."""
    service = WorkLogService(db)
    try:
        entry = service.reject_entry(actor, entry_id)
    except WorkLogError as e:
        raise_http_error(e)
    return _entry_to_response(entry)


@router.delete("/{entry_id}", response_model=MessageResponse)
def delete_worklog(
    entry_id: uuid.UUID,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
) -> MessageResponse:
    """Permanently delete a work log (admin only)."""
    service = WorkLogService(db)
    try:
        service.delete_entry(actor, entry_id)
    except WorkLogError as e:
        raise_http_error(e)
    return MessageResponse(message="Work log deleted successfully")
