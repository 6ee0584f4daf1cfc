# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave day API endpoints."""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from timewise.api.deps import (
    get_current_actor,
    get_current_admin,
    get_db,
    raise_http_error,
)
from timewise.schemas.common import MessageResponse
from timewise.schemas.leave_day import LeaveDayCreate, LeaveDayResponse
from timewise.services import leave_service
from timewise.services.exceptions import WorkLogError
from timewise.services.permissions import Actor

router = APIRouter()


@router.get("", response_model=list[LeaveDayResponse])
def list_leave_days(
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
) -> list[LeaveDayResponse]:
    """List leave days."""
    leaves = leave_service.get_leave_days(db, start_date, end_date)
    return [LeaveDayResponse.model_validate(leave) for leave in leaves]


@router.post("", response_model=LeaveDayResponse, status_code=status.HTTP_201_CREATED)
def create_leave_day(
    data: LeaveDayCreate,
    db: Session = Depends(get_db),
    admin: Actor = Depends(get_current_admin),
) -> LeaveDayResponse:
    """Create a leave day (admin only)."""
    try:
        leave = leave_service.create_leave_day(db, data, admin.id)
    except WorkLogError as e:
        raise_http_error(e)
    return LeaveDayResponse.model_validate(leave)


@router.delete("/{leave_id}", response_model=MessageResponse)
def delete_leave_day(
    leave_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin: Actor = Depends(get_current_admin),
) -> MessageResponse:
    """Delete a leave day (admin only)."""
    leave = leave_service.get_leave_day(db, leave_id)
    if not leave:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Leave day not found",
        )
    leave_service.delete_leave_day(db, leave)
    return MessageResponse(message="Leave day deleted successfully")
