# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work log entry lifecycle.

WorkLogService runs each mutation through the checks in a fixed order and
commits only when all of them pass:

    create: window -> leave day -> duration -> fields -> capacity -> commit
    update: permission -> (new date) window + leave day -> duration
            -> fields -> capacity -> commit
    reject/delete: admin only -> commit

The first failing check raises and nothing is written.
"""

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime
from fractions import Fraction

from sqlalchemy.orm import Session

from timewise.models import User, UserRole, WorkLog, WorkLogStatus
from timewise.schemas.system_config import SystemConfig
from timewise.schemas.worklog import WorkLogCreate, WorkLogUpdate

from .exceptions import (
    AccessDenied,
    EditWindowExpired,
    EntryAlreadyRejected,
    EntryNotFound,
    InvalidEntryData,
    WorkLogError,
)
from .leave_service import build_leave_day_lookup
from .locks import DailyLockRegistry, daily_locks
from .permissions import (
    Actor,
    PermissionResult,
    can_edit_timesheets,
    can_view_all_data,
    compute_worklog_permission,
    get_role_display_name,
)
from .time_utils import convert_to_decimal_hours, resolve_duration
from .validators import (
    EntryLookup,
    LeaveDayLookup,
    validate_daily_capacity,
    validate_entry_fields,
    validate_entry_window,
    validate_not_leave_day,
)

logger = logging.getLogger(__name__)


class SqlEntryLookup:
    """EntryLookup over the work_logs table; rejected entries do not count."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_entries_by_owner_and_date(
        self, owner_id: uuid.UUID, entry_date: date
    ) -> list[WorkLog]:
        return (
            self.db.query(WorkLog)
            .filter(
                WorkLog.user_id == owner_id,
                WorkLog.date == entry_date,
                WorkLog.status == WorkLogStatus.APPROVED,
            )
            .all()
        )


def _duration(hours: int, minutes: int) -> Fraction:
    return Fraction(hours * 60 + minutes, 60)


class WorkLogService:
    """Service coordinating work log mutations."""

    def __init__(
        self,
        db: Session,
        entry_lookup: EntryLookup | None = None,
        leave_day_lookup: LeaveDayLookup | None = None,
        locks: DailyLockRegistry = daily_locks,
    ) -> None:
        """Initialize the service.

        Args:
            db: Database session.
            entry_lookup: Sibling entry source for the capacity check.
                Defaults to the work_logs table.
            leave_day_lookup: Leave calendar. Defaults to the leave_days
                table plus public holidays when configured.
            locks: Registry serializing writers per owner and day.
        """
        self.db = db
        self.entry_lookup = entry_lookup or SqlEntryLookup(db)
        self.leave_day_lookup = leave_day_lookup
        self.locks = locks

    def _leave_lookup(self, config: SystemConfig) -> LeaveDayLookup:
        if self.leave_day_lookup is not None:
            return self.leave_day_lookup
        return build_leave_day_lookup(self.db, config.public_holiday_country)

    @contextmanager
    def _logged(self, action: str, actor: Actor) -> Iterator[None]:
        try:
            yield
        except WorkLogError as e:
            self.db.rollback()
            logger.info(
                f"{action} rejected for {get_role_display_name(actor.role)} "
                f"{actor.id}: {e.code}"
            )
            raise

    # --- Queries ---

    def get_entry(self, entry_id: uuid.UUID) -> WorkLog | None:
        """Get a work log by ID, without permission checks."""
        return self.db.query(WorkLog).filter(WorkLog.id == entry_id).first()

    def _require_entry(self, entry_id: uuid.UUID) -> WorkLog:
        entry = self.get_entry(entry_id)
        if entry is None:
            raise EntryNotFound(entry_id)
        return entry

    def get_entry_for_actor(
        self,
        actor: Actor,
        entry_id: uuid.UUID,
        now: datetime,
        edit_time_limit: int,
    ) -> tuple[WorkLog, PermissionResult]:
        """Get an entry together with the actor's permissions on it.

        Raises:
            EntryNotFound: If the entry does not exist.
            AccessDenied: If the actor may not view it.
        """
        entry = self._require_entry(entry_id)
        permission = compute_worklog_permission(entry, actor, now, edit_time_limit)
        if not permission.can_view:
            raise AccessDenied()
        return entry, permission

    def list_entries(
        self,
        actor: Actor,
        verticle: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        status: WorkLogStatus | None = None,
        user_id: uuid.UUID | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> tuple[list[WorkLog], int]:
        """List entries visible to the actor.

        Args:
            actor: The authenticated actor.
            verticle: Optional verticle filter.
            start_date: Optional inclusive start date.
            end_date: Optional inclusive end date.
            status: Optional status filter.
            user_id: Optional owner filter, only meaningful for actors who
                can view all data.
            page: 1-based page number.
            limit: Page size.

        Returns:
            Tuple of (entries on the page, total matching entries).
        """
        query = self.db.query(WorkLog)

        if can_view_all_data(actor.role):
            if user_id:
                query = query.filter(WorkLog.user_id == user_id)
        elif can_edit_timesheets(actor.role):
            query = query.filter(WorkLog.user_id == actor.id)
        else:
            return [], 0

        if verticle:
            query = query.filter(WorkLog.verticle == verticle)
        if start_date:
            query = query.filter(WorkLog.date >= start_date)
        if end_date:
            query = query.filter(WorkLog.date <= end_date)
        if status:
            query = query.filter(WorkLog.status == status)

        total = query.count()
        entries = (
            query.order_by(WorkLog.date.desc(), WorkLog.created_at.desc())
            .offset((max(page, 1) - 1) * limit)
            .limit(limit)
            .all()
        )
        return entries, total

    def get_daily_total(self, owner_id: uuid.UUID, entry_date: date) -> float:
        """Total counted hours for an owner on a day."""
        minutes = sum(
            e.hours * 60 + e.minutes
            for e in self.entry_lookup.find_entries_by_owner_and_date(
                owner_id, entry_date
            )
        )
        return convert_to_decimal_hours(*divmod(minutes, 60))

    # --- Mutations ---

    def create_entry(
        self,
        actor: Actor,
        data: WorkLogCreate,
        now: datetime,
        config: SystemConfig,
    ) -> WorkLog:
        """Create a work log.

        Admins may log on behalf of another user via data.user_id; for
        everyone else the owner is the actor.

        Args:
            actor: The authenticated actor.
            data: The entry to create.
            now: Current time.
            config: System configuration for this request.

        Returns:
            The committed entry.

        Raises:
            WorkLogError: The first check that failed.
        """
        with self._logged("Create", actor):
            if not can_edit_timesheets(actor.role):
                raise AccessDenied("Your role cannot create work log entries")

            owner_id = actor.id
            if actor.is_admin and data.user_id and data.user_id != actor.id:
                if self.db.get(User, data.user_id) is None:
                    raise InvalidEntryData("user_id", "User not found")
                owner_id = data.user_id

            validate_entry_window(data.date, actor.role, now, config.edit_time_limit)
            validate_not_leave_day(data.date, actor.role, self._leave_lookup(config))
            hours, minutes = resolve_duration(data.time_spent, data.hours, data.minutes)
            validate_entry_fields(
                verticle=data.verticle,
                country=data.country,
                task=data.task,
                task_description=data.task_description,
                available_verticles=config.available_verticles,
                available_countries=config.available_countries,
                available_tasks=config.available_tasks,
            )

            with self.locks.hold((owner_id, data.date)):
                validate_daily_capacity(
                    owner_id,
                    data.date,
                    _duration(hours, minutes),
                    None,
                    self.entry_lookup,
                    config.max_hours_per_day,
                )
                entry = WorkLog(
                    user_id=owner_id,
                    date=data.date,
                    verticle=data.verticle,
                    country=data.country.strip(),
                    task=data.task.strip(),
                    task_description=(
                        data.task_description.strip()
                        if data.task_description
                        else None
                    ),
                    hours=hours,
                    minutes=minutes,
                    status=WorkLogStatus.APPROVED,
                )
                self.db.add(entry)
                self.db.commit()

        self.db.refresh(entry)
        logger.info(
            f"Work log {entry.id} created for {owner_id} on {entry.date} "
            f"({hours}h {minutes}m) by {actor.id}"
        )
        return entry

    def update_entry(
        self,
        actor: Actor,
        entry_id: uuid.UUID,
        data: WorkLogUpdate,
        now: datetime,
        config: SystemConfig,
    ) -> WorkLog:
        """Update a work log.

        Args:
            actor: The authenticated actor.
            entry_id: The entry to update.
            data: Fields to change; None leaves a field untouched.
            now: Current time.
            config: System configuration for this request.

        Returns:
            The committed entry.

        Raises:
            WorkLogError: The first check that failed.
        """
        with self._logged("Update", actor):
            entry = self._require_entry(entry_id)
            limit = config.edit_time_limit

            permission = compute_worklog_permission(entry, actor, now, limit)
            if not permission.can_edit:
                if actor.role == UserRole.USER and entry.user_id == actor.id:
                    raise EditWindowExpired(limit, permission.edit_days_remaining or 0)
                raise AccessDenied()

            new_date = data.date if data.date is not None else entry.date
            if new_date != entry.date:
                validate_entry_window(new_date, actor.role, now, limit)
                validate_not_leave_day(new_date, actor.role, self._leave_lookup(config))

            if data.changes_duration:
                # Hours and minutes change as a pair; the omitted half is kept
                hours, minutes = resolve_duration(
                    data.time_spent,
                    data.hours if data.hours is not None else entry.hours,
                    data.minutes if data.minutes is not None else entry.minutes,
                )
            else:
                hours, minutes = entry.hours, entry.minutes

            validate_entry_fields(
                verticle=data.verticle,
                country=data.country,
                task=data.task,
                task_description=data.task_description,
                available_verticles=config.available_verticles,
                available_countries=config.available_countries,
                available_tasks=config.available_tasks,
            )

            old_key = (entry.user_id, entry.date)
            with self.locks.hold(old_key, (entry.user_id, new_date)):
                if data.changes_duration or new_date != entry.date:
                    validate_daily_capacity(
                        entry.user_id,
                        new_date,
                        _duration(hours, minutes),
                        entry.id,
                        self.entry_lookup,
                        config.max_hours_per_day,
                    )

                entry.date = new_date
                entry.hours = hours
                entry.minutes = minutes
                if data.verticle is not None:
                    entry.verticle = data.verticle
                if data.country is not None:
                    entry.country = data.country.strip()
                if data.task is not None:
                    entry.task = data.task.strip()
                if data.task_description is not None:
                    entry.task_description = data.task_description.strip()
                entry.updated_at = datetime.utcnow()
                self.db.commit()

        self.db.refresh(entry)
        logger.info(f"Work log {entry.id} updated by {actor.id}")
        return entry

    def reject_entry(self, actor: Actor, entry_id: uuid.UUID) -> WorkLog:
        """Mark an entry as rejected so it no longer counts (admin only)."""
        with self._logged("Reject", actor):
            if not actor.is_admin:
                raise AccessDenied("Only administrators can reject entries")

            entry = self._require_entry(entry_id)
            if entry.status == WorkLogStatus.REJECTED:
                raise EntryAlreadyRejected(entry_id)

            entry.status = WorkLogStatus.REJECTED
            entry.updated_at = datetime.utcnow()
            self.db.commit()

        self.db.refresh(entry)
        logger.info(
            f"Work log {entry.id} of {entry.user_id} on {entry.date} "
            f"rejected by {actor.id}"
        )
        return entry

    def delete_entry(self, actor: Actor, entry_id: uuid.UUID) -> None:
        """Permanently delete an entry (admin only)."""
        with self._logged("Delete", actor):
            if not actor.is_admin:
                raise AccessDenied("Only administrators can delete entries")

            entry = self._require_entry(entry_id)
            self.db.delete(entry)
            self.db.commit()

        logger.info(f"Work log {entry_id} deleted by {actor.id}")
