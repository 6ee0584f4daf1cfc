# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave day management and leave-day lookups."""

import logging
import uuid
from datetime import date

import holidays
from sqlalchemy.orm import Session

from timewise.models import LeaveDay
from timewise.schemas.leave_day import LeaveDayCreate

from .exceptions import DuplicateLeaveDay
from .validators import LeaveDayLookup

logger = logging.getLogger(__name__)


def get_leave_day(db: Session, leave_id: uuid.UUID) -> LeaveDay | None:
    """Get a leave day by ID."""
    return db.query(LeaveDay).filter(LeaveDay.id == leave_id).first()


def get_leave_day_by_date(db: Session, leave_date: date) -> LeaveDay | None:
    """Get the leave day recorded for a date."""
    return db.query(LeaveDay).filter(LeaveDay.date == leave_date).first()


def get_leave_days(
    db: Session,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[LeaveDay]:
    """List leave days, optionally within an inclusive date range."""
    query = db.query(LeaveDay)
    if start_date:
        query = query.filter(LeaveDay.date >= start_date)
    if end_date:
        query = query.filter(LeaveDay.date <= end_date)
    return query.order_by(LeaveDay.date).all()


def create_leave_day(
    db: Session, data: LeaveDayCreate, created_by: uuid.UUID
) -> LeaveDay:
    """Record a new leave day.

    Raises:
        DuplicateLeaveDay: If the date already has a leave day.
    """
    if get_leave_day_by_date(db, data.date) is not None:
        raise DuplicateLeaveDay(data.date)

    description = data.description.strip() if data.description else None
    leave = LeaveDay(date=data.date, description=description, created_by=created_by)
    db.add(leave)
    db.commit()
    db.refresh(leave)
    logger.info(f"Leave day {leave.date} created by {created_by}")
    return leave


def delete_leave_day(db: Session, leave: LeaveDay) -> None:
    """Delete a leave day."""
    db.delete(leave)
    db.commit()
    logger.info(f"Leave day {leave.date} deleted")


class DatabaseLeaveDayLookup:
    """LeaveDayLookup backed by the leave_days table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def is_leave_day(self, candidate_date: date) -> bool:
        return get_leave_day_by_date(self.db, candidate_date) is not None

    def get_description(self, candidate_date: date) -> str | None:
        leave = get_leave_day_by_date(self.db, candidate_date)
        return leave.description if leave else None


class HolidayCalendarLookup:
    """Adds a country's public holidays on top of another lookup.

    Recorded leave days win when both exist, so their description is used.
    """

    def __init__(
        self,
        base: LeaveDayLookup,
        country_code: str,
        subdiv: str | None = None,
    ) -> None:
        self.base = base
        self.country_code = country_code.upper()
        self.subdiv = subdiv

    def _holidays(self, year: int) -> holidays.HolidayBase:
        return holidays.country_holidays(
            self.country_code, subdiv=self.subdiv, years=year
        )

    def is_leave_day(self, candidate_date: date) -> bool:
        if self.base.is_leave_day(candidate_date):
            return True
        return candidate_date in self._holidays(candidate_date.year)

    def get_description(self, candidate_date: date) -> str | None:
        if self.base.is_leave_day(candidate_date):
            return self.base.get_description(candidate_date)
        return self._holidays(candidate_date.year).get(candidate_date)


def build_leave_day_lookup(
    db: Session, public_holiday_country: str | None = None
) -> LeaveDayLookup:
    """Lookup for the current configuration."""
    lookup: LeaveDayLookup = DatabaseLeaveDayLookup(db)
    if public_holiday_country:
        lookup = HolidayCalendarLookup(lookup, public_holiday_country)
    return lookup
