# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Date, leave-day, capacity and field checks for work log entries.

Each validator returns None when the candidate is acceptable and raises a
WorkLogError subclass otherwise. Storage is reached only through the
lookup protocols below, so the checks run equally against the database or
an in-memory fake.
"""

import uuid
from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from fractions import Fraction
from typing import Protocol

from timewise.models.enums import UserRole

from .exceptions import (
    CapacityExceeded,
    FutureDateNotAllowed,
    InvalidEntryData,
    LeaveDayViolation,
    WindowExpired,
)
from .permissions import calendar_days_between

MAX_HOURS_PER_DAY = 24
MAX_COUNTRY_LENGTH = 100
MAX_TASK_LENGTH = 500
MIN_DESCRIPTION_WORDS = 3


class CountedEntry(Protocol):
    """Entry contributing to a daily total."""

    id: uuid.UUID
    hours: int
    minutes: int


class EntryLookup(Protocol):
    """Storage capability used by the daily capacity check."""

    def find_entries_by_owner_and_date(
        self, owner_id: uuid.UUID, entry_date: date
    ) -> Iterable[CountedEntry]:
        """Return the owner's counted entries on the given calendar day."""
        ...


class LeaveDayLookup(Protocol):
    """Leave calendar capability used by the leave-day check."""

    def is_leave_day(self, candidate_date: date) -> bool:
        """Return True if the date is a leave day."""
        ...

    def get_description(self, candidate_date: date) -> str | None:
        """Return the leave day description, if any."""
        ...


def validate_entry_window(
    candidate_date: date,
    actor_role: UserRole,
    now: datetime,
    edit_time_limit_days: int,
) -> None:
    """Check that a date may currently receive a new or moved entry.

    Admins may use any date. Everyone else is limited to today and the
    previous edit_time_limit_days calendar days.

    Raises:
        FutureDateNotAllowed: If the date is after today.
        WindowExpired: If the date is older than the window.
    """
    if actor_role == UserRole.ADMIN:
        return

    days_since = calendar_days_between(candidate_date, now)
    if days_since < 0:
        raise FutureDateNotAllowed(candidate_date)
    if days_since > edit_time_limit_days:
        raise WindowExpired(candidate_date, edit_time_limit_days)


def validate_not_leave_day(
    candidate_date: date,
    actor_role: UserRole,
    leave_day_lookup: LeaveDayLookup,
) -> None:
    """Reject non-admin entries on organizational leave days.

    Raises:
        LeaveDayViolation: If the date is a leave day and the actor is not
            an admin.
    """
    if actor_role == UserRole.ADMIN:
        return

    if leave_day_lookup.is_leave_day(candidate_date):
        raise LeaveDayViolation(
            candidate_date, leave_day_lookup.get_description(candidate_date)
        )


def validate_daily_capacity(
    owner_id: uuid.UUID,
    entry_date: date,
    proposed_hours: float | Decimal | Fraction,
    excluding_entry_id: uuid.UUID | None,
    entry_lookup: EntryLookup,
    limit: float = MAX_HOURS_PER_DAY,
) -> None:
    """Check the owner's total for a day stays within the limit.

    Args:
        owner_id: Owner of the entries.
        entry_date: Calendar day being checked.
        proposed_hours: Hours the new or updated entry would contribute.
        excluding_entry_id: Entry to leave out of the running total, used
            when an existing entry is updated.
        entry_lookup: Storage capability returning the owner's entries.
        limit: Maximum total hours per day.

    Raises:
        CapacityExceeded: If the total would strictly exceed the limit.
    """
    existing_minutes = sum(
        entry.hours * 60 + entry.minutes
        for entry in entry_lookup.find_entries_by_owner_and_date(owner_id, entry_date)
        if excluding_entry_id is None or entry.id != excluding_entry_id
    )

    current = Fraction(existing_minutes, 60)
    attempted = Fraction(proposed_hours)
    if current + attempted > Fraction(limit):
        raise CapacityExceeded(
            current_total=round(float(current), 2),
            attempted=round(float(attempted), 2),
            limit=limit,
        )


def validate_entry_fields(
    *,
    verticle: str | None = None,
    country: str | None = None,
    task: str | None = None,
    task_description: str | None = None,
    available_verticles: Iterable[str] = (),
    available_countries: Iterable[str] | None = None,
    available_tasks: Iterable[str] | None = None,
) -> None:
    """Check the descriptive fields of an entry; None means "not supplied".

    Country and task must come from the configured lists when those are
    given.

    Raises:
        InvalidEntryData: On the first field that fails.
    """
    if verticle is not None and verticle not in set(available_verticles):
        raise InvalidEntryData("verticle", "Invalid verticle specified")

    if country is not None:
        if not country.strip():
            raise InvalidEntryData("country", "Country is required")
        if len(country.strip()) > MAX_COUNTRY_LENGTH:
            raise InvalidEntryData(
                "country", "Country name cannot exceed 100 characters"
            )
        if available_countries is not None and country.strip() not in set(
            available_countries
        ):
            raise InvalidEntryData("country", "Invalid country specified")

    if task is not None:
        if not task.strip():
            raise InvalidEntryData("task", "Task is required")
        if len(task.strip()) > MAX_TASK_LENGTH:
            raise InvalidEntryData("task", "Task cannot exceed 500 characters")
        if available_tasks is not None and task.strip() not in set(available_tasks):
            raise InvalidEntryData("task", "Invalid task specified")

    if task_description is not None:
        if not task_description.strip():
            raise InvalidEntryData(
                "task_description", "Task description cannot be empty"
            )
        if len(task_description.split()) < MIN_DESCRIPTION_WORDS:
            raise InvalidEntryData(
                "task_description",
                "Task description must contain at least 3 words",
            )
