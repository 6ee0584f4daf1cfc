# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role-based access to work log entries.

All functions here are pure: the caller supplies "now" and the edit window
size on every call, nothing is read from the clock or from configuration.
"""

import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Protocol

from timewise.models.enums import UserRole


@dataclass(frozen=True)
class Actor:
    """Authenticated principal attempting an operation."""

    id: uuid.UUID
    role: UserRole

    @property
    def is_admin(self) -> bool:
        """True for administrators."""
        return self.role == UserRole.ADMIN


@dataclass(frozen=True)
class PermissionResult:
    """What an actor may do with one entry."""

    can_view: bool
    can_edit: bool
    can_delete: bool
    edit_days_remaining: int | None = None


class OwnedEntry(Protocol):
    """Anything with an owner and a calendar date."""

    user_id: uuid.UUID
    date: date


NO_ACCESS = PermissionResult(can_view=False, can_edit=False, can_delete=False)
FULL_ACCESS = PermissionResult(can_view=True, can_edit=True, can_delete=True)
VIEW_ONLY = PermissionResult(can_view=True, can_edit=False, can_delete=False)


def to_utc_date(value: date | datetime) -> date:
    """Calendar date of a value in UTC.

    Naive datetimes are taken to be UTC already.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def calendar_days_between(record_date: date | datetime, now: date | datetime) -> int:
    """Whole calendar days from record_date to now, ignoring time of day.

    Negative when record_date lies after now.
    """
    return (to_utc_date(now) - to_utc_date(record_date)).days


def is_within_edit_window(days_since: int, edit_time_limit_days: int) -> bool:
    """True when days_since lies in the closed range [0, edit_time_limit_days]."""
    return 0 <= days_since <= edit_time_limit_days


def compute_worklog_permission(
    entry: OwnedEntry,
    actor: Actor,
    now: datetime,
    edit_time_limit_days: int,
) -> PermissionResult:
    """Compute view/edit/delete rights of an actor on an entry.

    - Admin: full access, no further checks.
    - Inspection: may view every entry, never edit or delete.
    - Developer: no access to work logs.
    - User: own entries only; edit and delete while the entry date lies
      within the rolling window of edit_time_limit_days calendar days.

    Args:
        entry: The entry being judged.
        actor: The authenticated actor.
        now: Current time, injected by the caller.
        edit_time_limit_days: Size of the rolling edit window.

    Returns:
        The permission result.
    """
    role = actor.role

    if role == UserRole.ADMIN:
        return FULL_ACCESS
    if role == UserRole.INSPECTION:
        return VIEW_ONLY
    if role == UserRole.DEVELOPER:
        return NO_ACCESS
    if role != UserRole.USER:
        raise ValueError(f"Unhandled role: {role}")

    if entry.user_id != actor.id:
        return NO_ACCESS

    days_since = calendar_days_between(entry.date, now)
    if days_since < 0:
        return PermissionResult(can_view=True, can_edit=False, can_delete=False)

    if is_within_edit_window(days_since, edit_time_limit_days):
        return PermissionResult(
            can_view=True,
            can_edit=True,
            can_delete=True,
            edit_days_remaining=edit_time_limit_days - days_since,
        )

    return PermissionResult(
        can_view=True, can_edit=False, can_delete=False, edit_days_remaining=0
    )


def can_view_all_data(role: UserRole) -> bool:
    """Admin and Inspection can view every user's timesheet data."""
    return role in (UserRole.ADMIN, UserRole.INSPECTION)


def can_edit_timesheets(role: UserRole) -> bool:
    """Admin and User may create and edit entries; Inspection may not."""
    return role in (UserRole.ADMIN, UserRole.USER)


def can_manage_users(role: UserRole) -> bool:
    """Only Admin manages users and system policy."""
    return role == UserRole.ADMIN


def get_role_display_name(role: UserRole | str) -> str:
    """User-facing name of a role."""
    try:
        return UserRole(role).value
    except ValueError:
        return "Unknown"
