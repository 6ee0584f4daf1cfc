# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work log rule violations.

Every rejection raised by the entry lifecycle derives from WorkLogError and
carries a stable code, so API consumers can branch on the kind of failure.
Storage errors are never wrapped in these classes.
"""

from datetime import date


class WorkLogError(Exception):
    """Base class for all work log rule violations."""

    code = "WORKLOG_ERROR"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Serialize for an API error body."""
        return {"code": self.code, "message": self.message}


class InvalidDurationFormat(WorkLogError):
    """Malformed decimal shorthand or out-of-range hours/minutes."""

    code = "INVALID_DURATION_FORMAT"

    def __init__(self, raw: object, reason: str | None = None) -> None:
        self.raw = raw
        super().__init__(
            reason
            or f"Invalid time value {raw}: use .1 to .6 after the hours "
            "(.1 = 10 minutes, .5 = 50 minutes, .6 = next full hour)"
        )


class InvalidEntryData(WorkLogError):
    """A non-duration field failed validation."""

    code = "INVALID_ENTRY_DATA"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class AccessDenied(WorkLogError):
    """Actor may not view or mutate the target entry."""

    code = "ACCESS_DENIED"
    status_code = 403

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class EditWindowExpired(WorkLogError):
    """Owner tried to change an entry older than the rolling edit window."""

    code = "EDIT_WINDOW_EXPIRED"
    status_code = 403

    def __init__(self, edit_time_limit: int, days_remaining: int = 0) -> None:
        self.edit_time_limit = edit_time_limit
        self.days_remaining = days_remaining
        super().__init__(
            "Edit window expired. You can only edit entries within the last "
            f"{edit_time_limit} days (rolling window)."
        )


class FutureDateNotAllowed(WorkLogError):
    """Non-admin tried to log work on a date after today."""

    code = "FUTURE_DATE_NOT_ALLOWED"

    def __init__(self, candidate_date: date) -> None:
        self.candidate_date = candidate_date
        super().__init__(
            f"Cannot log work for a future date ({candidate_date.isoformat()})."
        )


class WindowExpired(WorkLogError):
    """Non-admin tried to log work on a date older than the window."""

    code = "WINDOW_EXPIRED"

    def __init__(self, candidate_date: date, edit_time_limit: int) -> None:
        self.candidate_date = candidate_date
        self.edit_time_limit = edit_time_limit
        super().__init__(
            f"Cannot log work for {candidate_date.isoformat()}. Entries are only "
            f"allowed for the last {edit_time_limit} days (rolling window)."
        )


class LeaveDayViolation(WorkLogError):
    """Date is an organizational leave day."""

    code = "LEAVE_DAY_VIOLATION"

    def __init__(self, candidate_date: date, description: str | None = None) -> None:
        self.candidate_date = candidate_date
        self.description = description
        suffix = f" ({description})" if description else ""
        super().__init__(
            f"Cannot log work on {candidate_date.isoformat()}: "
            f"it is a leave day{suffix}."
        )


class CapacityExceeded(WorkLogError):
    """Daily total for the owner would exceed the allowed hours."""

    code = "CAPACITY_EXCEEDED"

    def __init__(
        self, current_total: float, attempted: float, limit: float = 24.0
    ) -> None:
        self.current_total = current_total
        self.attempted = attempted
        self.limit = limit
        super().__init__(
            f"Cannot exceed {limit:g} hours per day. Current total (excluding "
            f"this entry): {current_total:g} hours. Attempting to set: "
            f"{attempted:g} hours."
        )


class EntryNotFound(WorkLogError):
    """No work log with the given id."""

    code = "ENTRY_NOT_FOUND"
    status_code = 404

    def __init__(self, entry_id: object) -> None:
        self.entry_id = entry_id
        super().__init__("Work log not found")


class EntryAlreadyRejected(WorkLogError):
    """Entry has already been rejected by an admin."""

    code = "ENTRY_ALREADY_REJECTED"
    status_code = 409

    def __init__(self, entry_id: object) -> None:
        self.entry_id = entry_id
        super().__init__("Work log already rejected")


class DuplicateLeaveDay(WorkLogError):
    """A leave day already exists for the date."""

    code = "DUPLICATE_LEAVE_DAY"
    status_code = 409

    def __init__(self, leave_date: date) -> None:
        self.leave_date = leave_date
        super().__init__(f"A leave day already exists for {leave_date.isoformat()}")
