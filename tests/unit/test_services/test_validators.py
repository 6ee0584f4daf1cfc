# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for window, leave-day, capacity and field validators."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from fractions import Fraction

import pytest

from timewise.models.enums import UserRole
from timewise.services.exceptions import (
    CapacityExceeded,
    FutureDateNotAllowed,
    InvalidEntryData,
    LeaveDayViolation,
    WindowExpired,
)
from timewise.services.validators import (
    validate_daily_capacity,
    validate_entry_fields,
    validate_entry_window,
    validate_not_leave_day,
)

NOW = datetime(2024, 6, 3, 9, 0, tzinfo=timezone.utc)
TODAY = NOW.date()
OWNER_ID = uuid.uuid4()


@dataclass
class FakeEntry:
    hours: int
    minutes: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)


class FakeEntryLookup:
    def __init__(self, entries: dict[tuple[uuid.UUID, date], list[FakeEntry]]):
        self.entries = entries

    def find_entries_by_owner_and_date(self, owner_id, entry_date):
        return list(self.entries.get((owner_id, entry_date), []))


class FakeLeaveLookup:
    def __init__(self, leave_days: dict[date, str | None]):
        self.leave_days = leave_days

    def is_leave_day(self, candidate_date):
        return candidate_date in self.leave_days

    def get_description(self, candidate_date):
        return self.leave_days.get(candidate_date)


class TestValidateEntryWindow:
    """Tests for validate_entry_window."""

    def test_today_allowed(self) -> None:
        validate_entry_window(TODAY, UserRole.USER, NOW, 3)

    def test_last_day_of_window_allowed(self) -> None:
        validate_entry_window(TODAY - timedelta(days=3), UserRole.USER, NOW, 3)

    def test_older_than_window_rejected(self) -> None:
        with pytest.raises(WindowExpired) as exc_info:
            validate_entry_window(TODAY - timedelta(days=4), UserRole.USER, NOW, 3)
        assert exc_info.value.edit_time_limit == 3

    @pytest.mark.parametrize("limit", [0, 3, 365])
    def test_tomorrow_rejected_for_any_window(self, limit: int) -> None:
        with pytest.raises(FutureDateNotAllowed):
            validate_entry_window(TODAY + timedelta(days=1), UserRole.USER, NOW, limit)

    def test_zero_window_allows_today(self) -> None:
        validate_entry_window(TODAY, UserRole.USER, NOW, 0)

    @pytest.mark.parametrize("offset", [-400, -4, 1, 30])
    def test_admin_unrestricted(self, offset: int) -> None:
        validate_entry_window(TODAY + timedelta(days=offset), UserRole.ADMIN, NOW, 3)


class TestValidateNotLeaveDay:
    """Tests for validate_not_leave_day."""

    def setup_method(self) -> None:
        self.lookup = FakeLeaveLookup({date(2024, 6, 1): "Company retreat"})

    def test_user_rejected_with_description(self) -> None:
        with pytest.raises(LeaveDayViolation) as exc_info:
            validate_not_leave_day(date(2024, 6, 1), UserRole.USER, self.lookup)
        assert exc_info.value.description == "Company retreat"
        assert "Company retreat" in exc_info.value.message

    def test_admin_bypasses(self) -> None:
        validate_not_leave_day(date(2024, 6, 1), UserRole.ADMIN, self.lookup)

    def test_regular_day_allowed(self) -> None:
        validate_not_leave_day(date(2024, 6, 2), UserRole.USER, self.lookup)

    def test_leave_without_description(self) -> None:
        lookup = FakeLeaveLookup({date(2024, 6, 5): None})
        with pytest.raises(LeaveDayViolation) as exc_info:
            validate_not_leave_day(date(2024, 6, 5), UserRole.USER, lookup)
        assert exc_info.value.description is None


class TestValidateDailyCapacity:
    """Tests for validate_daily_capacity."""

    day = date(2024, 6, 1)

    def lookup_with(self, *entries: FakeEntry) -> FakeEntryLookup:
        return FakeEntryLookup({(OWNER_ID, self.day): list(entries)})

    def test_exceeding_reports_totals(self) -> None:
        lookup = self.lookup_with(FakeEntry(8), FakeEntry(12))
        with pytest.raises(CapacityExceeded) as exc_info:
            validate_daily_capacity(OWNER_ID, self.day, 5, None, lookup)
        assert exc_info.value.current_total == 20
        assert exc_info.value.attempted == 5

    def test_exactly_24_accepted(self) -> None:
        validate_daily_capacity(
            OWNER_ID, self.day, 4.0, None, self.lookup_with(FakeEntry(20))
        )

    def test_exactly_24_with_minutes_accepted(self) -> None:
        lookup = self.lookup_with(FakeEntry(20, 10))
        validate_daily_capacity(OWNER_ID, self.day, Fraction(230, 60), None, lookup)

    @pytest.mark.parametrize("epsilon", [1e-6, 0.01, 0.5])
    def test_just_above_24_rejected(self, epsilon: float) -> None:
        with pytest.raises(CapacityExceeded):
            validate_daily_capacity(
                OWNER_ID, self.day, 4.0 + epsilon, None, self.lookup_with(FakeEntry(20))
            )

    def test_excluded_entry_not_counted(self) -> None:
        existing = FakeEntry(10)
        lookup = self.lookup_with(existing, FakeEntry(10))
        validate_daily_capacity(OWNER_ID, self.day, 14, existing.id, lookup)
        with pytest.raises(CapacityExceeded):
            validate_daily_capacity(OWNER_ID, self.day, 14, None, lookup)

    def test_other_owner_and_day_ignored(self) -> None:
        lookup = FakeEntryLookup(
            {
                (uuid.uuid4(), self.day): [FakeEntry(20)],
                (OWNER_ID, self.day + timedelta(days=1)): [FakeEntry(20)],
            }
        )
        validate_daily_capacity(OWNER_ID, self.day, 24, None, lookup)

    def test_configured_limit(self) -> None:
        with pytest.raises(CapacityExceeded) as exc_info:
            validate_daily_capacity(
                OWNER_ID, self.day, 3, None, self.lookup_with(FakeEntry(8)), limit=10
            )
        assert exc_info.value.limit == 10


class TestValidateEntryFields:
    """Tests for validate_entry_fields."""

    verticles = ["CMIS", "TRI"]

    def test_valid(self) -> None:
        validate_entry_fields(
            verticle="CMIS",
            country="UK",
            task="Meeting",
            task_description="Weekly sync with client",
            available_verticles=self.verticles,
        )

    def test_unknown_verticle(self) -> None:
        with pytest.raises(InvalidEntryData) as exc_info:
            validate_entry_fields(verticle="XYZ", available_verticles=self.verticles)
        assert exc_info.value.field == "verticle"

    def test_description_needs_three_words(self) -> None:
        with pytest.raises(InvalidEntryData) as exc_info:
            validate_entry_fields(task_description="too short")
        assert "at least 3 words" in exc_info.value.message

    @pytest.mark.parametrize("field_name", ["country", "task", "task_description"])
    def test_blank_rejected(self, field_name: str) -> None:
        with pytest.raises(InvalidEntryData):
            validate_entry_fields(**{field_name: "   "})

    def test_long_country_rejected(self) -> None:
        with pytest.raises(InvalidEntryData):
            validate_entry_fields(country="x" * 101)

    def test_nothing_supplied_is_valid(self) -> None:
        validate_entry_fields()

    def test_country_and_task_from_configured_lists(self) -> None:
        validate_entry_fields(
            country=" UK ",
            task="Meeting",
            available_countries=["UK"],
            available_tasks=["Meeting"],
        )

        with pytest.raises(InvalidEntryData) as exc_info:
            validate_entry_fields(country="Mars", available_countries=["UK"])
        assert exc_info.value.field == "country"

        with pytest.raises(InvalidEntryData) as exc_info:
            validate_entry_fields(task="Napping", available_tasks=["Meeting"])
        assert exc_info.value.field == "task"

    def test_free_text_without_lists(self) -> None:
        validate_entry_fields(country="Mars", task="Napping")
