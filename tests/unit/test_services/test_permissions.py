# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the work log permission engine.

Entries are plain dataclasses here; the engine only needs an owner and a
date.
"""

import uuid
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

import pytest

from timewise.models.enums import UserRole
from timewise.services.permissions import (
    Actor,
    PermissionResult,
    calendar_days_between,
    can_edit_timesheets,
    can_manage_users,
    can_view_all_data,
    compute_worklog_permission,
    get_role_display_name,
)

NOW = datetime(2024, 6, 10, 15, 30, tzinfo=timezone.utc)
OWNER_ID = uuid.uuid4()


@dataclass
class Entry:
    user_id: uuid.UUID
    date: date


def entry_days_ago(days: int, owner: uuid.UUID = OWNER_ID) -> Entry:
    return Entry(user_id=owner, date=NOW.date() - timedelta(days=days))


owner = Actor(id=OWNER_ID, role=UserRole.USER)
stranger = Actor(id=uuid.uuid4(), role=UserRole.USER)
admin = Actor(id=uuid.uuid4(), role=UserRole.ADMIN)
inspector = Actor(id=uuid.uuid4(), role=UserRole.INSPECTION)
developer = Actor(id=uuid.uuid4(), role=UserRole.DEVELOPER)


class TestCalendarDaysBetween:
    """Tests for calendar_days_between."""

    def test_ignores_time_of_day(self) -> None:
        late = datetime(2024, 6, 10, 23, 59, tzinfo=timezone.utc)
        assert calendar_days_between(date(2024, 6, 9), late) == 1

    def test_aware_datetime_converted_to_utc(self) -> None:
        # 01:00 on June 11 in UTC+2 is still June 10 in UTC
        plus_two = timezone(timedelta(hours=2))
        now = datetime(2024, 6, 11, 1, 0, tzinfo=plus_two)
        assert calendar_days_between(date(2024, 6, 10), now) == 0

    def test_naive_datetime_taken_as_utc(self) -> None:
        assert calendar_days_between(date(2024, 6, 7), datetime(2024, 6, 10)) == 3

    def test_future_is_negative(self) -> None:
        assert calendar_days_between(date(2024, 6, 12), NOW) == -2


class TestComputeWorklogPermission:
    """Tests for compute_worklog_permission."""

    def test_owner_on_last_day_of_window(self) -> None:
        result = compute_worklog_permission(entry_days_ago(3), owner, NOW, 3)
        assert result.can_edit is True
        assert result.can_delete is True
        assert result.edit_days_remaining == 0

    def test_owner_one_day_past_window(self) -> None:
        result = compute_worklog_permission(entry_days_ago(4), owner, NOW, 3)
        assert result.can_view is True
        assert result.can_edit is False
        assert result.can_delete is False
        assert result.edit_days_remaining == 0

    def test_owner_today(self) -> None:
        result = compute_worklog_permission(entry_days_ago(0), owner, NOW, 3)
        assert result == PermissionResult(True, True, True, edit_days_remaining=3)

    def test_owner_future_entry_not_editable(self) -> None:
        result = compute_worklog_permission(entry_days_ago(-1), owner, NOW, 3)
        assert result.can_view is True
        assert result.can_edit is False
        assert result.edit_days_remaining is None

    def test_zero_day_window_allows_today_only(self) -> None:
        assert compute_worklog_permission(entry_days_ago(0), owner, NOW, 0).can_edit
        assert not compute_worklog_permission(entry_days_ago(1), owner, NOW, 0).can_edit

    @pytest.mark.parametrize("limit", [0, 1, 2, 3, 6, 10])
    def test_edit_granted_exactly_inside_closed_window(self, limit: int) -> None:
        for days in range(-3, limit + 5):
            result = compute_worklog_permission(entry_days_ago(days), owner, NOW, limit)
            assert result.can_edit == (0 <= days <= limit), days
            assert result.can_delete == result.can_edit

    @pytest.mark.parametrize("days", [-30, -1, 0, 5, 400])
    @pytest.mark.parametrize("limit", [0, 3, 30])
    def test_admin_always_has_full_access(self, days: int, limit: int) -> None:
        result = compute_worklog_permission(entry_days_ago(days), admin, NOW, limit)
        assert (result.can_view, result.can_edit, result.can_delete) == (
            True,
            True,
            True,
        )

    @pytest.mark.parametrize("days", [-1, 0, 2, 10])
    def test_non_owner_has_no_access(self, days: int) -> None:
        result = compute_worklog_permission(entry_days_ago(days), stranger, NOW, 3)
        assert (result.can_view, result.can_edit, result.can_delete) == (
            False,
            False,
            False,
        )

    def test_inspection_views_but_never_edits(self) -> None:
        for days in (0, 1, 10):
            result = compute_worklog_permission(entry_days_ago(days), inspector, NOW, 3)
            assert result.can_view is True
            assert result.can_edit is False
            assert result.can_delete is False

    def test_inspection_owning_entry_still_view_only(self) -> None:
        entry = entry_days_ago(0, owner=inspector.id)
        result = compute_worklog_permission(entry, inspector, NOW, 3)
        assert result.can_edit is False

    def test_developer_has_no_access(self) -> None:
        entry = entry_days_ago(0, owner=developer.id)
        result = compute_worklog_permission(entry, developer, NOW, 3)
        assert result.can_view is False


class TestRoleHelpers:
    """Tests for role helper functions."""

    def test_capabilities(self) -> None:
        assert can_view_all_data(UserRole.ADMIN)
        assert can_view_all_data(UserRole.INSPECTION)
        assert not can_view_all_data(UserRole.USER)
        assert can_edit_timesheets(UserRole.USER)
        assert not can_edit_timesheets(UserRole.INSPECTION)
        assert can_manage_users(UserRole.ADMIN)
        assert not can_manage_users(UserRole.DEVELOPER)

    def test_role_names(self) -> None:
        assert get_role_display_name(UserRole.INSPECTION) == "Inspection"
        assert get_role_display_name("Manager") == "Unknown"
