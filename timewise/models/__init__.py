# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from timewise.models.base import Base, TimestampMixin
from timewise.models.enums import DEFAULT_VERTICLES, UserRole, WorkLogStatus
from timewise.models.leave_day import LeaveDay
from timewise.models.system_settings import SystemSettings
from timewise.models.user import User
from timewise.models.worklog import WorkLog

__all__ = [
    "Base",
    "DEFAULT_VERTICLES",
    "LeaveDay",
    "SystemSettings",
    "TimestampMixin",
    "User",
    "UserRole",
    "WorkLog",
    "WorkLogStatus",
]
