# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserRole(str, Enum):
    """Role of an authenticated principal.

    Developer is limited to system operations and never touches work logs.
    """

    ADMIN = "Admin"
    USER = "User"
    INSPECTION = "Inspection"
    DEVELOPER = "Developer"


class WorkLogStatus(str, Enum):
    """Moderation status of a work log entry.

    Status flow:
        APPROVED → (admin reject) → REJECTED → (admin delete) → gone
    """

    APPROVED = "approved"
    REJECTED = "rejected"


DEFAULT_VERTICLES = ["CMIS", "TRI", "LOF", "TRG"]
