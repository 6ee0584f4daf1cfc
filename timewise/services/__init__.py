# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from timewise.services import (
    leave_service,
    permissions,
    settings_service,
    time_utils,
    validators,
)

__all__ = [
    "leave_service",
    "permissions",
    "settings_service",
    "time_utils",
    "validators",
]
