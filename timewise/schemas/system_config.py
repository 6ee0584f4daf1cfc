# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""System configuration schemas."""

from pydantic import BaseModel, Field

from timewise.models.enums import DEFAULT_VERTICLES

DEFAULT_COUNTRIES = ["USA", "UK", "Canada", "Australia", "Japan"]
DEFAULT_TASKS = [
    "Video Editing",
    "Content Creation",
    "Meeting",
    "Documentation",
    "Development",
    "Design",
    "Research",
    "Testing",
    "Training",
    "Client Communication",
    "Project Management",
    "Quality Assurance",
    "Code Review",
]


class SystemConfig(BaseModel):
    """Admin-editable business policy, read fresh on every request."""

    system_name: str = Field(default="TimeWise")
    edit_time_limit: int = Field(default=3, ge=0)
    max_hours_per_day: float = Field(default=24.0, gt=0, le=24)
    available_verticles: list[str] = Field(
        default_factory=lambda: list(DEFAULT_VERTICLES)
    )
    available_countries: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COUNTRIES)
    )
    available_tasks: list[str] = Field(default_factory=lambda: list(DEFAULT_TASKS))
    # ISO 3166 code; when set, public holidays count as leave days
    public_holiday_country: str | None = Field(default=None, max_length=2)


class SystemConfigUpdate(BaseModel):
    """Partial update of the system configuration."""

    system_name: str | None = Field(None, max_length=100)
    edit_time_limit: int | None = Field(None, ge=0)
    max_hours_per_day: float | None = Field(None, gt=0, le=24)
    available_verticles: list[str] | None = Field(None, min_length=1)
    available_countries: list[str] | None = None
    available_tasks: list[str] | None = None
    public_holiday_country: str | None = Field(None, max_length=2)
