# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work log schemas."""

import uuid
from datetime import date as date_type
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from timewise.models.enums import WorkLogStatus
from timewise.schemas.common import PaginationMeta


class WorkLogCreate(BaseModel):
    """Schema for creating a work log.

    Duration is given either as hour-decimal shorthand in time_spent
    (8.2 = 8h 20m) or as separate hours and minutes.
    """

    date: date_type
    verticle: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., max_length=100)
    task: str = Field(..., max_length=500)
    task_description: str | None = None
    time_spent: Decimal | None = None
    hours: int | None = None
    minutes: int | None = None
    # Only honored for admins logging on behalf of someone else
    user_id: uuid.UUID | None = None


class WorkLogUpdate(BaseModel):
    """Schema for updating a work log. Omitted fields stay unchanged."""

    date: date_type | None = None
    verticle: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)
    task: str | None = Field(None, max_length=500)
    task_description: str | None = None
    time_spent: Decimal | None = None
    hours: int | None = None
    minutes: int | None = None

    @property
    def changes_duration(self) -> bool:
        """True when any duration field was supplied."""
        return (
            self.time_spent is not None
            or self.hours is not None
            or self.minutes is not None
        )


class WorkLogPermissions(BaseModel):
    """Permission flags attached to a work log response."""

    can_view: bool
    can_edit: bool
    can_delete: bool
    edit_days_remaining: int | None = None


class WorkLogResponse(BaseModel):
    """Schema for work log responses."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    date: date_type
    verticle: str
    country: str
    task: str
    task_description: str | None = None
    hours: int
    minutes: int
    decimal_hours: float
    time_spent_display: str
    status: WorkLogStatus
    created_at: datetime
    updated_at: datetime
    permissions: WorkLogPermissions | None = None


class WorkLogListResponse(BaseModel):
    """Paginated list of work logs."""

    data: list[WorkLogResponse]
    meta: PaginationMeta


class DailyTotalResponse(BaseModel):
    """Aggregate hours for one owner and day."""

    user_id: uuid.UUID
    date: date_type
    total_hours: float
    remaining_hours: float
