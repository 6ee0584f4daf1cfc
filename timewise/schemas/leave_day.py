# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave day schemas."""

import uuid
from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LeaveDayCreate(BaseModel):
    """Schema for creating a leave day."""

    date: date_type
    description: str | None = Field(None, max_length=200)


class LeaveDayResponse(BaseModel):
    """Schema for leave day responses."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    date: date_type
    description: str | None = None
    created_by: uuid.UUID | None = None
    created_at: datetime
