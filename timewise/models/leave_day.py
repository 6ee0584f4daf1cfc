# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organization-wide leave day model."""

import uuid as uuid_lib
from datetime import date as date_type

from sqlalchemy import Date, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timewise.models.base import Base, TimestampMixin


class LeaveDay(Base, TimestampMixin):
    """A calendar date on which regular users may not log time."""

    __tablename__ = "leave_days"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    date: Mapped[date_type] = mapped_column(
        Date, unique=True, nullable=False, index=True
    )
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)
    created_by: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<LeaveDay(date={self.date}, description={self.description!r})>"
