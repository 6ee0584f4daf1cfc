# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work log entry model."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date as date_type
from typing import TYPE_CHECKING

from sqlalchemy import Date, Enum, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from timewise.models.base import Base, TimestampMixin
from timewise.models.enums import WorkLogStatus

if TYPE_CHECKING:
    from timewise.models.user import User


class WorkLog(Base, TimestampMixin):
    """One unit of reported work for a single calendar day.

    Duration is stored as separate hours and minutes (0 <= minutes < 60).
    The sum across one owner's entries on the same date must stay <= 24h.
    """

    __tablename__ = "work_logs"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    user_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
    verticle: Mapped[str] = mapped_column(String(20), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    task: Mapped[str] = mapped_column(String(500), nullable=False)
    task_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    hours: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    minutes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[WorkLogStatus] = mapped_column(
        Enum(WorkLogStatus), default=WorkLogStatus.APPROVED, nullable=False
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="work_logs")

    __table_args__ = (
        Index("idx_work_logs_user_date", "user_id", "date"),
        Index("idx_work_logs_verticle_date", "verticle", "date"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<WorkLog(id={self.id}, date={self.date}, "
            f"hours={self.hours}, minutes={self.minutes}, status={self.status})>"
        )
