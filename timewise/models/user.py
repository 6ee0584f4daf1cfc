# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User model.

Credentials and sessions are handled upstream; this table only records who
may act and in which role.
"""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from timewise.models.base import Base, TimestampMixin
from timewise.models.enums import UserRole

if TYPE_CHECKING:
    from timewise.models.worklog import WorkLog


class User(Base, TimestampMixin):
    """User model for authorization."""

    __tablename__ = "users"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole), default=UserRole.USER, nullable=False
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    work_logs: Mapped[list[WorkLog]] = relationship(
        "WorkLog",
        back_populates="user",
        cascade="all, delete-orphan",
    )
