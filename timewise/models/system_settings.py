# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Key/value system settings model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from timewise.models.base import Base, TimestampMixin


class SystemSettings(Base, TimestampMixin):
    """Single system setting; values are JSON-encoded text."""

    __tablename__ = "system_settings"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
