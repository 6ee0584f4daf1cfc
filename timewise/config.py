# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Process-level settings read from the environment.

Business policy (edit window, verticles, ...) is not kept here; it lives in
the system_settings table and is read per request by settings_service.
"""

import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Application settings."""

    database_url: str = Field(default="sqlite:///./timewise.db")
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        values: dict = {}
        if "DATABASE_URL" in os.environ:
            values["database_url"] = os.environ["DATABASE_URL"]
        if "LOG_LEVEL" in os.environ:
            values["log_level"] = os.environ["LOG_LEVEL"].upper()
        if "CORS_ORIGINS" in os.environ:
            values["cors_origins"] = [
                origin.strip()
                for origin in os.environ["CORS_ORIGINS"].split(",")
                if origin.strip()
            ]
        return cls(**values)


settings = Settings.from_env()
