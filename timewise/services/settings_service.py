# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""System configuration stored in the system_settings table.

Values are read on every call; admins can change the edit window and the
verticle list at runtime and the next request sees the new values.
"""

import json
import logging
from typing import Any

from sqlalchemy.orm import Session

from timewise.models import SystemSettings
from timewise.schemas.system_config import SystemConfig, SystemConfigUpdate

logger = logging.getLogger(__name__)


def get_setting(db: Session, key: str) -> Any | None:
    """Get a decoded setting value, or None if unset."""
    setting = db.query(SystemSettings).filter(SystemSettings.key == key).first()
    if setting is None:
        return None
    return json.loads(setting.value)


def set_setting(db: Session, key: str, value: Any) -> None:
    """Create or replace a setting."""
    encoded = json.dumps(value)
    setting = db.query(SystemSettings).filter(SystemSettings.key == key).first()
    if setting is None:
        db.add(SystemSettings(key=key, value=encoded))
    else:
        setting.value = encoded
    db.commit()


def get_system_config(db: Session) -> SystemConfig:
    """Load the current system configuration, falling back to defaults."""
    rows = (
        db.query(SystemSettings)
        .filter(SystemSettings.key.in_(list(SystemConfig.model_fields)))
        .all()
    )
    stored = {row.key: json.loads(row.value) for row in rows}
    return SystemConfig(**{k: v for k, v in stored.items() if v is not None})


def update_system_config(db: Session, data: SystemConfigUpdate) -> SystemConfig:
    """Merge a partial update into the stored configuration."""
    changes = data.model_dump(exclude_unset=True)
    current = get_system_config(db)
    merged = SystemConfig(**{**current.model_dump(), **changes})

    for name in changes:
        set_setting(db, name, getattr(merged, name))

    if changes:
        logger.info(f"System configuration updated: {sorted(changes)}")
    return merged
