# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""System configuration API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from timewise.api.deps import get_current_actor, get_current_admin, get_db
from timewise.schemas.system_config import SystemConfig, SystemConfigUpdate
from timewise.services import settings_service
from timewise.services.permissions import Actor

router = APIRouter()


@router.get("", response_model=SystemConfig)
def get_system_config(
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
) -> SystemConfig:
    """Get the current system configuration."""
    return settings_service.get_system_config(db)


@router.put("", response_model=SystemConfig)
def update_system_config(
    data: SystemConfigUpdate,
    db: Session = Depends(get_db),
    admin: Actor = Depends(get_current_admin),
) -> SystemConfig:
    """Update the system configuration (admin only)."""
    return settings_service.update_system_config(db, data)
