# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import uuid
from datetime import datetime, timezone
from typing import NoReturn

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from timewise.database import get_db
from timewise.models import User
from timewise.schemas.system_config import SystemConfig
from timewise.services import settings_service
from timewise.services.exceptions import WorkLogError
from timewise.services.permissions import Actor, can_manage_users


def get_current_user(
    db: Session = Depends(get_db),
    x_user_id: str | None = Header(default=None),
) -> User:
    """Resolve the user identified by the upstream authentication layer."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        user_id = uuid.UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user identity",
        ) from None

    user = db.get(User, user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def get_current_actor(current_user: User = Depends(get_current_user)) -> Actor:
    """Actor identity for the current request."""
    return Actor(id=current_user.id, role=current_user.role)


def get_current_admin(actor: Actor = Depends(get_current_actor)) -> Actor:
    """Current actor, verified to be an admin."""
    if not can_manage_users(actor.role):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return actor


def get_system_config(db: Session = Depends(get_db)) -> SystemConfig:
    """System configuration, freshly read for this request."""
    return settings_service.get_system_config(db)


def get_now() -> datetime:
    """Current UTC time for this request."""
    return datetime.now(timezone.utc)


def raise_http_error(error: WorkLogError) -> NoReturn:
    """Translate a rule violation into an HTTP error."""
    raise HTTPException(status_code=error.status_code, detail=error.to_dict())
