# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from timewise.api.v1 import leaves, system_config, worklogs

api_router = APIRouter()

api_router.include_router(worklogs.router, prefix="/worklogs", tags=["worklogs"])
api_router.include_router(leaves.router, prefix="/leaves", tags=["leaves"])
api_router.include_router(
    system_config.router, prefix="/system-config", tags=["system-config"]
)
