"""
API router configuration.

Aggregates all endpoint routers.
"""
from __future__ import annotations

from fastapi import APIRouter

from cnf.api.endpoints import build_step

api_router = APIRouter()

# Include routers
api_router.include_router(build_step.router)  # router already has prefix="/build-step"
