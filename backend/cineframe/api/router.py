"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from cineframe.api import analyze, health, visualize

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(analyze.router)
api_router.include_router(visualize.router)
