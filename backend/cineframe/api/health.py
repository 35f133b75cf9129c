"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cineframe.config import Settings
from cineframe.dependencies import get_settings
from cineframe.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        gemini_configured=bool(cfg.gemini_api_key),
        analysis_model=cfg.model_analysis,
        image_model=cfg.model_image,
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from cineframe.llm.prompts import get_all_templates

    return get_all_templates()
