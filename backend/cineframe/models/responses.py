"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cineframe.models.suggestion import CinematicSuggestion


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    gemini_configured: bool = False
    analysis_model: str = ""
    image_model: str = ""


class AnalyzeResponse(BaseModel):
    suggestion: CinematicSuggestion
    attempt: int = 1
    next_attempt: int = 2
    temperature: float
    notes: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class VisualizeResponse(BaseModel):
    image_data: str
    mime_type: str
    data_url: str


class ErrorResponse(BaseModel):
    category: str
    message: str
    detail: str | None = None
