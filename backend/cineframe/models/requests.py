"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    image_data: str = Field(..., description="Base64 image data or a data: URL")
    mime_type: str | None = Field(
        default=None,
        description="Image MIME type; taken from the data URL or sniffed when omitted",
    )
    attempt: int = Field(
        default=1,
        ge=1,
        description="1-based attempt number for this image; selects the sampling temperature",
    )


class VisualizeRequest(BaseModel):
    prompt: str = Field(..., description="Cinematic concept prompt from a previous analysis")
