"""POST /api/analyze — cinematic composition advice for one photo."""

from __future__ import annotations

import time

from fastapi import APIRouter

from cineframe.llm.model_router import AttemptContext
from cineframe.media import decode_image_payload
from cineframe.models.requests import AnalyzeRequest
from cineframe.models.responses import AnalyzeResponse

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest) -> AnalyzeResponse:
    from cineframe.llm.client import analyze_image

    start = time.perf_counter()

    image = decode_image_payload(req.image_data, req.mime_type)
    attempt = AttemptContext(req.attempt)

    result = await analyze_image(image, attempt)

    elapsed = (time.perf_counter() - start) * 1000

    return AnalyzeResponse(
        suggestion=result.suggestion,
        attempt=attempt.attempt_number,
        next_attempt=attempt.next().attempt_number,
        temperature=attempt.temperature,
        notes=result.notes,
        processing_time_ms=round(elapsed, 1),
    )
