"""LangChain ChatGoogleGenerativeAI wrapper for the cinematic analysis call."""

from __future__ import annotations

import logging
from typing import Any

from cineframe.config import settings
from cineframe.errors import CinematicError, ErrorCategory, to_cinematic_error
from cineframe.llm.model_router import AttemptContext, get_model_for_task
from cineframe.llm.normalizer import NormalizationResult, normalize_response
from cineframe.llm.prompts import build_analysis_prompt
from cineframe.media import ImagePayload

logger = logging.getLogger(__name__)


def _build_llm(temperature: float) -> Any:
    from langchain_google_genai import ChatGoogleGenerativeAI

    return ChatGoogleGenerativeAI(
        model=get_model_for_task("analyze"),
        google_api_key=settings.gemini_api_key,
        temperature=temperature,
        response_mime_type="application/json",
        timeout=settings.request_timeout_seconds,
        max_retries=0,
    )


def _response_text(content: Any) -> str:
    """Flatten AIMessage.content, which may be a list of content blocks."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)


async def analyze_image(
    image: ImagePayload,
    attempt: AttemptContext | None = None,
) -> NormalizationResult:
    """Ask the vision model for cinematic advice on one image.

    Raises CinematicError on any failure; the category says what went wrong.
    """
    if not settings.gemini_api_key:
        raise CinematicError(ErrorCategory.NOT_CONFIGURED)

    from langchain_core.messages import HumanMessage

    attempt = attempt or AttemptContext()
    temperature = attempt.temperature
    logger.info("Using temperature: %.2f for attempt %d", temperature, attempt.attempt_number)

    message = HumanMessage(
        content=[
            {"type": "image_url", "image_url": image.to_data_url()},
            {"type": "text", "text": build_analysis_prompt()},
        ]
    )

    try:
        llm = _build_llm(temperature)
        response = await llm.ainvoke([message])
    except Exception as e:
        logger.exception("Error in analyze_image (attempt %d)", attempt.attempt_number)
        raise to_cinematic_error(e, "analysis") from e

    try:
        return normalize_response(_response_text(response.content))
    except CinematicError as e:
        logger.error("Rejected analysis response: %s (%s)", e.message, e.detail or "-")
        raise
