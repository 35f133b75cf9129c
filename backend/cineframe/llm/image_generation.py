"""Imagen call that renders a cinematic concept prompt into one image."""

from __future__ import annotations

import logging
from typing import Any

from cineframe.config import settings
from cineframe.errors import CinematicError, ErrorCategory, to_cinematic_error
from cineframe.llm.model_router import get_model_for_task
from cineframe.media import ImagePayload

logger = logging.getLogger(__name__)


def _build_client() -> Any:
    from google import genai
    from google.genai import types as genai_types

    return genai.Client(
        api_key=settings.gemini_api_key,
        http_options=genai_types.HttpOptions(timeout=int(settings.request_timeout_seconds * 1000)),
    )


async def generate_concept_image(prompt: str) -> ImagePayload:
    if not prompt or not prompt.strip():
        raise CinematicError(ErrorCategory.EMPTY_PROMPT)
    if not settings.gemini_api_key:
        raise CinematicError(ErrorCategory.NOT_CONFIGURED)

    from google.genai import types as genai_types

    mime_type = settings.image_output_mime_type
    try:
        client = _build_client()
        response = await client.aio.models.generate_images(
            model=get_model_for_task("visualize"),
            prompt=prompt,
            config=genai_types.GenerateImagesConfig(
                number_of_images=1,
                output_mime_type=mime_type,
            ),
        )
    except Exception as e:
        logger.exception("Error generating image with %s", get_model_for_task("visualize"))
        raise to_cinematic_error(e, "image_generation") from e

    generated = getattr(response, "generated_images", None) or []
    image = generated[0].image if generated else None
    image_bytes = getattr(image, "image_bytes", None) if image is not None else None
    if not image_bytes:
        logger.error("Image model returned %d images but no image bytes", len(generated))
        raise CinematicError(ErrorCategory.NO_IMAGE_RETURNED)

    return ImagePayload(
        data=image_bytes,
        mime_type=getattr(image, "mime_type", None) or mime_type,
    )
