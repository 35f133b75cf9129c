"""Failure taxonomy and the substring classifier for upstream errors.

Every failure that ends an attempt is raised as a ``CinematicError`` tagged with
an ``ErrorCategory``. Raw exceptions from the Gemini/Imagen clients are mapped
onto a category by ``classify_failure``, which only looks at the failure's
description. The remote service owns those strings, so matching is best-effort.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

Operation = Literal["analysis", "image_generation"]


class ErrorCategory(str, Enum):
    MALFORMED_RESPONSE = "malformed_response"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    INVALID_API_KEY = "invalid_api_key"
    SAFETY_BLOCKED = "safety_blocked"
    RATE_LIMITED = "rate_limited"
    INVALID_PROMPT = "invalid_prompt"
    EMPTY_PROMPT = "empty_prompt"
    NO_IMAGE_RETURNED = "no_image_returned"
    NOT_CONFIGURED = "not_configured"
    INVALID_IMAGE = "invalid_image"
    UNKNOWN = "unknown"


_STATUS_CODES: dict[ErrorCategory, int] = {
    ErrorCategory.MALFORMED_RESPONSE: 502,
    ErrorCategory.MISSING_REQUIRED_FIELD: 502,
    ErrorCategory.INVALID_API_KEY: 502,
    ErrorCategory.SAFETY_BLOCKED: 422,
    ErrorCategory.RATE_LIMITED: 429,
    ErrorCategory.INVALID_PROMPT: 422,
    ErrorCategory.EMPTY_PROMPT: 400,
    ErrorCategory.NO_IMAGE_RETURNED: 502,
    ErrorCategory.NOT_CONFIGURED: 503,
    ErrorCategory.INVALID_IMAGE: 400,
    ErrorCategory.UNKNOWN: 502,
}

# Messages that do not depend on which call failed
_FIXED_MESSAGES: dict[ErrorCategory, str] = {
    ErrorCategory.MALFORMED_RESPONSE: "AI response could not be parsed as a JSON object.",
    ErrorCategory.MISSING_REQUIRED_FIELD: "AI response is missing required field: analysisText.",
    ErrorCategory.EMPTY_PROMPT: "Image generation prompt cannot be empty.",
    ErrorCategory.NO_IMAGE_RETURNED: "AI did not return a valid image. No image data found.",
    ErrorCategory.NOT_CONFIGURED: "API key not configured for Gemini service. Set GEMINI_API_KEY.",
    ErrorCategory.INVALID_IMAGE: "Could not parse file data. Ensure it's a valid image.",
}

_OPERATION_MESSAGES: dict[Operation, dict[ErrorCategory, str]] = {
    "analysis": {
        ErrorCategory.INVALID_API_KEY: "Invalid API Key. Please check your configuration.",
        ErrorCategory.SAFETY_BLOCKED: (
            "The image or request was blocked due to safety settings. "
            "Please try a different image or adjust your query."
        ),
        ErrorCategory.RATE_LIMITED: (
            "The AI service is currently busy or rate limits exceeded. Please try again later."
        ),
        ErrorCategory.UNKNOWN: "Failed to get cinematic suggestion from AI: {description}",
    },
    "image_generation": {
        ErrorCategory.INVALID_API_KEY: (
            "Invalid API Key for image generation. Please check your configuration."
        ),
        ErrorCategory.SAFETY_BLOCKED: (
            "The image generation prompt was blocked due to safety settings. "
            "Please try a different prompt."
        ),
        ErrorCategory.RATE_LIMITED: "Image generation rate limit exceeded. Please try again later.",
        ErrorCategory.INVALID_PROMPT: (
            "The provided prompt for image generation was considered invalid by the AI. "
            "Try rephrasing."
        ),
        ErrorCategory.UNKNOWN: "Failed to generate image: {description}",
    },
}

# Checked in order; first hit wins
_MARKERS: tuple[tuple[ErrorCategory, tuple[str, ...]], ...] = (
    (ErrorCategory.INVALID_API_KEY, ("API key not valid",)),
    (ErrorCategory.SAFETY_BLOCKED, ("SAFETY",)),
    (ErrorCategory.RATE_LIMITED, ("RESOURCE_EXHAUSTED", "Rate limit")),
    (ErrorCategory.INVALID_PROMPT, ("Invalid prompt",)),
)

_OPERATION_CATEGORIES: dict[Operation, frozenset[ErrorCategory]] = {
    "analysis": frozenset({
        ErrorCategory.INVALID_API_KEY,
        ErrorCategory.SAFETY_BLOCKED,
        ErrorCategory.RATE_LIMITED,
    }),
    "image_generation": frozenset({
        ErrorCategory.INVALID_API_KEY,
        ErrorCategory.SAFETY_BLOCKED,
        ErrorCategory.RATE_LIMITED,
        ErrorCategory.INVALID_PROMPT,
    }),
}


class CinematicError(Exception):
    """A classified failure that ends the current attempt."""

    def __init__(
        self,
        category: ErrorCategory,
        message: str | None = None,
        detail: str | None = None,
    ):
        self.category = category
        self.message = message or _FIXED_MESSAGES.get(category, category.value)
        self.detail = detail
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.category]


def describe_failure(exc: BaseException) -> str:
    """Best available text for an exception; never empty."""
    text = str(exc).strip()
    return text or type(exc).__name__


def classify_failure(description: str, operation: Operation) -> ErrorCategory:
    """Map a failure description onto a category for the given call path."""
    allowed = _OPERATION_CATEGORIES[operation]
    for category, markers in _MARKERS:
        if category not in allowed:
            continue
        if any(marker in description for marker in markers):
            return category
    return ErrorCategory.UNKNOWN


def message_for(category: ErrorCategory, operation: Operation, description: str = "") -> str:
    template = _OPERATION_MESSAGES[operation].get(category)
    if template is None:
        return _FIXED_MESSAGES.get(category, category.value)
    return template.format(description=description or "unknown error")


def to_cinematic_error(exc: BaseException, operation: Operation) -> CinematicError:
    """Wrap any exception from a remote call as a classified error."""
    if isinstance(exc, CinematicError):
        return exc
    description = describe_failure(exc)
    category = classify_failure(description, operation)
    return CinematicError(
        category,
        message=message_for(category, operation, description),
        detail=description,
    )
