"""Shared test fixtures."""

from __future__ import annotations

import base64
import json

import pytest


# Raw model outputs

CROP_RESPONSE = json.dumps({
    "analysisText": "Crop tighter.",
    "suggestedBoundingBox": {"x": 0.1, "y": 0.1, "width": 0.8, "height": 0.9},
    "cinematicConceptPrompt": None,
})

OUT_OF_FRAME_RESPONSE = json.dumps({
    "analysisText": "Try this concept.",
    "suggestedBoundingBox": {"x": 0.9, "y": 0.9, "width": 0.5, "height": 0.5},
    "cinematicConceptPrompt": None,
})

CONCEPT_RESPONSE = json.dumps({
    "analysisText": "A crop won't do it; reimagine the scene at dusk.",
    "suggestedBoundingBox": None,
    "cinematicConceptPrompt": "Wide anamorphic shot of a lone cyclist on a wet street at blue hour.",
})

BOTH_RESPONSE = json.dumps({
    "analysisText": "Either crop or reimagine.",
    "suggestedBoundingBox": {"x": 0.25, "y": 0.1, "width": 0.5, "height": 0.8},
    "cinematicConceptPrompt": "Moody silhouette against a neon sign.",
})

TEXT_ONLY_RESPONSE = json.dumps({
    "analysisText": "The framing already works; focus on light.",
    "suggestedBoundingBox": None,
    "cinematicConceptPrompt": None,
})

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")
PNG_DATA_URL = f"data:image/png;base64,{PNG_B64}"

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


@pytest.fixture
def crop_response() -> str:
    return CROP_RESPONSE


@pytest.fixture
def concept_response() -> str:
    return CONCEPT_RESPONSE


@pytest.fixture
def png_data_url() -> str:
    return PNG_DATA_URL


@pytest.fixture
def gemini_key(monkeypatch):
    """Pretend an API key is configured."""
    from cineframe.config import settings

    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    return "test-key"


@pytest.fixture
def no_gemini_key(monkeypatch):
    from cineframe.config import settings

    monkeypatch.setattr(settings, "gemini_api_key", "")
