"""Tests for concept image generation (google-genai client replaced with a fake)."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest

from cineframe.errors import CinematicError, ErrorCategory
from cineframe.llm import image_generation
from tests.conftest import JPEG_BYTES


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def generate_images(self, model, prompt, config):
        self.calls.append({"model": model, "prompt": prompt, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


def _images(*items):
    return SimpleNamespace(generated_images=list(items))


def _image(data, mime_type="image/jpeg"):
    return SimpleNamespace(image=SimpleNamespace(image_bytes=data, mime_type=mime_type))


@pytest.fixture
def fake_models(monkeypatch, gemini_key):
    models = FakeModels(response=_images(_image(JPEG_BYTES)))
    monkeypatch.setattr(
        image_generation,
        "_build_client",
        lambda: SimpleNamespace(aio=SimpleNamespace(models=models)),
    )
    return models


def test_returns_first_image(fake_models):
    payload = asyncio.run(image_generation.generate_concept_image("Rainy neon street, 35mm"))
    assert payload.data == JPEG_BYTES
    assert payload.mime_type == "image/jpeg"
    call = fake_models.calls[0]
    assert call["prompt"] == "Rainy neon street, 35mm"
    assert call["config"].number_of_images == 1
    assert call["config"].output_mime_type == "image/jpeg"


@pytest.mark.parametrize("prompt", ["", "   \n\t"])
def test_empty_prompt_rejected_before_call(fake_models, prompt):
    with pytest.raises(CinematicError) as exc_info:
        asyncio.run(image_generation.generate_concept_image(prompt))
    assert exc_info.value.category is ErrorCategory.EMPTY_PROMPT
    assert fake_models.calls == []


@pytest.mark.parametrize("response", [
    _images(),
    SimpleNamespace(generated_images=None),
    _images(_image(None)),
    _images(_image(b"")),
])
def test_no_image_returned(fake_models, response):
    fake_models.response = response
    with pytest.raises(CinematicError) as exc_info:
        asyncio.run(image_generation.generate_concept_image("Lighthouse at dawn"))
    assert exc_info.value.category is ErrorCategory.NO_IMAGE_RETURNED


@pytest.mark.parametrize("message,expected", [
    ("Invalid prompt", ErrorCategory.INVALID_PROMPT),
    ("blocked: SAFETY", ErrorCategory.SAFETY_BLOCKED),
    ("Rate limit exceeded", ErrorCategory.RATE_LIMITED),
    ("API key not valid", ErrorCategory.INVALID_API_KEY),
    ("boom", ErrorCategory.UNKNOWN),
])
def test_upstream_failures_classified(fake_models, message, expected):
    fake_models.error = RuntimeError(message)
    with pytest.raises(CinematicError) as exc_info:
        asyncio.run(image_generation.generate_concept_image("Lighthouse at dawn"))
    assert exc_info.value.category is expected


def test_requires_api_key(no_gemini_key):
    with pytest.raises(CinematicError) as exc_info:
        asyncio.run(image_generation.generate_concept_image("Lighthouse at dawn"))
    assert exc_info.value.category is ErrorCategory.NOT_CONFIGURED
