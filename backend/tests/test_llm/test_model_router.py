"""Tests for model routing and the attempt temperature cycle."""

from __future__ import annotations

import pytest

from cineframe.config import settings
from cineframe.llm.model_router import (
    ANALYSIS_TEMPERATURES,
    AttemptContext,
    get_model_for_task,
    temperature_for_attempt,
)


class TestTemperature:
    def test_first_five_attempts(self):
        got = [temperature_for_attempt(n) for n in range(1, 6)]
        assert got == [0.65, 0.75, 0.80, 0.60, 0.70]

    def test_period_is_five(self):
        assert temperature_for_attempt(1) == temperature_for_attempt(6) == 0.65
        for n in range(1, 40):
            assert temperature_for_attempt(n) == temperature_for_attempt(n + 5)

    @pytest.mark.parametrize("attempt", [0, -1])
    def test_attempts_start_at_one(self, attempt):
        with pytest.raises(ValueError):
            temperature_for_attempt(attempt)

    def test_every_value_in_range(self):
        assert all(0.0 < t < 1.0 for t in ANALYSIS_TEMPERATURES)


class TestAttemptContext:
    def test_default_is_first_attempt(self):
        ctx = AttemptContext()
        assert ctx.attempt_number == 1
        assert ctx.temperature == 0.65

    def test_next_does_not_mutate(self):
        ctx = AttemptContext(5)
        nxt = ctx.next()
        assert ctx.attempt_number == 5
        assert nxt.attempt_number == 6
        assert nxt.temperature == 0.65

    def test_rejects_zero(self):
        with pytest.raises(ValueError):
            AttemptContext(0)


def test_model_for_task():
    assert get_model_for_task("analyze") == settings.model_analysis
    assert get_model_for_task("visualize") == settings.model_image
    assert get_model_for_task("anything-else") == settings.model_analysis
