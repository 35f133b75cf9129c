"""Task → model selection, and attempt number → sampling temperature."""

from __future__ import annotations

from dataclasses import dataclass

from cineframe.config import settings

_TASK_MODEL_MAP = {
    "analyze": "analysis",
    "visualize": "image",
}

# Indexed by (attempt_number - 1) mod 5; repeated attempts on one image cycle.
ANALYSIS_TEMPERATURES: tuple[float, ...] = (0.65, 0.75, 0.80, 0.60, 0.70)


def get_model_for_task(task: str) -> str:
    kind = _TASK_MODEL_MAP.get(task, "analysis")
    if kind == "image":
        return settings.model_image
    return settings.model_analysis


def temperature_for_attempt(attempt_number: int) -> float:
    if attempt_number < 1:
        raise ValueError(f"attempt numbers start at 1, got {attempt_number}")
    return ANALYSIS_TEMPERATURES[(attempt_number - 1) % len(ANALYSIS_TEMPERATURES)]


@dataclass(frozen=True)
class AttemptContext:
    """Which analysis attempt this is for the current image (1-based)."""

    attempt_number: int = 1

    def __post_init__(self) -> None:
        if self.attempt_number < 1:
            raise ValueError(f"attempt numbers start at 1, got {self.attempt_number}")

    @property
    def temperature(self) -> float:
        return temperature_for_attempt(self.attempt_number)

    def next(self) -> AttemptContext:
        return AttemptContext(self.attempt_number + 1)
