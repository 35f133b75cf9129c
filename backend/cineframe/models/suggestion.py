"""Canonical shapes for normalized model output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Arbitrary slack for upstream float rounding on the far edges. Not derived
# from any measurement; kept so near-edge boxes from the model still pass.
BOX_EDGE_TOLERANCE = 0.001


def box_within_frame(x: float, y: float, width: float, height: float) -> bool:
    """True when the rectangle is a usable crop of the unit frame."""
    return (
        width > 0
        and height > 0
        and x >= 0
        and y >= 0
        and x + width <= 1.0 + BOX_EDGE_TOLERANCE
        and y + height <= 1.0 + BOX_EDGE_TOLERANCE
    )


class BoundingBox(BaseModel):
    """Crop rectangle as fractions of the source image's width/height."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="Left edge, fraction of image width")
    y: float = Field(..., description="Top edge, fraction of image height")
    width: float = Field(..., description="Fraction of image width")
    height: float = Field(..., description="Fraction of image height")

    @model_validator(mode="after")
    def _check_frame(self) -> BoundingBox:
        if not box_within_frame(self.x, self.y, self.width, self.height):
            raise ValueError("bounding box lies outside the unit frame")
        return self


class CinematicSuggestion(BaseModel):
    """Result of one analysis attempt: advice plus at most one visual output."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    analysis_text: str = Field(..., min_length=1)
    suggested_bounding_box: BoundingBox | None = None
    cinematic_concept_prompt: str | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> CinematicSuggestion:
        if self.suggested_bounding_box is not None and self.cinematic_concept_prompt is not None:
            raise ValueError("suggestedBoundingBox and cinematicConceptPrompt are mutually exclusive")
        return self

    @property
    def is_text_only(self) -> bool:
        return self.suggested_bounding_box is None and self.cinematic_concept_prompt is None
