"""Turn raw vision-model text into a CinematicSuggestion.

Only two things reject a response outright: text that is not a JSON object,
and a missing/blank ``analysisText``. Everything else is repaired in place
(conflicting outputs, out-of-frame boxes, junk concept prompts) and the repair
is recorded as a note, since the written analysis is still worth returning.
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any

from cineframe.errors import CinematicError, ErrorCategory
from cineframe.models.suggestion import BoundingBox, CinematicSuggestion, box_within_frame

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)

_BOX_FIELDS = ("x", "y", "width", "height")


@dataclass
class NormalizationResult:
    suggestion: CinematicSuggestion
    notes: list[str] = field(default_factory=list)


def strip_code_fence(text: str) -> str:
    """Drop a surrounding ```lang ... ``` fence, if there is one."""
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    if match and match.group(2):
        return match.group(2).strip()
    return stripped


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _parse_box(raw: Any) -> BoundingBox | None:
    if not isinstance(raw, dict):
        return None
    if not all(_is_number(raw.get(name)) for name in _BOX_FIELDS):
        return None
    x, y, width, height = (float(raw[name]) for name in _BOX_FIELDS)
    if not box_within_frame(x, y, width, height):
        return None
    return BoundingBox(x=x, y=y, width=width, height=height)


def normalize_response(raw_text: str) -> NormalizationResult:
    """Validate and repair one analysis response.

    Raises CinematicError (MALFORMED_RESPONSE, MISSING_REQUIRED_FIELD) for the
    two hard failures; all other problems degrade a field to None.
    """
    body = strip_code_fence(raw_text or "")

    try:
        data = json.loads(body)
    except (json.JSONDecodeError, ValueError, RecursionError) as e:
        raise CinematicError(ErrorCategory.MALFORMED_RESPONSE, detail=str(e)) from e

    if not isinstance(data, dict):
        raise CinematicError(
            ErrorCategory.MALFORMED_RESPONSE,
            detail=f"expected a JSON object, got {type(data).__name__}",
        )

    analysis_text = data.get("analysisText")
    if not isinstance(analysis_text, str) or not analysis_text.strip():
        raise CinematicError(ErrorCategory.MISSING_REQUIRED_FIELD)

    notes: list[str] = []
    raw_box = data.get("suggestedBoundingBox")
    concept = data.get("cinematicConceptPrompt")

    if concept is not None and (not isinstance(concept, str) or not concept.strip()):
        notes.append("cinematicConceptPrompt was not a usable string; treating as null.")
        concept = None

    if raw_box is not None and concept is not None:
        notes.append(
            "AI returned both suggestedBoundingBox and cinematicConceptPrompt; "
            "keeping the bounding box and dropping the concept prompt."
        )
        concept = None

    box = None
    if raw_box is not None:
        box = _parse_box(raw_box)
        if box is None:
            notes.append(f"AI returned an invalid suggestedBoundingBox, treating as null: {raw_box!r}")

    if box is None and concept is None:
        notes.append(
            "AI provided analysisText but neither a suggestedBoundingBox "
            "nor a cinematicConceptPrompt."
        )

    for note in notes:
        logger.warning(note)

    suggestion = CinematicSuggestion(
        analysis_text=analysis_text,
        suggested_bounding_box=box,
        cinematic_concept_prompt=concept,
    )
    return NormalizationResult(suggestion=suggestion, notes=notes)
