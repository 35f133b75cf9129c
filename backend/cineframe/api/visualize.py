"""POST /api/visualize — render a concept prompt with the image model."""

from __future__ import annotations

from fastapi import APIRouter

from cineframe.models.requests import VisualizeRequest
from cineframe.models.responses import VisualizeResponse

router = APIRouter()


@router.post("/visualize", response_model=VisualizeResponse)
async def visualize(req: VisualizeRequest) -> VisualizeResponse:
    from cineframe.llm.image_generation import generate_concept_image

    image = await generate_concept_image(req.prompt)

    return VisualizeResponse(
        image_data=image.to_base64(),
        mime_type=image.mime_type,
        data_url=image.to_data_url(),
    )
