"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cineframe.config import settings
from cineframe.errors import CinematicError
from cineframe.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.cineframe_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def cinematic_error_handler(request: Request, exc: CinematicError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.category.value, exc.message)
    body = ErrorResponse(category=exc.category.value, message=exc.message, detail=exc.detail)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="CineFrame",
        description="Cinematic composition advice and concept renders for your photos",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CinematicError, cinematic_error_handler)

    from cineframe.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
