"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gemini_api_key: str = ""
    cineframe_env: str = "development"
    cineframe_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Model routing
    model_analysis: str = "gemini-2.5-flash"
    model_image: str = "imagen-3.0-generate-002"
    image_output_mime_type: str = "image/jpeg"

    # Upstream calls are never retried; this is the only bound on a request
    request_timeout_seconds: float = 120.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
