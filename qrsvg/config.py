"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    qrsvg_env: str = "development"
    qrsvg_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # PNG export: output pixels per SVG unit
    png_scale: float = 2.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
