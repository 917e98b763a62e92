"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svg_wkt_env: str = "development"
    svg_wkt_log_level: str = "info"

    # Numeric policy defaults
    svg_wkt_precision: int = 3
    svg_wkt_density: float = 1.0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
