"""FastAPI dependency injection."""

from __future__ import annotations

from svg_wkt.config import Settings, settings


def get_settings() -> Settings:
    return settings
