"""Conversion result and API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class NamedSpace(BaseModel):
    """Geometry of one element carrying an `id` attribute."""

    id: str
    title: str | None = None
    space: str


class TextLabel(BaseModel):
    """A text run as a two-point line in root coordinates."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    path: str
    font_size: str | None = Field(default=None, alias="fontSize")
    font_family: str | None = Field(default=None, alias="fontFamily")


class ConversionResult(BaseModel):
    detail: str
    spaces: list[NamedSpace] = Field(default_factory=list)
    strings: list[TextLabel] = Field(default_factory=list)
