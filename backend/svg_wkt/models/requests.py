"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    precision: int | None = Field(
        default=None,
        ge=0,
        description="Decimal places for sampled coordinates (server default when omitted)",
    )
    density: float | None = Field(
        default=None,
        gt=0,
        description="Curve sample points per unit of path length (server default when omitted)",
    )
