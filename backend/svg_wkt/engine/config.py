"""Conversion configuration — numeric policy threaded through every builder call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svg_wkt.config import Settings


@dataclass(frozen=True)
class ConversionConfig:
    """Controls rounding and curve flattening for one conversion."""

    # Decimal places kept for sampled / derived coordinates
    precision: int = 3
    # Sample points per unit of path length when flattening curves
    density: float = 1.0

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")
        if not self.density > 0:
            raise ValueError(f"density must be > 0, got {self.density}")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ConversionConfig:
        """Read defaults from the environment-backed settings at call time."""
        if settings is None:
            from svg_wkt.config import settings
        return cls(precision=settings.svg_wkt_precision, density=settings.svg_wkt_density)
