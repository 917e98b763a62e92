"""POST /api/convert — SVG markup → WKT geometry collection, spaces and text labels."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from svg_wkt.config import Settings
from svg_wkt.dependencies import get_settings
from svg_wkt.engine.config import ConversionConfig
from svg_wkt.engine.converter import create_converter
from svg_wkt.errors import ConversionError
from svg_wkt.models.requests import ConvertRequest
from svg_wkt.models.responses import ConversionResult

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/convert",
    response_model=ConversionResult,
    response_model_exclude_none=True,
)
def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConversionResult:
    defaults = ConversionConfig.from_settings(settings)
    config = ConversionConfig(
        precision=defaults.precision if req.precision is None else req.precision,
        density=defaults.density if req.density is None else req.density,
    )

    try:
        return create_converter(config).convert(req.svg)
    except ConversionError as e:
        logger.warning("Conversion rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
