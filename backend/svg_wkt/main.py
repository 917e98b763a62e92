"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svg_wkt import __version__
from svg_wkt.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svg_wkt_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svg-wkt",
        description="SVG shape markup to Well-Known Text geometry",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from svg_wkt.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
