"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svg_cleaner.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svg_cleaner_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="SVG Cleaner",
        description="Strips editor metadata, hidden content and redundant markup from SVG files",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all pass modules to trigger registration
    from svg_cleaner.engine.pipeline import register_passes

    register_passes()

    from svg_cleaner.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
