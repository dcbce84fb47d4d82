"""Universal Unit Converter — FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings as default_settings
from app.api.routes_converter import router as converter_router
from app.core.catalog import CategoryCatalog
from app.core.controller import ConverterController
from app.models.view_model import Theme
from app.services.conversion_client import build_client

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    catalog: Optional[CategoryCatalog] = None,
) -> FastAPI:
    """Build the app. One controller per process backs the single session."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = build_client(settings, transport=transport)
        app.state.controller = ConverterController(
            client, catalog=catalog, history_limit=settings.history_limit
        )
        logger.info("Conversion service at %s", settings.backend_url)
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(
        title=settings.app_name,
        version=VERSION,
        description="Unit and currency conversion front end for an external conversion service.",
        lifespan=lifespan,
    )
    app.state.theme = Theme.from_settings(settings)
    app.state.title = settings.app_name

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(converter_router, prefix="/api")

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "version": VERSION}

    return app


app = create_app()
