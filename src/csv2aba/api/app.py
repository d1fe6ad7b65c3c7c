"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from csv2aba import __version__
from csv2aba.api.routes import convert, health
from csv2aba.core.config import AppSettings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings = AppSettings()
    logging.basicConfig(level=settings.log_level)
    app.state.settings = settings
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="csv2aba Payment File Converter",
        version=__version__,
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(convert.router)
    return app
