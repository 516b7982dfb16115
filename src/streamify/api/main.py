"""Streamify API application factory.

Builds an `AppContext` (settings, database, chat-service client), assembles
the request pipeline once, and connects MongoDB in the lifespan so the
database is ready before the server accepts traffic.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger
from motor.motor_asyncio import AsyncIOMotorDatabase

from .. import __version__
from ..config import Settings, get_settings
from ..context import AppContext
from ..pipeline import RequestPipeline
from ..services import StreamClient
from .stages import default_pipeline


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    context: AppContext = app.state.context
    settings = context.settings
    await context.connect()
    logger.info("Streamify API started")
    logger.info(f"Environment: {settings.NODE_ENV}")
    logger.info(f"Frontend URL: {settings.FRONTEND_URL or 'Not set'}")
    yield
    await context.close()
    logger.info("Streamify API shutting down")


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[AsyncIOMotorDatabase] = None,
    stream: Optional[StreamClient] = None,
    pipeline: Optional[RequestPipeline] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Defaults to the process settings
        database: Pre-connected database; skips the lifespan connection
        stream: Chat-service client override
        pipeline: Stage list override; defaults to `default_pipeline()`
    """
    settings = settings or get_settings()
    context = AppContext.from_settings(settings, database=database, stream=stream)

    app = FastAPI(
        title="Streamify API",
        description="Authentication, friendship and chat-token API",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
    )
    app.state.context = context

    (pipeline or default_pipeline()).assemble(app, context)
    return app
