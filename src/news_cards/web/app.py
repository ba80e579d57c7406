# ABOUTME: FastAPI application factory with settings held in app state.
# ABOUTME: Main entry point for the news cards JSON API.

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from news_cards.config import Settings, get_settings
from news_cards.web.routes import api

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan context for startup/shutdown logging."""
    logger.info("app_startup", feed_url=app.state.settings.feed_url)
    yield
    logger.info("app_shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="News Cards",
        description="RSS news feed served as JSON for card rendering",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()

    app.include_router(api.router)

    return app


# Application instance for uvicorn
app = create_app()
