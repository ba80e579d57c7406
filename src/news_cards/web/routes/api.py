# ABOUTME: API routes for serving the parsed feed as JSON.
# ABOUTME: Endpoints for the news card list and health check.

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from news_cards.models import ErrorResponse, NewsItem
from news_cards.web.dependencies import AppSettings, Fetcher

router = APIRouter(prefix="/api", tags=["api"])
log = structlog.get_logger()

ERROR_MESSAGE = "Failed to fetch or parse RSS feed"


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str = "0.1.0"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for load balancer."""
    return HealthResponse(status="healthy")


@router.get(
    "/get-news",
    response_model=list[NewsItem],
    responses={500: {"model": ErrorResponse}},
)
async def get_news(fetcher: Fetcher, settings: AppSettings):
    """Fetch the configured feed and return its items as news cards.

    Any failure while fetching or parsing becomes a single 500 error body.
    """
    cors_headers = {"Access-Control-Allow-Origin": settings.cors_allow_origin}

    try:
        items = await fetcher.fetch_items()
    except Exception as e:
        log.exception("news_fetch_failed", error=str(e))
        body = ErrorResponse(error=ERROR_MESSAGE, details=str(e))
        return JSONResponse(status_code=500, content=body.model_dump(), headers=cors_headers)

    log.info("news_served", items=len(items))
    return JSONResponse(
        content=[item.to_json_dict() for item in items],
        headers={"Cache-Control": settings.cache_control, **cors_headers},
    )
