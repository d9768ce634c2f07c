"""City Search API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CitySearchError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - OpenDataSoft client opened on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: single place for startup and cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from city_search.api.error_handlers import register_error_handlers
from city_search.api.routes import browsers, health
from city_search.config import get_settings
from city_search.infrastructure.observability import setup_logging
from city_search.infrastructure.opendatasoft_client import close_client, init_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_client(
        settings.opendatasoft_base_url,
        settings.opendatasoft_dataset,
        timeout_seconds=settings.http_timeout_seconds,
    )
    logger.info("City Search API started")
    yield
    await close_client()
    logger.info("City Search API shutting down")


app = FastAPI(
    title="City Search API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(browsers.router)

register_error_handlers(app)
