"""Health Probe - liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - Never calls the search endpoint
"""

import logging
from fastapi import APIRouter, status

from city_search.infrastructure import opendatasoft_client

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "city-search-api",
        "version": "1.0.0",
        "search_client": (
            "initialized" if opendatasoft_client.ods_client else "not_initialized"
        ),
    }
