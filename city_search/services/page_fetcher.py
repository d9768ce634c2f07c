"""Page Fetcher - one asynchronous retrieval for a FetchRequest.

Invariants:
    - fetch() never raises for transport or decode failures: they become
      FetchOutcome.failure() so the state machine can clear its loading flag
    - Outcomes echo the token and page of their request
    - No state mutation, no retry

Design Decisions:
    - Page size injected from settings: the state machine never sees `rows`
"""

import logging

from city_search.core.domain_types import FetchOutcome, FetchRequest
from city_search.core.errors import DecodeError, TransportError
from city_search.infrastructure.opendatasoft_client import OpenDataSoftClient
from city_search.services.record_normalizer import normalize_page

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches and normalizes one page of city records."""

    def __init__(self, client: OpenDataSoftClient, page_size: int = 10):
        self.client = client
        self.page_size = page_size

    async def fetch(self, request: FetchRequest) -> FetchOutcome:
        log_extra = {
            "query": request.query,
            "page": request.page,
            "lifecycle": request.token,
        }
        try:
            body = await self.client.search(
                request.query, request.page, rows=self.page_size,
            )
            records = normalize_page(body)
        except (TransportError, DecodeError) as e:
            logger.error(
                f"Page fetch failed: {e.message}",
                extra={**log_extra, "error_code": e.code},
            )
            return FetchOutcome.failure(request, e)

        logger.info(
            "Page fetched",
            extra={**log_extra, "record_count": len(records)},
        )
        return FetchOutcome.success(request, records)
