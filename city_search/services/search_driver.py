"""Search Driver - runs one CityBrowserState against a page fetcher.

Invariants:
    - Every mutation goes through a CityBrowserState entry point
    - The request is produced synchronously before the first await, so a
      submit is never observed half-applied
    - Outcomes that no longer match the live lifecycle are discarded (logged at DEBUG)
    - At most one fetch in flight per browser (the state refuses a second one)
    - A fetch that raises (cancellation, unmapped error) is applied as a failed
      page before the exception propagates, so loading never sticks

Design Decisions:
    - Methods await the fetch and return whether anything was applied, so an
      HTTP handler can answer with the post-fetch view
    - Implements NearEndListener: the presentation layer needs no other hook
"""

import asyncio
import logging

from city_search.core.browser_state import CityBrowserState
from city_search.core.domain_types import (
    FetchOutcome, FetchRequest, SortColumn, SortState,
)
from city_search.core.errors import FetchAbortedError
from city_search.core.protocols import PageFetcherLike

logger = logging.getLogger(__name__)


class SearchDriver:
    """Event entry points for one browser: submit, type, scroll, sort, choose."""

    def __init__(
        self,
        fetcher: PageFetcherLike,
        state: CityBrowserState | None = None,
        browser_id: str | None = None,
    ):
        self.fetcher = fetcher
        self.state = state or CityBrowserState()
        self.browser_id = browser_id

    async def submit(self, text: str) -> bool:
        """Start a new lifecycle for text and load its first page."""
        request = self.state.submit(text)
        logger.info(
            "Search submitted",
            extra=self._extra(request, query=text),
        )
        return await self._run(request)

    def update_live_text(self, text: str) -> list[str]:
        """Record typed text and return the refreshed suggestions. No fetch."""
        self.state.update_live_text(text)
        return self.state.suggestions

    async def notify_near_end(self) -> bool:
        """Edge-triggered near-end signal from the presentation layer."""
        request = self.state.on_viewport_edge()
        if request is None:
            logger.debug(
                "Near-end ignored",
                extra={"browser_id": self.browser_id, "page": self.state.page_number},
            )
            return False
        return await self._run(request)

    async def report_viewport(self, near_end: bool) -> bool:
        """Level visibility report; fetches only on a near-end crossing."""
        request = self.state.observe_viewport(near_end)
        if request is None:
            return False
        return await self._run(request)

    def select_sort_column(self, column: SortColumn) -> SortState:
        return self.state.select_sort_column(column)

    def choose_city(
        self, city_name: str, clear_live_text: bool, prefix: str,
    ) -> str:
        return self.state.choose_city(city_name, clear_live_text, prefix)

    async def _run(self, request: FetchRequest) -> bool:
        try:
            outcome = await self.fetcher.fetch(request)
        except asyncio.CancelledError:
            logger.info(
                "Page fetch cancelled", extra=self._extra(request, query=request.query),
            )
            self._abort(request, "cancelled")
            raise
        except Exception as e:
            logger.error(
                "Unexpected error in page fetch: %s", e,
                extra=self._extra(request, query=request.query), exc_info=True,
            )
            self._abort(request, type(e).__name__)
            raise
        applied = self.state.on_fetch_outcome(outcome)
        if not applied:
            logger.debug(
                "Discarded stale page outcome",
                extra=self._extra(request, query=request.query),
            )
        return applied

    def _abort(self, request: FetchRequest, reason: str) -> None:
        # returns the in-flight page to IDLE so the next near-end retries it
        self.state.on_fetch_outcome(
            FetchOutcome.failure(request, FetchAbortedError(reason)),
        )

    def _extra(self, request: FetchRequest, **fields) -> dict:
        return {
            "browser_id": self.browser_id,
            "page": request.page,
            "lifecycle": request.token,
            **fields,
        }
