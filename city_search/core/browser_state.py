"""City Browser State - in-memory search state machine for one browser.

Invariants:
    - Typing (update_live_text) never produces a FetchRequest
    - submit() is atomic: store clear, page reset, has_more reset, new lifecycle
      token and the page-1 request come from one synchronous call
    - At most one fetch in flight: on_viewport_edge() returns None unless IDLE
    - page_number only advances on a near-end signal while has_more is True,
      and never past a page whose fetch failed (that page is requested again)
    - A viewport crossing only counts once it has issued a request
    - Outcomes from an older lifecycle, or for a page not in flight, are discarded
    - history survives submits; results do not

Design Decisions:
    - Pure dataclass with explicit entry points: the shell performs the IO
      and feeds outcomes back through on_fetch_outcome()
    - Projections (sorted_results, suggestions) computed on every access, never cached
"""

from dataclasses import dataclass, field

from city_search.core.domain_types import (
    FetchOutcome,
    FetchRequest,
    LifecycleToken,
    PaginationPhase,
    ResultRecord,
    SortColumn,
    SortState,
)
from city_search.core.edge_trigger import EdgeTrigger
from city_search.core.history_log import HistoryLog
from city_search.core.navigation import DEFAULT_WEATHER_PREFIX, weather_path
from city_search.core.result_store import ResultStore
from city_search.core.sort_engine import sort_records
from city_search.core.suggestion_filter import filter_suggestions


@dataclass
class CityBrowserState:
    """Per-browser search state. Pure, no IO."""

    # === Query (live text drives suggestions, committed query drives fetches) ===
    live_text: str = ""
    committed_query: str | None = None  # None until the first submit

    # === Lifecycle data (reset on submit) ===
    results: ResultStore = field(default_factory=ResultStore)
    page_number: int = 1
    has_more: bool = True
    phase: PaginationPhase = PaginationPhase.IDLE
    lifecycle: LifecycleToken = LifecycleToken(0)
    page_failed: bool = False
    last_error: str | None = None
    edge_trigger: EdgeTrigger = field(default_factory=EdgeTrigger)

    # === Browser lifetime (never reset) ===
    history: HistoryLog = field(default_factory=HistoryLog)
    sort_state: SortState = field(default_factory=SortState)

    # --- Computed properties ---------------------------------------------------

    @property
    def loading(self) -> bool:
        return self.phase is PaginationPhase.FETCHING

    @property
    def last_searched_city(self) -> str | None:
        return self.history.last

    @property
    def sorted_results(self) -> list[ResultRecord]:
        return sort_records(self.results, self.sort_state)

    @property
    def suggestions(self) -> list[str]:
        return filter_suggestions(self.results, self.live_text)

    # --- Entry points ----------------------------------------------------------

    def submit(self, text: str) -> FetchRequest:
        """Start a new lifecycle for text and return its page-1 request."""
        self.lifecycle = LifecycleToken(self.lifecycle + 1)
        self.committed_query = text
        self.live_text = text
        self.results.clear()
        self.page_number = 1
        self.has_more = True
        self.page_failed = False
        self.last_error = None
        self.phase = PaginationPhase.FETCHING
        self.edge_trigger.rearm()
        return FetchRequest(self.lifecycle, text, 1)

    def update_live_text(self, text: str) -> None:
        self.live_text = text

    def on_viewport_edge(self) -> FetchRequest | None:
        """Near-end signal. Returns the next request, or None if nothing to fetch."""
        if self.committed_query is None:
            return None
        if self.phase is not PaginationPhase.IDLE or not self.has_more:
            return None
        if not self.page_failed:
            self.page_number += 1
        self.phase = PaginationPhase.FETCHING
        return FetchRequest(self.lifecycle, self.committed_query, self.page_number)

    def observe_viewport(self, near_end: bool) -> FetchRequest | None:
        """Level report of the end-of-list sentinel; only a crossing signals.

        A crossing refused while a fetch is in flight is not recorded, so the
        next near-end report fires it once the page has landed.
        """
        if not self.edge_trigger.rising(near_end):
            self.edge_trigger.observe(near_end)
            return None
        request = self.on_viewport_edge()
        if request is not None:
            self.edge_trigger.observe(near_end)
        return request

    def on_fetch_outcome(self, outcome: FetchOutcome) -> bool:
        """Apply an outcome. Returns False when it was stale and discarded."""
        if not self.is_current(outcome):
            return False

        if not outcome.ok:
            # has_more and results keep their pre-fetch values
            self.page_failed = True
            self.last_error = outcome.error.code
            self.phase = PaginationPhase.IDLE
            # the sentinel stays in view after a failure; the next report retries
            self.edge_trigger.rearm()
            return True

        self.results.extend(outcome.records)
        self.history.record(outcome.records)
        self.has_more = outcome.more
        self.page_failed = False
        self.last_error = None
        self.phase = (
            PaginationPhase.IDLE if self.has_more else PaginationPhase.EXHAUSTED
        )
        return True

    def is_current(self, outcome: FetchOutcome) -> bool:
        """True when outcome answers the request currently in flight."""
        return (
            outcome.token == self.lifecycle
            and self.phase is PaginationPhase.FETCHING
            and outcome.page == self.page_number
        )

    def select_sort_column(self, column: SortColumn) -> SortState:
        self.sort_state = self.sort_state.select(column)
        return self.sort_state

    def choose_city(
        self,
        city_name: str,
        clear_live_text: bool = True,
        prefix: str = DEFAULT_WEATHER_PREFIX,
    ) -> str:
        """Return the weather path for city_name; clearing live text fetches nothing."""
        if clear_live_text:
            self.live_text = ""
        return weather_path(city_name, prefix)
