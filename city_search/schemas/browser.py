"""Browser Schemas - request/response models for the browser API.

Invariants:
    - SearchSubmit.query may be empty (matches all cities); it is never stripped
    - SortSelect.column is one of the table's columns (SortColumn)
    - BrowserView is a snapshot: results are already the sorted projection

Design Decisions:
    - BrowserView.from_state builds the view from the pure state in one place
"""

from uuid import UUID

from pydantic import BaseModel, Field

from city_search.core.browser_state import CityBrowserState
from city_search.core.domain_types import (
    PaginationPhase, ResultRecord, SortColumn, SortDirection,
)
from city_search.core.navigation import weather_path


class BrowserCreate(BaseModel):
    """Browser creation: the initial load runs with this query."""
    query: str = Field("", max_length=500)


class SearchSubmit(BaseModel):
    query: str = Field(max_length=500)


class LiveTextUpdate(BaseModel):
    text: str = Field(max_length=500)


class ViewportReport(BaseModel):
    near_end: bool


class SortSelect(BaseModel):
    column: SortColumn


class CityChoice(BaseModel):
    """A clicked suggestion or row. Right-click keeps the live text."""
    city_name: str = Field(min_length=1, max_length=500)
    clear_live_text: bool = True


class NavigationResponse(BaseModel):
    path: str


class SortView(BaseModel):
    column: SortColumn
    direction: SortDirection


class RecordView(BaseModel):
    id: str
    name: str
    country_name: str
    population: int
    timezone: str
    coordinates: str
    weather_path: str

    @classmethod
    def from_record(cls, record: ResultRecord, prefix: str) -> "RecordView":
        return cls(
            id=record.id,
            name=record.name,
            country_name=record.country_name,
            population=record.population,
            timezone=record.timezone,
            coordinates=record.coordinates,
            weather_path=weather_path(record.name, prefix),
        )


class BrowserView(BaseModel):
    """Everything a presentation layer needs to render one browser."""
    id: UUID
    live_text: str
    committed_query: str | None
    page_number: int
    has_more: bool
    loading: bool
    phase: PaginationPhase
    sort: SortView
    results: list[RecordView]
    suggestions: list[str]
    last_searched_city: str | None
    history: list[str]
    last_error: str | None

    @classmethod
    def from_state(
        cls, browser_id: UUID, state: CityBrowserState, prefix: str,
    ) -> "BrowserView":
        return cls(
            id=browser_id,
            live_text=state.live_text,
            committed_query=state.committed_query,
            page_number=state.page_number,
            has_more=state.has_more,
            loading=state.loading,
            phase=state.phase,
            sort=SortView(
                column=state.sort_state.column,
                direction=state.sort_state.direction,
            ),
            results=[
                RecordView.from_record(r, prefix) for r in state.sorted_results
            ],
            suggestions=state.suggestions,
            last_searched_city=state.last_searched_city,
            history=list(state.history.entries),
            last_error=state.last_error,
        )
