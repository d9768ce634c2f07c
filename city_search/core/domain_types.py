"""Domain Types - value objects shared by the core state machine and the shell.

Invariants:
    - ResultRecord is immutable once created
    - population is a non-negative int, coordinates a serialized "lat, lon" string
    - FetchRequest.page >= 1; FetchOutcome echoes the token and page of its request
    - FetchOutcome.more is True only for a successful, non-empty page
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - Frozen dataclasses: hashable, comparable, no boundary validation in core
    - str Enums: serialize to JSON without custom encoders
    - LifecycleToken as NewType over int: zero runtime cost
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

from city_search.core.errors import CitySearchError, InvalidPageError


# ─── Identity Types ──────────────────────────────────────────────

LifecycleToken = NewType("LifecycleToken", int)


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    """Sort direction of the results table."""
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortColumn(str, Enum):
    """Table columns a user can click. Only NAME and TIMEZONE define an order."""
    NAME = "name"
    COUNTRY_NAME = "country_name"
    POPULATION = "population"
    TIMEZONE = "timezone"
    COORDINATES = "coordinates"


SORTABLE_COLUMNS = frozenset({SortColumn.NAME, SortColumn.TIMEZONE})


class PaginationPhase(str, Enum):
    """Pagination machine states. EXHAUSTED is terminal until the next submit."""
    IDLE = "idle"
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class ResultRecord:
    """One city row as returned by the search endpoint."""
    id: str
    name: str
    country_name: str
    population: int
    timezone: str
    coordinates: str


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction."""
    column: SortColumn = SortColumn.NAME
    direction: SortDirection = SortDirection.ASC

    def select(self, column: SortColumn) -> "SortState":
        """Same column flips direction; another column starts ascending."""
        if column == self.column:
            return SortState(column, self.direction.flipped())
        return SortState(column, SortDirection.ASC)


@dataclass(frozen=True)
class FetchRequest:
    """A (query, page) retrieval issued by the state machine."""
    token: LifecycleToken
    query: str
    page: int

    def __post_init__(self):
        if self.page < 1:
            raise InvalidPageError(self.page)


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one FetchRequest: records on success, error on failure."""
    token: LifecycleToken
    query: str
    page: int
    records: tuple[ResultRecord, ...] = ()
    error: CitySearchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def more(self) -> bool:
        return self.ok and len(self.records) > 0

    @classmethod
    def success(
        cls, request: FetchRequest, records: list[ResultRecord],
    ) -> "FetchOutcome":
        return cls(request.token, request.query, request.page, tuple(records))

    @classmethod
    def failure(
        cls, request: FetchRequest, error: CitySearchError,
    ) -> "FetchOutcome":
        return cls(request.token, request.query, request.page, error=error)
