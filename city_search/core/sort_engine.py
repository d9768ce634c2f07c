"""Sort Engine - read-only ordering of result records by the active SortState.

Invariants:
    - Pure function: input sequence is never mutated, a new list is returned
    - Stable in both directions: equal keys keep their store order
    - Idempotent: sort_records(sort_records(r, s), s) == sort_records(r, s)
    - Columns outside SORTABLE_COLUMNS return the records in store order

Design Decisions:
    - Case-insensitive key (str.casefold) stands in for locale comparison;
      no collation tables, same order on every host
    - reverse=True keeps ties in original order, so descending stays stable
"""

from collections.abc import Callable, Iterable

from city_search.core.domain_types import (
    ResultRecord, SortColumn, SortDirection, SortState,
)


_SORT_KEYS: dict[SortColumn, Callable[[ResultRecord], str]] = {
    SortColumn.NAME: lambda r: r.name.casefold(),
    SortColumn.TIMEZONE: lambda r: r.timezone.casefold(),
}


def sort_records(
    records: Iterable[ResultRecord], sort_state: SortState,
) -> list[ResultRecord]:
    """Return records ordered by sort_state. Pure, no mutation."""
    ordered = list(records)
    key = _SORT_KEYS.get(sort_state.column)
    if key is None:
        return ordered
    return sorted(
        ordered, key=key, reverse=sort_state.direction is SortDirection.DESC,
    )
