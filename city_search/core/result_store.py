"""Result Store - append-only accumulator of fetched records for one query lifecycle.

Invariants:
    - Order is fetch-arrival order; nothing reorders or removes single records
    - clear() is called only by CityBrowserState.submit()
    - records returns an immutable snapshot (callers cannot mutate storage)
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from city_search.core.domain_types import ResultRecord


@dataclass
class ResultStore:
    """Ordered records of the current lifecycle. Pure dataclass, no IO."""

    _records: list[ResultRecord] = field(default_factory=list)

    @property
    def records(self) -> tuple[ResultRecord, ...]:
        return tuple(self._records)

    def extend(self, records: Iterable[ResultRecord]) -> None:
        self._records.extend(records)

    def clear(self) -> None:
        self._records.clear()

    def names(self) -> list[str]:
        return [r.name for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ResultRecord]:
        return iter(tuple(self._records))
