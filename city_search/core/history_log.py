"""History Log - last city name of every non-empty page, for the browser's lifetime.

Invariants:
    - One entry per recorded page with >= 1 record (the name of its last record)
    - Never cleared, never deduplicated, survives submits
    - No upper bound: callers needing bounded memory cap it themselves
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from city_search.core.domain_types import ResultRecord


@dataclass
class HistoryLog:
    """Append-only list of city names."""

    entries: list[str] = field(default_factory=list)

    def record(self, page_records: Sequence[ResultRecord]) -> None:
        if page_records:
            self.entries.append(page_records[-1].name)

    @property
    def last(self) -> str | None:
        """Most recent entry (the "last searched city"), None when empty."""
        return self.entries[-1] if self.entries else None

    def __len__(self) -> int:
        return len(self.entries)
