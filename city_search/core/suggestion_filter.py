"""Suggestion Filter - live-text autocomplete over the current lifecycle's records.

Invariants:
    - Pure function: no IO, no memory between calls
    - Case-insensitive substring match on the record name
    - Preserves store order; empty live text yields every name
    - Draws only from the records passed in (never from history)
"""

from collections.abc import Iterable

from city_search.core.domain_types import ResultRecord


def filter_suggestions(
    records: Iterable[ResultRecord], live_text: str,
) -> list[str]:
    """Names whose lowercase form contains the lowercase live text."""
    needle = live_text.lower()
    return [r.name for r in records if needle in r.name.lower()]
