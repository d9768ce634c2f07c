"""Boundary Protocols - contracts between the core state machine and the shell.

Invariants:
    - Core NEVER imports from the shell; fetchers and listeners are injected
    - A PageFetcherLike never mutates browser state, it only returns an outcome

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Async in Protocol: implementations do IO, the pure state machine does not
"""

from typing import Protocol

from city_search.core.domain_types import FetchOutcome, FetchRequest


class PageFetcherLike(Protocol):
    """Retrieves one (query, page) and reports the outcome."""
    async def fetch(self, request: FetchRequest) -> FetchOutcome: ...


class NearEndListener(Protocol):
    """What a presentation layer calls when the user scrolls near the end."""
    async def notify_near_end(self) -> bool: ...
