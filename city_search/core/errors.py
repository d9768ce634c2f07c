"""Error Hierarchy - typed, categorized exceptions for every City Search failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Transport and decode failures are 502-level and never retried automatically
    - MalformedRecordError is recovered locally (the record is skipped, the page survives)
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with CitySearchError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    browser_id: str | None = None
    query: str | None = None
    page: int | None = None
    debug_info: dict[str, Any] | None = None


class CitySearchError(Exception):
    """Base exception for all City Search errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "browser_id": self.context.browser_id,
                    "query": self.context.query,
                    "page": self.context.page,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidPageError(CitySearchError):
    """Page numbers start at 1."""
    def __init__(self, page: int, context: ErrorContext | None = None):
        super().__init__(
            f"Page must be >= 1, got {page}",
            "INVALID_PAGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.page = page


class MalformedRecordError(CitySearchError):
    """A single remote record is missing required fields."""
    def __init__(
        self, record_id: str | None, reason: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Malformed record {record_id or '<no id>'}: {reason}",
            "MALFORMED_RECORD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 422,
        )
        self.record_id = record_id
        self.reason = reason


class ResourceNotFoundError(CitySearchError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class TransportError(CitySearchError):
    """Network failure or non-success HTTP status from the search endpoint."""
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        timed_out: bool = False,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Search endpoint unreachable: {message}",
            "TRANSPORT_ERROR",
            ErrorCategory.TIMEOUT if timed_out else ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.status_code = status_code
        self.timed_out = timed_out


class DecodeError(CitySearchError):
    """Search endpoint answered with a body that does not match the expected schema."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unexpected search response: {message}",
            "DECODE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )


class FetchAbortedError(CitySearchError):
    """Page fetch ended by cancellation or an unmapped exception."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Page fetch aborted: {message}",
            "FETCH_ABORTED", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, context, 500,
        )
