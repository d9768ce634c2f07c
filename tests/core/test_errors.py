"""Error Hierarchy tests - codes, categories and the REST envelope.

Tests cover:
    - Transport/decode errors are 502 and external_api (timeouts: timeout category)
    - MalformedRecordError is a warning carrying record id and reason
    - FetchAbortedError is a 500 internal error
    - to_response() envelope shape
"""

from city_search.core.errors import (
    DecodeError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    FetchAbortedError,
    MalformedRecordError,
    ResourceNotFoundError,
    TransportError,
)


def test_transport_error_is_502_external_api():
    err = TransportError("HTTP 503", status_code=503)
    assert err.http_status == 502
    assert err.category == ErrorCategory.EXTERNAL_API
    assert err.code == "TRANSPORT_ERROR"


def test_timed_out_transport_error_uses_timeout_category():
    err = TransportError("request timed out", timed_out=True)
    assert err.category == ErrorCategory.TIMEOUT


def test_decode_error_is_502():
    err = DecodeError("body is not valid JSON")
    assert err.http_status == 502
    assert "not valid JSON" in err.message


def test_malformed_record_is_warning():
    err = MalformedRecordError("r1", "fields.name: Field required")
    assert err.severity == ErrorSeverity.WARNING
    assert err.record_id == "r1"
    assert "r1" in err.message


def test_to_response_envelope():
    err = ResourceNotFoundError(
        "Browser", "abc", context=ErrorContext(browser_id="abc"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"]["browser_id"] == "abc"
    assert "timestamp" in body


def test_fetch_aborted_is_internal_500():
    err = FetchAbortedError("RuntimeError")
    assert err.code == "FETCH_ABORTED"
    assert err.category == ErrorCategory.INTERNAL
    assert err.http_status == 500
    assert "RuntimeError" in err.message
