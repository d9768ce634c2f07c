"""OpenDataSoft Client tests - request shape and error mapping over httpx.MockTransport.

Tests cover:
    - Query parameters: dataset, q (URL-encoded, may be empty), rows, page
    - Decoded JSON body returned on 2xx
    - Non-2xx status -> TransportError with status_code
    - Connection failure and timeout -> TransportError
    - Non-JSON body -> DecodeError
    - Singleton init/close
"""

import httpx
import pytest

from city_search.core.errors import DecodeError, TransportError
from city_search.infrastructure import opendatasoft_client
from city_search.infrastructure.opendatasoft_client import (
    OpenDataSoftClient, close_client, init_client,
)

_BASE_URL = "https://ods.test/api/records/1.0/search/"
_DATASET = "geonames-all-cities-with-a-population-1000"


def _client(handler) -> OpenDataSoftClient:
    return OpenDataSoftClient(
        _BASE_URL, _DATASET, transport=httpx.MockTransport(handler),
    )


async def test_search_sends_expected_parameters():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"records": []})

    client = _client(handler)
    body = await client.search("São Paulo", 3, rows=10)
    await client.aclose()

    assert body == {"records": []}
    params = seen[0].url.params
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api/records/1.0/search/"
    assert params["dataset"] == _DATASET
    assert params["q"] == "São Paulo"
    assert params["rows"] == "10"
    assert params["page"] == "3"


async def test_search_with_empty_query():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"records": []})

    client = _client(handler)
    await client.search("", 1, rows=10)
    await client.aclose()
    assert seen[0].url.params["q"] == ""


async def test_non_success_status_raises_transport_error():
    client = _client(lambda request: httpx.Response(503, text="unavailable"))
    with pytest.raises(TransportError) as exc_info:
        await client.search("Lon", 1, rows=10)
    await client.aclose()
    assert exc_info.value.status_code == 503
    assert exc_info.value.code == "TRANSPORT_ERROR"
    assert exc_info.value.context.page == 1


async def test_connection_failure_raises_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)
    with pytest.raises(TransportError) as exc_info:
        await client.search("Lon", 1, rows=10)
    await client.aclose()
    assert exc_info.value.status_code is None
    assert not exc_info.value.timed_out


async def test_timeout_raises_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    client = _client(handler)
    with pytest.raises(TransportError) as exc_info:
        await client.search("Lon", 1, rows=10)
    await client.aclose()
    assert exc_info.value.timed_out


async def test_invalid_json_raises_decode_error():
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(DecodeError):
        await client.search("Lon", 1, rows=10)
    await client.aclose()


async def test_init_and_close_singleton():
    client = init_client(_BASE_URL, _DATASET, timeout_seconds=2.0)
    assert opendatasoft_client.ods_client is client
    await close_client()
    assert opendatasoft_client.ods_client is None
