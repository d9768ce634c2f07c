"""OpenDataSoft Client - wraps httpx.AsyncClient for the paginated city search endpoint.

Invariants:
    - One GET per search() call with dataset, q, rows, page query parameters
    - Connection failures, timeouts and non-2xx statuses -> TransportError
    - Bodies that are not JSON -> DecodeError
    - No retry: a failure is surfaced once to the caller

Design Decisions:
    - Wrapper over raw client: isolates error mapping from the page fetcher
    - Singleton ods_client initialized on startup, closed on shutdown (FastAPI lifespan)
    - Injectable httpx transport: tests use httpx.MockTransport, no network
"""

import logging

import httpx

from city_search.core.errors import DecodeError, ErrorContext, TransportError

logger = logging.getLogger(__name__)


class OpenDataSoftClient:
    """Async client for the OpenDataSoft records search API (v1)."""

    def __init__(
        self,
        base_url: str,
        dataset: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.dataset = dataset
        self.client = httpx.AsyncClient(
            timeout=timeout_seconds, transport=transport,
        )

    async def search(self, query: str, page: int, rows: int) -> object:
        """GET one page of records. Returns the decoded JSON body."""
        context = ErrorContext(query=query, page=page)
        params = {
            "dataset": self.dataset,
            "q": query,
            "rows": rows,
            "page": page,
        }
        try:
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                context=context,
            )
        except httpx.TimeoutException:
            raise TransportError("request timed out", timed_out=True, context=context)
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__, context=context)

        try:
            body = response.json()
        except ValueError:
            raise DecodeError("body is not valid JSON", context=context)

        logger.debug(
            "OpenDataSoft search success",
            extra={"query": query, "page": page, "status_code": response.status_code},
        )
        return body

    async def aclose(self) -> None:
        await self.client.aclose()


# Singleton (initialized on startup)
ods_client: OpenDataSoftClient | None = None


def init_client(base_url: str, dataset: str, **kwargs) -> OpenDataSoftClient:
    global ods_client
    ods_client = OpenDataSoftClient(base_url, dataset, **kwargs)
    return ods_client


async def close_client() -> None:
    global ods_client
    if ods_client is not None:
        await ods_client.aclose()
        ods_client = None
