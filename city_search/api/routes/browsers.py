"""Browser Routes - lifecycle of in-memory city browsers and the user intents they accept.

Invariants:
    - One SearchDriver per browser id, held in _browsers
    - Typing (PUT live-text), sorting and navigation never call the search endpoint
    - Every intent answers with the post-intent BrowserView
    - Unknown browser id -> ResourceNotFoundError (404)

Design Decisions:
    - _browsers as module-level dict: single-process uvicorn, state lost on restart
    - _browsers only shrinks on DELETE; abandoned browsers stay until restart
    - get_page_fetcher is a FastAPI dependency so tests can swap the fetcher
"""

import logging
from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, Response, status

from city_search.config import get_settings
from city_search.core.errors import ResourceNotFoundError
from city_search.core.protocols import PageFetcherLike
from city_search.infrastructure import opendatasoft_client
from city_search.schemas.browser import (
    BrowserCreate,
    BrowserView,
    CityChoice,
    LiveTextUpdate,
    NavigationResponse,
    SearchSubmit,
    SortSelect,
    ViewportReport,
)
from city_search.services.page_fetcher import PageFetcher
from city_search.services.search_driver import SearchDriver

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/browsers", tags=["browsers"])

_browsers: dict[UUID, SearchDriver] = {}


def get_page_fetcher() -> PageFetcherLike:
    """FastAPI dependency: PageFetcher over the shared OpenDataSoft client."""
    client = opendatasoft_client.ods_client
    if client is None:
        raise RuntimeError("OpenDataSoft client not initialized")
    return PageFetcher(client, page_size=get_settings().page_size)


def get_driver_or_404(browser_id: UUID) -> SearchDriver:
    driver = _browsers.get(browser_id)
    if driver is None:
        raise ResourceNotFoundError("Browser", str(browser_id))
    return driver


def _view(browser_id: UUID, driver: SearchDriver) -> BrowserView:
    return BrowserView.from_state(
        browser_id, driver.state, get_settings().weather_path_prefix,
    )


@router.post(
    "", response_model=BrowserView, status_code=status.HTTP_201_CREATED,
)
async def create_browser(
    body: BrowserCreate | None = None,
    fetcher: PageFetcherLike = Depends(get_page_fetcher),
):
    """Create a browser and run its initial load."""
    body = body or BrowserCreate()
    browser_id = uuid4()
    driver = SearchDriver(fetcher, browser_id=str(browser_id))
    _browsers[browser_id] = driver
    logger.info("Browser created", extra={"browser_id": str(browser_id)})
    await driver.submit(body.query)
    return _view(browser_id, driver)


@router.get("/{browser_id}", response_model=BrowserView)
async def get_browser(browser_id: UUID):
    return _view(browser_id, get_driver_or_404(browser_id))


@router.delete("/{browser_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_browser(browser_id: UUID):
    get_driver_or_404(browser_id)
    _browsers.pop(browser_id, None)
    logger.info("Browser deleted", extra={"browser_id": str(browser_id)})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{browser_id}/search", response_model=BrowserView)
async def submit_search(browser_id: UUID, body: SearchSubmit):
    """Explicit submit: resets results and loads page 1 of the query."""
    driver = get_driver_or_404(browser_id)
    await driver.submit(body.query)
    return _view(browser_id, driver)


@router.put("/{browser_id}/live-text", response_model=BrowserView)
async def update_live_text(browser_id: UUID, body: LiveTextUpdate):
    """Keystroke: refreshes suggestions only."""
    driver = get_driver_or_404(browser_id)
    driver.update_live_text(body.text)
    return _view(browser_id, driver)


@router.post("/{browser_id}/near-end", response_model=BrowserView)
async def near_end(browser_id: UUID):
    """Edge-triggered near-end signal."""
    driver = get_driver_or_404(browser_id)
    await driver.notify_near_end()
    return _view(browser_id, driver)


@router.post("/{browser_id}/viewport", response_model=BrowserView)
async def report_viewport(browser_id: UUID, body: ViewportReport):
    """Level report of the end-of-list sentinel's visibility."""
    driver = get_driver_or_404(browser_id)
    await driver.report_viewport(body.near_end)
    return _view(browser_id, driver)


@router.post("/{browser_id}/sort", response_model=BrowserView)
async def select_sort_column(browser_id: UUID, body: SortSelect):
    driver = get_driver_or_404(browser_id)
    driver.select_sort_column(body.column)
    return _view(browser_id, driver)


@router.post("/{browser_id}/navigate", response_model=NavigationResponse)
async def choose_city(browser_id: UUID, body: CityChoice):
    """Clicked suggestion or row: returns the weather page path to open."""
    driver = get_driver_or_404(browser_id)
    path = driver.choose_city(
        body.city_name, body.clear_live_text, get_settings().weather_path_prefix,
    )
    return NavigationResponse(path=path)
