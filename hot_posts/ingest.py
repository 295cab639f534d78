"""
Sin Chew hot posts – endpoint client.

Hot list endpoint (undocumented AJAX):
    GET https://www.sinchew.com.my/hot-post-list/?taxid=-1&page={n}&range={6H|1D|1W}&umcl=Y
Fallback (WordPress REST API):
    GET https://www.sinchew.com.my/wp-json/wp/v2/posts?per_page=10&_fields=id,link,title,excerpt,date

Neither call raises: transport and decode failures come back as empty results.
The hot list rejects requests that do not look like a browser XHR, hence
the full header set.
"""

import json
import logging
import time
from typing import Any

import requests
from pydantic import BaseModel, ValidationError

from hot_posts.config import (
    ACCEPT_LANGUAGE,
    ALT_API_PATH,
    ALT_CACHE_TTL,
    ALT_FIELDS,
    ALT_PER_PAGE,
    BASE_URL,
    HOT_CACHE_TTL,
    HOT_LIST_PATH,
    HOT_REFERER_PATH,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from hot_posts.models import HotListResponse, HotListResult, RawAltItem, RawHotItem

logger = logging.getLogger(__name__)


def build_hot_params(
    page: int,
    range_: str,
    cache_bust: bool = False,
    now: float | None = None,
) -> dict[str, str]:
    """Query string for the hot list endpoint."""
    params = {
        "taxid": "-1",
        "page": str(page),
        "range": range_,
        "umcl": "Y",
    }
    if cache_bust:
        params["_"] = str(int((time.time() if now is None else now) * 1000))
    return params


def build_hot_headers() -> dict[str, str]:
    return {
        "User-Agent": USER_AGENT,
        "Accept": "application/json, text/javascript, */*; q=0.01",
        "Accept-Language": ACCEPT_LANGUAGE,
        "X-Requested-With": "XMLHttpRequest",
        "Referer": f"{BASE_URL}{HOT_REFERER_PATH}",
    }


def build_alt_params() -> dict[str, str]:
    return {"per_page": str(ALT_PER_PAGE), "_fields": ALT_FIELDS}


def build_alt_headers() -> dict[str, str]:
    return {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
        "Referer": f"{BASE_URL}/",
    }


def cache_headers(ttl: int, cache_everything: bool = True) -> dict[str, str]:
    """
    Caching hints for a caching proxy in front of the edge runtime's egress.

    These are advisory: "public" is a response directive, so a plain HTTP cache
    ignores it on a request. cache_everything adds it to ask an intermediary
    that honours it to keep every response variant, not only the ones
    cacheable by default.
    """
    directive = f"max-age={ttl}"
    if cache_everything:
        directive = f"public, {directive}"
    return {"Cache-Control": directive}


def decode_body(response: requests.Response) -> Any:
    """
    Parse a JSON body, unwrapping JSON that was delivered as a JSON string.

    Raises:
        ValueError: if the body (or the unwrapped string) is not JSON.
    """
    data = response.json()
    if isinstance(data, str):
        data = json.loads(data)
    return data


def validate_rows(model: type[BaseModel], rows: list[Any]) -> list:
    """Validate rows one by one, skipping (and logging) the invalid ones."""
    items = []
    for index, row in enumerate(rows):
        try:
            items.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning("Skipping invalid %s row #%d: %s", model.__name__, index, e)
    return items


def parse_hot_payload(data: Any) -> list[RawHotItem]:
    """Rows of a decoded hot list body; [] when the envelope is unusable."""
    try:
        envelope = HotListResponse.model_validate(data)
    except ValidationError as e:
        logger.warning("Unexpected hot list response structure: %s", e)
        return []
    return validate_rows(RawHotItem, envelope.result)


def parse_alt_payload(data: Any) -> list[RawAltItem]:
    if not isinstance(data, list):
        logger.warning("Unexpected posts API response type: %s", type(data).__name__)
        return []
    return validate_rows(RawAltItem, data)


def fetch_hot(
    page: int,
    range_: str,
    *,
    edge_runtime: bool = False,
    cache_bust: bool = False,
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> HotListResult:
    """
    Fetch one page of the hot list.

    Args:
        page: Page number (1 is the most reliably populated)
        range_: Time range code: 6H, 1D or 1W
        edge_runtime: Attach edge caching hints
        cache_bust: Append a millisecond timestamp parameter
        session: Optional requests session (defaults to module-level requests)
        timeout: Request timeout in seconds

    Returns:
        HotListResult; ok is True iff at least one row was parsed.
    """
    http = session or requests
    url = f"{BASE_URL}{HOT_LIST_PATH}"
    params = build_hot_params(page, range_, cache_bust=cache_bust)
    headers = build_hot_headers()
    if edge_runtime:
        headers.update(cache_headers(HOT_CACHE_TTL))

    logger.info("Requesting hot list page=%s range=%s", page, range_)
    try:
        response = http.get(url, params=params, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.warning("Hot list request failed (page=%s): %s", page, e)
        return HotListResult()

    try:
        data = decode_body(response)
    except ValueError as e:
        logger.warning("Hot list body is not JSON (page=%s): %s", page, e)
        return HotListResult()

    if response.status_code >= 400:
        # Status alone does not decide; an error page may still carry rows
        logger.warning("Hot list returned HTTP %s (page=%s)", response.status_code, page)

    items = parse_hot_payload(data)
    logger.info("Fetched %d hot items (page=%s, range=%s)", len(items), page, range_)
    return HotListResult(items=items, ok=bool(items))


def fetch_alternate(
    *,
    edge_runtime: bool = False,
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> list[RawAltItem]:
    """Fetch the latest posts from the WordPress REST API; [] on any failure."""
    http = session or requests
    url = f"{BASE_URL}{ALT_API_PATH}"
    headers = build_alt_headers()
    if edge_runtime:
        headers.update(cache_headers(ALT_CACHE_TTL))

    logger.info("Requesting posts API: %s", url)
    try:
        response = http.get(url, params=build_alt_params(), headers=headers, timeout=timeout)
        data = decode_body(response)
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.warning("Posts API request failed: %s", e)
        return []

    items = parse_alt_payload(data)
    logger.info("Fetched %d posts from posts API", len(items))
    return items
