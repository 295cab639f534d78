"""
Sin Chew hot posts – fetch pipeline.

Order of attempts:
    1. hot list, configured page
    2. hot list, page 1 (only if the configured page is not already 1)
    3. WordPress posts API (only in the edge runtime, where blocking is common)

The hot list is preferred for its ranking; the posts API trades ranking for
availability. The pipeline never raises: total failure is an empty list.
"""

import asyncio
import json
import logging
from datetime import datetime

import requests

from hot_posts.config import FALLBACK_PAGE, HotListSettings, load_settings
from hot_posts.ingest import fetch_alternate, fetch_hot
from hot_posts.models import CanonicalNewsItem, RawHotItem
from hot_posts.transform import normalize_alt_items, normalize_hot_items, to_json_dict

logger = logging.getLogger(__name__)


class HotNewsPipeline:
    """
    One configured hot news source.

    Holds settings and an optional session only; every run() is independent.
    """

    def __init__(self, settings: HotListSettings, session: requests.Session | None = None):
        self.settings = settings
        self.session = session

    def _fetch_page(self, session: requests.Session, page: int) -> list[RawHotItem]:
        try:
            result = fetch_hot(
                page,
                self.settings.range,
                edge_runtime=self.settings.edge_runtime,
                cache_bust=self.settings.cache_bust,
                session=session,
                timeout=self.settings.timeout,
            )
        except Exception:
            logger.exception("Unexpected error fetching hot list page %s", page)
            return []
        return result.items if result.ok else []

    def _run(self, session: requests.Session) -> list[CanonicalNewsItem]:
        page = self.settings.page
        items = self._fetch_page(session, page)

        if not items and page != FALLBACK_PAGE:
            logger.info("Hot list page %s empty, retrying page %s", page, FALLBACK_PAGE)
            items = self._fetch_page(session, FALLBACK_PAGE)

        if not items and self.settings.edge_runtime:
            logger.info("Hot list exhausted, falling back to posts API")
            alt_items = fetch_alternate(
                edge_runtime=True,
                session=session,
                timeout=self.settings.timeout,
            )
            news = normalize_alt_items(alt_items)
            if news:
                return news

        return normalize_hot_items(items)

    def run(self) -> list[CanonicalNewsItem]:
        """Fetch and normalize; returns [] on total failure."""
        try:
            if self.session is not None:
                return self._run(self.session)
            with requests.Session() as session:
                return self._run(session)
        except Exception:
            logger.exception("Hot news pipeline failed")
            return []


_settings: HotListSettings | None = None


def get_settings() -> HotListSettings:
    """Settings resolved once per process (runtime detection included)."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def fetch_hot_news(settings: HotListSettings | None = None) -> list[CanonicalNewsItem]:
    """Entry point for the aggregator: canonical items, never raises."""
    try:
        settings = settings or get_settings()
    except Exception:
        logger.exception("Invalid hot news settings")
        return []
    return HotNewsPipeline(settings).run()


async def fetch_hot_news_async(settings: HotListSettings | None = None) -> list[CanonicalNewsItem]:
    """Async variant of fetch_hot_news; the HTTP calls run in a worker thread."""
    return await asyncio.to_thread(fetch_hot_news, settings)


def main():
    """Fetch once and print the items as JSON lines."""
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    print(f"=== Sin Chew hot news: {datetime.now().isoformat()} ===")
    print(
        f"page={settings.page} range={settings.range} "
        f"edge_runtime={settings.edge_runtime} cache_bust={settings.cache_bust}"
    )
    news = fetch_hot_news(settings)
    for item in news:
        print(json.dumps(to_json_dict(item), ensure_ascii=False))
    print(f"Fetched {len(news)} items.")


if __name__ == "__main__":
    main()
