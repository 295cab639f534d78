"""
Sin Chew hot posts – transform raw rows to canonical news items.

Hot list rows go through the field extractor; WordPress posts (the
fallback source) have a fixed shape and carry no relative-age info.
"""

import logging
from typing import Any

from hot_posts.config import BASE_URL
from hot_posts.extract import (
    clean_text,
    extract_excerpt,
    extract_info,
    extract_title,
    extract_url,
    rendered_text,
)
from hot_posts.models import CanonicalNewsItem, NewsExtra, RawAltItem, RawHotItem

logger = logging.getLogger(__name__)


def normalize_hot_item(item: RawHotItem, base: str = BASE_URL) -> CanonicalNewsItem | None:
    """
    Convert one hot list row; None if it has no URL or no title.
    """
    url = extract_url(item, base)
    title = extract_title(item)
    if not url or not title:
        return None

    return CanonicalNewsItem(
        id=item.id if item.id is not None and item.id != "" else url,
        title=title,
        url=url,
        pub_date=item.time,
        extra=NewsExtra(
            info=extract_info(item),
            hover=extract_excerpt(item),
        ),
    )


def normalize_hot_items(items: list[RawHotItem], base: str = BASE_URL) -> list[CanonicalNewsItem]:
    """Normalize hot list rows, keeping upstream order."""
    news = []
    skipped = 0
    for item in items:
        normalized = normalize_hot_item(item, base)
        if normalized is None:
            skipped += 1
            continue
        news.append(normalized)

    if skipped:
        logger.info("Normalized %d hot items (%d skipped)", len(news), skipped)
    return news


def normalize_alt_item(item: RawAltItem) -> CanonicalNewsItem | None:
    """
    Convert one WordPress post; None if link or rendered title is empty.

    info is False: the posts API has no ranking or age signal at all.
    """
    link = item.link.strip()
    title = clean_text(item.title.rendered)
    if not link or not title:
        return None

    return CanonicalNewsItem(
        id=item.id,
        title=title,
        url=link,
        pub_date=item.date,
        extra=NewsExtra(info=False, hover=rendered_text(item.excerpt)),
    )


def normalize_alt_items(items: list[RawAltItem]) -> list[CanonicalNewsItem]:
    """Normalize WordPress posts, dropping exact-URL repeats (first one wins)."""
    news = []
    seen_urls: set[str] = set()
    for item in items:
        normalized = normalize_alt_item(item)
        if normalized is None or normalized.url in seen_urls:
            continue
        seen_urls.add(normalized.url)
        news.append(normalized)
    return news


def to_json_dict(item: CanonicalNewsItem) -> dict[str, Any]:
    """
    JSON shape consumed by the aggregator.

    Absent fields are omitted; info=False is kept.
    """
    return item.model_dump(by_alias=True, exclude_none=True)
