"""
Sin Chew hot posts – field extraction.

Picks title, URL, excerpt and relative age out of hot list rows whose
field names vary between deployments.
"""

import re
from html import unescape
from urllib.parse import urljoin

from hot_posts.config import BASE_URL
from hot_posts.models import RawHotItem, Rendered

TAG_RE = re.compile(r"<[^>]*?>")
WHITESPACE_RE = re.compile(r"\s+")

URL_FIELDS = ("the_permalink", "permalink", "link", "url")


def clean_text(value: str | None) -> str | None:
    """
    Strip tags, unescape entities and collapse whitespace.

    Returns None when nothing is left.
    """
    if not value:
        return None
    text = TAG_RE.sub("", value)
    text = unescape(text)
    text = WHITESPACE_RE.sub(" ", text).strip()
    return text or None


def rendered_text(value: str | Rendered | None) -> str | None:
    """Plain text of a field that may be a string or {"rendered": ...}."""
    if isinstance(value, Rendered):
        return clean_text(value.rendered)
    return clean_text(value)


def extract_title(item: RawHotItem) -> str:
    """
    Resolve the item title; "" means the item should be discarded.

    A nested title object wins over post_title, even when its rendered
    text is missing.
    """
    if isinstance(item.title, Rendered):
        return clean_text(item.title.rendered) or ""
    for candidate in (item.post_title, item.title):
        title = clean_text(candidate)
        if title:
            return title
    return ""


def absolute_url(href: str, base: str = BASE_URL) -> str:
    """Return href unchanged if it has an http(s) scheme, else resolve it against base."""
    if href.lower().startswith(("http://", "https://")):
        return href
    return urljoin(base.rstrip("/") + "/", href)


def extract_url(item: RawHotItem, base: str = BASE_URL) -> str | None:
    """First non-blank URL field, made absolute; None if there is none."""
    for field in URL_FIELDS:
        href = (getattr(item, field) or "").strip()
        if href:
            return absolute_url(href, base)
    return None


def extract_excerpt(item: RawHotItem) -> str | None:
    for candidate in (item.post_excerpt, item.excerpt):
        text = rendered_text(candidate)
        if text:
            return text
    return None


def extract_info(item: RawHotItem) -> str | None:
    info = (item.date_diff or "").strip()
    return info or None
