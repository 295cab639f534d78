"""
Sin Chew hot posts – configuration.

Endpoint constants, request fingerprint, and settings loaded from the
environment (optionally via a .env file).
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

BASE_URL = "https://www.sinchew.com.my"
HOT_LIST_PATH = "/hot-post-list/"
HOT_REFERER_PATH = "/hot-posts/"
ALT_API_PATH = "/wp-json/wp/v2/posts"

# Page 1 is always populated; used when the configured page comes back empty
FALLBACK_PAGE = 1
DEFAULT_PAGE = 3
DEFAULT_RANGE = "1D"
VALID_RANGES = ("6H", "1D", "1W")

ALT_PER_PAGE = 10
ALT_FIELDS = "id,link,title,excerpt,date"

# Edge caching TTLs (seconds)
HOT_CACHE_TTL = 180
ALT_CACHE_TTL = 300

REQUEST_TIMEOUT = 30
POLL_MINUTES = 30

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0 Safari/537.36"
)
ACCEPT_LANGUAGE = "zh-CN,zh;q=0.9,en;q=0.8"

# Set by the Functions Framework and Cloud Run respectively
EDGE_RUNTIME_MARKERS = ("FUNCTION_TARGET", "K_SERVICE")

TRUTHY = ("1", "true", "yes", "on")
FALSY = ("0", "false", "no", "off")

TimeRange = Literal["6H", "1D", "1W"]


class HotListSettings(BaseModel):
    """Process-wide settings for one hot list pipeline."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(DEFAULT_PAGE, ge=1)
    range: TimeRange = DEFAULT_RANGE
    cache_bust: bool = False
    edge_runtime: bool = False
    timeout: float = Field(REQUEST_TIMEOUT, gt=0)
    poll_minutes: int = Field(POLL_MINUTES, ge=1)


def env_flag(name: str) -> bool | None:
    """Read a boolean env var; None when unset or unrecognised."""
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    return None


def detect_edge_runtime() -> bool:
    """
    Guess whether we run in a request-scoped serverless runtime.

    SINCHEW_EDGE_RUNTIME overrides the guess; otherwise the presence of
    a Functions Framework / Cloud Run marker variable decides.
    """
    override = env_flag("SINCHEW_EDGE_RUNTIME")
    if override is not None:
        return override
    return any(os.getenv(marker) for marker in EDGE_RUNTIME_MARKERS)


def load_settings() -> HotListSettings:
    """
    Build settings from the environment.

    Raises:
        pydantic.ValidationError: if page, range, timeout or poll interval are invalid.
    """
    return HotListSettings(
        page=os.getenv("SINCHEW_HOT_PAGE", str(DEFAULT_PAGE)),
        range=os.getenv("SINCHEW_HOT_RANGE", DEFAULT_RANGE).strip().upper(),
        cache_bust=bool(env_flag("SINCHEW_CACHE_BUST")),
        edge_runtime=detect_edge_runtime(),
        timeout=os.getenv("SINCHEW_HTTP_TIMEOUT", str(REQUEST_TIMEOUT)),
        poll_minutes=os.getenv("SINCHEW_POLL_MINUTES", str(POLL_MINUTES)),
    )
