"""
Sin Chew hot posts – Pydantic models.

Raw shapes returned by the hot list endpoint and the WordPress posts API,
and the canonical news item both paths are normalized into.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Rendered(BaseModel):
    """WordPress-style nested text: {"rendered": "..."}."""

    model_config = ConfigDict(extra="ignore")

    rendered: str | None = None

    @field_validator("rendered", mode="before")
    @classmethod
    def non_string_is_absent(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class RawHotItem(BaseModel):
    """
    One entry from the hot list endpoint.

    Field names differ between deployments, so every field is optional.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | str | None = Field(None, alias="ID")
    the_permalink: str | None = None
    permalink: str | None = None
    link: str | None = None
    url: str | None = None
    post_title: str | None = None
    title: str | Rendered | None = None
    post_excerpt: str | Rendered | None = None
    excerpt: str | Rendered | None = None
    time: str | None = None
    date_diff: str | None = None

    # PHP endpoints send false or [] for missing values; treat those as absent
    # instead of rejecting the whole row
    @field_validator("id", mode="before")
    @classmethod
    def scalar_id(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return None
        return value

    @field_validator("the_permalink", "permalink", "link", "url", "post_title", mode="before")
    @classmethod
    def string_or_absent(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None

    @field_validator("title", "post_excerpt", "excerpt", mode="before")
    @classmethod
    def text_or_rendered(cls, value: Any) -> Any:
        return value if isinstance(value, (str, dict)) else None

    @field_validator("time", "date_diff", mode="before")
    @classmethod
    def stringify_numbers(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return str(value)
        return value if isinstance(value, str) else None


class HotListResponse(BaseModel):
    """Envelope of the hot list endpoint: {"cat": ..., "result": [...]}."""

    model_config = ConfigDict(extra="ignore")

    cat: Any = None
    # Rows are validated one by one so a single bad row does not sink the page
    result: list[Any] = Field(default_factory=list)


class RawAltItem(BaseModel):
    """One post from the WordPress REST API (/wp-json/wp/v2/posts)."""

    model_config = ConfigDict(extra="ignore")

    id: int
    link: str
    title: Rendered
    excerpt: Rendered | None = None
    date: str | None = None


class NewsExtra(BaseModel):
    """
    Optional display fields.

    info is tri-state: a string, None (no data for this item), or False
    (not applicable for the source that produced the item).
    """

    info: str | Literal[False] | None = None
    hover: str | None = None


class CanonicalNewsItem(BaseModel):
    """Normalized news item shared by every source feeding the aggregator."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | str
    title: str
    url: str
    pub_date: str | None = Field(None, alias="pubDate")
    extra: NewsExtra = Field(default_factory=NewsExtra)


class HotListResult(BaseModel):
    """Outcome of one hot list request: ok is True iff items is non-empty."""

    items: list[RawHotItem] = Field(default_factory=list)
    ok: bool = False
