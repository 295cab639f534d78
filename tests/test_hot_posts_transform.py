"""Tests for hot_posts transform: normalize_hot_items, normalize_alt_items, to_json_dict."""

from hot_posts.models import RawAltItem, RawHotItem
from hot_posts.transform import (
    normalize_alt_item,
    normalize_alt_items,
    normalize_hot_item,
    normalize_hot_items,
    to_json_dict,
)


def hot(**fields) -> RawHotItem:
    return RawHotItem.model_validate(fields)


def alt(**fields) -> RawAltItem:
    return RawAltItem.model_validate(fields)


def test_normalize_hot_item_full():
    item = hot(
        ID=123,
        the_permalink="/news/123",
        post_title="Headline",
        post_excerpt="<p>Hello&nbsp; world</p>",
        time="2024-05-01 10:00:00",
        date_diff="2小时前",
    )
    news = normalize_hot_item(item)
    assert news.id == 123
    assert news.title == "Headline"
    assert news.url == "https://www.sinchew.com.my/news/123"
    assert news.pub_date == "2024-05-01 10:00:00"
    assert news.extra.info == "2小时前"
    assert news.extra.hover == "Hello world"


def test_normalize_hot_item_id_falls_back_to_url():
    news = normalize_hot_item(hot(url="https://example.com/x", title="X"))
    assert news.id == "https://example.com/x"


def test_normalize_hot_item_string_id_kept():
    news = normalize_hot_item(hot(ID="abc", url="https://example.com/x", title="X"))
    assert news.id == "abc"


def test_normalize_hot_item_optional_fields_absent():
    news = normalize_hot_item(hot(url="https://example.com/x", title="X", date_diff=""))
    assert news.pub_date is None
    assert news.extra.info is None
    assert news.extra.hover is None


def test_normalize_hot_items_discards_unusable_rows():
    items = [
        hot(ID=1, title="No URL"),
        hot(ID=2, url="https://example.com/2", title="   "),
        hot(ID=3, url="https://example.com/3", title={"rendered": ""}, post_title="Ignored"),
        hot(ID=4, url="https://example.com/4", title="Kept"),
    ]
    news = normalize_hot_items(items)
    assert [n.id for n in news] == [4]


def test_normalize_hot_items_preserves_order_and_duplicates():
    items = [
        hot(ID=2, url="https://example.com/b", title="B"),
        hot(ID=1, url="https://example.com/a", title="A"),
        hot(ID=3, url="https://example.com/a", title="A again"),
    ]
    assert [n.id for n in normalize_hot_items(items)] == [2, 1, 3]


def test_normalize_alt_item():
    item = alt(
        id=42,
        link="https://www.sinchew.com.my/news/42",
        title={"rendered": "Title &#8211; <em>one</em>"},
        excerpt={"rendered": "<p>Some\n excerpt</p>\n"},
        date="2024-05-01T10:00:00",
    )
    news = normalize_alt_item(item)
    assert news.id == 42
    assert news.title == "Title – one"
    assert news.url == "https://www.sinchew.com.my/news/42"
    assert news.pub_date == "2024-05-01T10:00:00"
    assert news.extra.info is False
    assert news.extra.hover == "Some excerpt"


def test_normalize_alt_item_missing_title_or_link():
    assert normalize_alt_item(alt(id=1, link="https://example.com/1", title={})) is None
    assert normalize_alt_item(alt(id=2, link=" ", title={"rendered": "T"})) is None


def test_normalize_alt_items_dedupes_exact_urls():
    items = [
        alt(id=1, link="https://example.com/a", title={"rendered": "A"}),
        alt(id=2, link="https://example.com/b", title={"rendered": "B"}),
        alt(id=3, link="https://example.com/a", title={"rendered": "A repeat"}),
    ]
    news = normalize_alt_items(items)
    assert [n.id for n in news] == [1, 2]


def test_to_json_dict_hot_item_omits_absent_fields():
    news = normalize_hot_item(hot(url="https://example.com/x", title="X"))
    assert to_json_dict(news) == {
        "id": "https://example.com/x",
        "title": "X",
        "url": "https://example.com/x",
        "extra": {},
    }


def test_to_json_dict_alt_item_keeps_info_false():
    news = normalize_alt_item(alt(id=7, link="https://example.com/7", title={"rendered": "T"}, date="d"))
    out = to_json_dict(news)
    assert out["pubDate"] == "d"
    assert out["extra"] == {"info": False}


def test_normalize_hot_item_empty_string_id_falls_back_to_url():
    news = normalize_hot_item(hot(ID="", url="https://example.com/x", title="X"))
    assert news.id == "https://example.com/x"


def test_normalize_hot_item_zero_id_kept():
    news = normalize_hot_item(hot(ID=0, url="https://example.com/x", title="X"))
    assert news.id == 0
