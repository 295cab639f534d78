"""Tests for the hot_news Cloud Function entrypoint."""

import importlib.util
import json
from pathlib import Path

import pytest

from hot_posts.models import CanonicalNewsItem, NewsExtra

MAIN_PATH = Path(__file__).parent.parent / "cloud_function" / "main.py"


class FakeRequest:
    def __init__(self, method="GET"):
        self.method = method


@pytest.fixture
def main_module():
    spec = importlib.util.spec_from_file_location("cloud_function_main", MAIN_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_hot_news_returns_json_array(main_module, monkeypatch):
    news = [
        CanonicalNewsItem(
            id=1,
            title="马股走高",
            url="https://www.sinchew.com.my/news/1",
            pub_date="2024-05-01",
            extra=NewsExtra(info="3小时前"),
        )
    ]
    monkeypatch.setattr(main_module, "fetch_hot_news", lambda: news)

    body, status, headers = main_module.hot_news(FakeRequest())
    assert status == 200
    assert headers["Content-Type"].startswith("application/json")
    assert json.loads(body) == [
        {
            "id": 1,
            "title": "马股走高",
            "url": "https://www.sinchew.com.my/news/1",
            "pubDate": "2024-05-01",
            "extra": {"info": "3小时前"},
        }
    ]


def test_hot_news_empty_list_is_still_200(main_module, monkeypatch):
    monkeypatch.setattr(main_module, "fetch_hot_news", lambda: [])
    body, status, _ = main_module.hot_news(FakeRequest())
    assert status == 200
    assert json.loads(body) == []


def test_hot_news_rejects_post(main_module):
    _, status, _ = main_module.hot_news(FakeRequest("POST"))
    assert status == 405
