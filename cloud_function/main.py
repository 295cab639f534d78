"""
Cloud Function entrypoint for the Sin Chew hot news source.

HTTP-triggered; returns the canonical items as a JSON array. The Functions
Framework sets FUNCTION_TARGET, so the pipeline runs with edge caching hints
and the posts API fallback enabled.
"""

import json
import logging

import functions_framework
from flask import Request

from hot_posts.pipeline import fetch_hot_news
from hot_posts.transform import to_json_dict

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json; charset=utf-8"}


@functions_framework.http
def hot_news(request: Request) -> tuple[str, int, dict[str, str]]:
    """
    Handle GET requests from the aggregator.

    Args:
        request: Incoming HTTP request (unused beyond the method check)

    Returns:
        Tuple of (JSON body, status_code, headers)
    """
    if request.method not in ("GET", "HEAD"):
        return json.dumps({"error": "Method not allowed"}), 405, JSON_HEADERS

    news = fetch_hot_news()
    logger.info("Serving %d hot news items", len(news))
    body = json.dumps([to_json_dict(item) for item in news], ensure_ascii=False)
    return body, 200, JSON_HEADERS
