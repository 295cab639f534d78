"""
Sin Chew hot posts – polling scheduler.

Runs the hot news pipeline every SINCHEW_POLL_MINUTES minutes using the
schedule library and prints what it got. Nothing is stored between runs.

Usage:
    python scheduler.py

Configuration:
    - SINCHEW_POLL_MINUTES: Interval between runs (default 30, at least 1)
    - SINCHEW_HOT_PAGE / SINCHEW_HOT_RANGE: see hot_posts/config.py
"""

import logging
import time
from datetime import datetime

import schedule

from hot_posts.pipeline import fetch_hot_news, get_settings


def poll_job() -> int:
    """Run the pipeline once; returns the number of items fetched."""
    print(f"\n{'='*50}")
    print(f"Poll started: {datetime.now().isoformat()}")
    print("=" * 50)

    news = fetch_hot_news()
    for item in news:
        info = item.extra.info or ""
        print(f"  [{item.id}] {item.title} {info}".rstrip())
        print(f"      {item.url}")

    if news:
        print(f"\nFetched {len(news)} hot items.")
    else:
        print("\nNo items fetched (all sources empty or unreachable).")

    print("=" * 50)
    return len(news)


def run_now_and_schedule():
    """Run immediately, then poll on a fixed interval."""
    settings = get_settings()
    print(f"Sin Chew hot news scheduler started at {datetime.now().isoformat()}")
    print(
        f"page={settings.page} range={settings.range} "
        f"edge_runtime={settings.edge_runtime}, polling every {settings.poll_minutes} minutes"
    )
    print("Running initial poll now...\n")

    poll_job()

    schedule.every(settings.poll_minutes).minutes.do(poll_job)

    print(f"\nScheduler active. Next poll in {settings.poll_minutes} minutes.")
    print("Press Ctrl+C to stop.\n")

    while True:
        schedule.run_pending()
        time.sleep(30)


def main():
    """Entry point for the scheduler."""
    logging.basicConfig(level=logging.INFO)
    try:
        run_now_and_schedule()
    except KeyboardInterrupt:
        print("\nScheduler stopped.")


if __name__ == "__main__":
    main()
