"""RSS feed fetcher."""

import calendar
import logging
from datetime import datetime
from typing import List, Optional

import feedparser
import httpx
import pendulum

from ..models import FeedRegistration
from .models import FeedFetchResult, FeedItem

logger = logging.getLogger(__name__)


def _parse_date(entry) -> Optional[datetime]:
    """Get the entry's publication date, falling back to its update date."""
    for key in ("published_parsed", "updated_parsed"):
        parsed = entry.get(key)
        if not parsed:
            continue
        try:
            # feedparser normalizes parsed dates to UTC
            return pendulum.from_timestamp(calendar.timegm(parsed))
        except (TypeError, ValueError, OverflowError):
            continue
    return None


def _join_content(entry) -> Optional[str]:
    """Concatenate every HTML body the entry carries."""
    parts = [c.get("value", "") for c in entry.get("content", [])]
    summary = entry.get("summary")
    if summary:
        parts.append(summary)
    body = "".join(p for p in parts if p)
    return body or None


def parse_entries(feed) -> List[FeedItem]:
    """Convert feedparser entries into feed items."""
    items = []
    for entry in feed.entries:
        categories = [
            tag.get("term", "").strip()
            for tag in entry.get("tags", [])
            if tag.get("term", "").strip()
        ]
        items.append(
            FeedItem(
                title=entry.get("title", ""),
                link=entry.get("link", ""),
                published=_parse_date(entry),
                description=entry.get("summary") or entry.get("description"),
                categories=categories,
                content=_join_content(entry),
            )
        )
    return items


class RSSFetcher:
    """Fetch and parse RSS feeds."""

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
        user_agent: str = "rss2notion/0.1",
    ) -> None:
        """Initialize RSS fetcher."""
        self.timeout = timeout
        self._client = client
        self.user_agent = user_agent

    def _get(self, url: str) -> httpx.Response:
        headers = {"User-Agent": self.user_agent}
        if self._client is not None:
            return self._client.get(url, headers=headers)
        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            return client.get(url, headers=headers)

    def fetch(self, url: str) -> List[FeedItem]:
        """
        Fetch and parse a single feed.

        Failures are logged and yield an empty list so one broken feed
        never aborts a run.
        """
        return self._fetch(url, name=url).items

    def fetch_feed(self, registration: FeedRegistration) -> FeedFetchResult:
        """Fetch a registered feed and report the outcome."""
        return self._fetch(registration.feed_url, name=registration.name)

    def _fetch(self, url: str, name: str) -> FeedFetchResult:
        def failed(error: str) -> FeedFetchResult:
            logger.error("Error reading feed %s: %s", url, error)
            return FeedFetchResult(feed_name=name, feed_url=url, success=False, error=error)

        try:
            response = self._get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            return failed(f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            return failed(f"HTTP error: {e}")
        except Exception as e:
            return failed(f"Unexpected error: {e}")

        try:
            feed = feedparser.parse(response.content)
            if feed.bozo and not feed.entries:
                return failed(f"Invalid feed: {feed.bozo_exception}")
            items = parse_entries(feed)
        except Exception as e:
            return failed(f"Unexpected error: {e}")

        if feed.bozo:
            logger.warning("Feed %s is malformed but readable: %s", url, feed.bozo_exception)

        return FeedFetchResult(
            feed_name=name,
            feed_url=url,
            success=True,
            items=items,
            item_count=len(items),
        )
