"""RSS ingestion."""

from .images import get_image_url
from .models import FeedFetchResult, FeedItem
from .rss_fetcher import RSSFetcher

__all__ = [
    "RSSFetcher",
    "FeedItem",
    "FeedFetchResult",
    "get_image_url",
]
