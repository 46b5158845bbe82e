"""Data models for rss2notion."""

from .entry import ArchiveResult, ContentEntry
from .feed import FeedRegistration

__all__ = ["ArchiveResult", "ContentEntry", "FeedRegistration"]
