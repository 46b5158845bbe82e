"""Notion API access."""

from .blocks import content_to_blocks
from .client import NotionClient
from .content import ContentStore
from .feeds import FeedRegistry

__all__ = ["NotionClient", "ContentStore", "FeedRegistry", "content_to_blocks"]
