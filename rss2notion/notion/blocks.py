"""Page body blocks for content entries."""

from typing import Any, Dict, List

from ..ingestion.models import FeedItem


def content_to_blocks(item: FeedItem) -> List[Dict[str, Any]]:
    """Convert an item's HTML body into Notion blocks.

    Entries are created without a body for now; the link property points
    at the full article.
    """
    return []
