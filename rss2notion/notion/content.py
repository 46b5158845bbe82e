"""Content database access."""

import logging
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

import pendulum

from ..config import ContentSchema
from ..errors import ArchiveError, NotionAPIError
from ..ingestion import FeedItem, get_image_url
from ..models import ArchiveResult, ContentEntry
from . import properties
from .blocks import content_to_blocks
from .client import NotionClient

logger = logging.getLogger(__name__)


class ContentStore:
    """Create, query and archive entries of the content database."""

    def __init__(
        self,
        client: NotionClient,
        database_id: str,
        schema: Optional[ContentSchema] = None,
    ) -> None:
        self.client = client
        self.database_id = database_id
        self.schema = schema or ContentSchema()

    def build_entry(self, item: FeedItem, feed_name: str) -> ContentEntry:
        """Build a content entry from a fetched feed item."""
        return ContentEntry(
            title=item.title,
            link=item.link,
            description=item.description,
            categories=set(item.categories),
            source_feed_name=feed_name,
            published_at=item.published,
            lead_image_url=get_image_url(item.content),
        )

    def entry_properties(self, entry: ContentEntry) -> Dict[str, Any]:
        """Map an entry onto the content database's property schema."""
        schema = self.schema
        props = {
            schema.title: properties.title(entry.title),
            schema.link: properties.url(entry.link),
            schema.categories: properties.multi_select(entry.categories),
            schema.source: properties.select(entry.source_feed_name),
        }
        if entry.description:
            props[schema.description] = properties.rich_text(entry.description)
        if entry.published_at is not None:
            props[schema.published] = properties.date(entry.published_at)
        return props

    def create_entry(self, entry: ContentEntry, item: Optional[FeedItem] = None) -> Dict[str, Any]:
        """
        Create a page for the entry.

        Raises:
            NotionAPIError: if Notion rejects the page
        """
        cover = None
        if entry.lead_image_url:
            cover = properties.external_file(entry.lead_image_url)

        children = content_to_blocks(item) if item is not None else []
        return self.client.create_page(
            self.database_id,
            self.entry_properties(entry),
            cover=cover,
            children=children,
        )

    def iter_entries(self) -> Iterator[Dict[str, Any]]:
        """Yield every page of the content database."""
        return self.client.iter_database(self.database_id)

    def retention_flag(self, page: Dict[str, Any]) -> Optional[bool]:
        """Read a page's retention checkbox, None when the property is missing."""
        return properties.checkbox_value(page.get("properties", {}).get(self.schema.retention))

    def query_unretained_entries(self, before: Optional[datetime] = None) -> List[str]:
        """
        Get the IDs of all pages whose retention flag is unset.

        Args:
            before: Only match pages created before this time

        Raises:
            NotionAPIError: if any page of results cannot be fetched
        """
        condition: Dict[str, Any] = {
            "property": self.schema.retention,
            "checkbox": {"equals": False},
        }
        if before is not None:
            condition = {
                "and": [
                    {
                        "timestamp": "created_time",
                        "created_time": {"before": pendulum.instance(before).to_iso8601_string()},
                    },
                    condition,
                ]
            }
        return [page["id"] for page in self.client.iter_database(self.database_id, filter=condition)]

    def archive_page(self, page_id: str) -> None:
        """Archive (soft-delete) a page."""
        self.client.update_page(page_id, archived=True)

    def archive_pages(self, page_ids: List[str]) -> ArchiveResult:
        """
        Archive each page independently.

        Failures are logged per page and do not stop the batch.

        Raises:
            ArchiveError: carrying the failure count, if any page failed
        """
        result = ArchiveResult()
        for page_id in page_ids:
            try:
                self.archive_page(page_id)
            except NotionAPIError as e:
                logger.error("Error archiving page %s: %s", page_id, e)
                result.failed.append(page_id)
            else:
                result.archived.append(page_id)

        if result.failed:
            raise ArchiveError(result.failed_count, result)
        return result
