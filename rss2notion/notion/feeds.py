"""Feed registry backed by the feeds database."""

import logging
from typing import Any, Dict, Iterator, Optional

from ..config import FeedsSchema
from ..errors import NotionAPIError
from ..models import FeedRegistration
from . import properties
from .client import NotionClient

logger = logging.getLogger(__name__)


class FeedRegistry:
    """Read enabled feeds from the feeds database."""

    def __init__(
        self,
        client: NotionClient,
        database_id: str,
        schema: Optional[FeedsSchema] = None,
    ) -> None:
        self.client = client
        self.database_id = database_id
        self.schema = schema or FeedsSchema()

    def _to_registration(self, page: Dict[str, Any]) -> Optional[FeedRegistration]:
        props = page.get("properties", {})
        page_id = page.get("id")

        if properties.checkbox_value(props.get(self.schema.enabled)) is not True:
            logger.debug("Skipping disabled feed %s", page_id)
            return None

        feed_url = properties.url_value(props.get(self.schema.link))
        if not feed_url:
            logger.error("Feed %s has no %s property, skipping", page_id, self.schema.link)
            return None

        name = properties.plain_text(props.get(self.schema.title))
        if not name:
            logger.error("Feed %s has no %s property, skipping", page_id, self.schema.title)
            return None

        return FeedRegistration(
            page_id=page_id,
            name=name,
            feed_url=feed_url,
            created_at=properties.timestamp(page.get("created_time")),
            last_modified=properties.timestamp(page.get("last_edited_time")),
        )

    def list_enabled_feeds(self) -> Iterator[FeedRegistration]:
        """
        Yield every enabled feed, one at a time.

        A single filtered query is issued. If it fails the error is logged
        and the stream simply ends without yielding anything.
        """
        enabled = {"property": self.schema.enabled, "checkbox": {"equals": True}}
        try:
            response = self.client.query_database(self.database_id, filter=enabled)
        except NotionAPIError as e:
            logger.error("Error querying feeds database: %s", e)
            return

        for page in response.get("results", []):
            registration = self._to_registration(page)
            if registration is not None:
                yield registration
