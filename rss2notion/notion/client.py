"""Notion REST API client."""

import logging
from typing import Any, Dict, Iterator, List, Optional

import httpx

from ..errors import NotionAPIError

logger = logging.getLogger(__name__)

NOTION_API_URL = "https://api.notion.com/v1"
DEFAULT_NOTION_VERSION = "2022-06-28"
MAX_PAGE_SIZE = 100


class NotionClient:
    """Thin wrapper over the Notion pages and databases endpoints."""

    def __init__(
        self,
        token: str,
        notion_version: str = DEFAULT_NOTION_VERSION,
        timeout: float = 30.0,
        base_url: str = NOTION_API_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize Notion client.

        Args:
            token: Integration token
            notion_version: Value of the Notion-Version header
            timeout: Request timeout in seconds
            base_url: API root, overridable for testing
            transport: Optional httpx transport, used by tests
        """
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Notion-Version": notion_version,
                "Content-Type": "application/json",
            },
        )

    def __enter__(self) -> "NotionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        try:
            response = self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise NotionAPIError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            raise NotionAPIError(
                body.get("message") or response.text or response.reason_phrase,
                status=response.status_code,
                code=body.get("code"),
            )

        try:
            return response.json()
        except ValueError as e:
            raise NotionAPIError("invalid JSON response", status=response.status_code) from e

    def query_database(
        self,
        database_id: str,
        filter: Optional[Dict[str, Any]] = None,
        start_cursor: Optional[str] = None,
        page_size: int = MAX_PAGE_SIZE,
    ) -> Dict[str, Any]:
        """Run one database query and return the raw response."""
        body: Dict[str, Any] = {"page_size": page_size}
        if filter is not None:
            body["filter"] = filter
        if start_cursor is not None:
            body["start_cursor"] = start_cursor
        return self._request("POST", f"/databases/{database_id}/query", json=body)

    def iter_database(
        self,
        database_id: str,
        filter: Optional[Dict[str, Any]] = None,
    ) -> Iterator[Dict[str, Any]]:
        """
        Yield every page matching the query, following pagination cursors.

        A query is issued per page of results until Notion reports
        has_more=false. Errors propagate to the caller.
        """
        cursor = None
        while True:
            response = self.query_database(database_id, filter=filter, start_cursor=cursor)
            yield from response.get("results", [])

            cursor = response.get("next_cursor")
            if not response.get("has_more") or not cursor:
                break
            logger.debug("Fetching next page of database %s", database_id)

    def create_page(
        self,
        database_id: str,
        properties: Dict[str, Any],
        cover: Optional[Dict[str, Any]] = None,
        children: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """Create a page in a database."""
        body: Dict[str, Any] = {
            "parent": {"database_id": database_id},
            "properties": properties,
        }
        if cover is not None:
            body["cover"] = cover
        if children:
            body["children"] = children
        return self._request("POST", "/pages", json=body)

    def update_page(
        self,
        page_id: str,
        properties: Optional[Dict[str, Any]] = None,
        archived: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Update a page's properties or archived state."""
        # The endpoint rejects requests without a properties object
        body: Dict[str, Any] = {"properties": properties or {}}
        if archived is not None:
            body["archived"] = archived
        return self._request("PATCH", f"/pages/{page_id}", json=body)
