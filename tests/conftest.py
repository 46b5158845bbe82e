"""Shared fixtures: an in-memory stand-in for the Notion API."""

import json
import re

import httpx
import pytest

from rss2notion.notion import NotionClient

FEEDS_DB = "feeds-db"
CONTENT_DB = "content-db"


def feed_page(page_id, title="Example", link="https://example.com/feed.xml", enabled=True):
    """Build a feeds-database row as Notion returns it."""
    props = {}
    if title is not None:
        props["Title"] = {"type": "title", "title": [{"plain_text": title}]}
    if link is not None:
        props["Link"] = {"type": "url", "url": link}
    if enabled is not None:
        props["Enabled"] = {"type": "checkbox", "checkbox": enabled}
    return {
        "object": "page",
        "id": page_id,
        "created_time": "2024-01-01T00:00:00.000Z",
        "last_edited_time": "2024-01-02T10:30:00.000Z",
        "properties": props,
    }


def content_page(page_id, starred=False):
    """Build a content-database row; starred=None omits the flag."""
    props = {"Title": {"type": "title", "title": [{"plain_text": page_id}]}}
    if starred is not None:
        props["Starred"] = {"type": "checkbox", "checkbox": starred}
    return {"object": "page", "id": page_id, "properties": props}


class FakeNotion:
    """Records requests and serves database rows with cursor pagination."""

    def __init__(self, page_size=100):
        self.page_size = page_size
        self.databases = {FEEDS_DB: [], CONTENT_DB: []}
        self.failing_databases = set()
        self.failing_pages = set()
        self.failing_titles = set()
        self.queries = []
        self.created = []
        self.updates = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        body = json.loads(request.content) if request.content else {}

        match = re.fullmatch(r"/v1/databases/([^/]+)/query", path)
        if request.method == "POST" and match:
            return self._query(match.group(1), body)

        if request.method == "POST" and path == "/v1/pages":
            title = body["properties"]["Title"]["title"][0]["text"]["content"]
            if title in self.failing_titles:
                return self._error(400, "validation_error", "bad page")
            self.created.append(body)
            return httpx.Response(200, json={"object": "page", "id": f"new-{len(self.created)}"})

        match = re.fullmatch(r"/v1/pages/([^/]+)", path)
        if request.method == "PATCH" and match:
            page_id = match.group(1)
            if page_id in self.failing_pages:
                return self._error(404, "object_not_found", "no such page")
            self.updates.append((page_id, body))
            return httpx.Response(200, json={"object": "page", "id": page_id})

        return self._error(404, "invalid_request_url", "unknown route")

    def _query(self, database_id, body):
        self.queries.append((database_id, body))
        if database_id in self.failing_databases:
            return self._error(502, "service_unavailable", "try later")

        rows = self.databases.get(database_id, [])
        start = int(body.get("start_cursor") or 0)
        end = start + self.page_size
        has_more = end < len(rows)
        return httpx.Response(200, json={
            "object": "list",
            "results": rows[start:end],
            "has_more": has_more,
            "next_cursor": str(end) if has_more else None,
        })

    @staticmethod
    def _error(status, code, message):
        return httpx.Response(status, json={"object": "error", "status": status, "code": code, "message": message})

    @property
    def archived_ids(self):
        return [page_id for page_id, body in self.updates if body.get("archived")]


@pytest.fixture
def fake_notion():
    return FakeNotion()


@pytest.fixture
def notion_client(fake_notion):
    client = NotionClient("secret-token", transport=httpx.MockTransport(fake_notion.handler))
    yield client
    client.close()


RSS_TWO_ITEMS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example Blog</title>
    <link>https://blog.example.com</link>
    <description>Posts</description>
    <item>
      <title>First post</title>
      <link>https://blog.example.com/first</link>
      <description>&lt;p&gt;Hello &lt;img src="http://blog.example.com/a.png"&gt;&lt;/p&gt;</description>
      <pubDate>Mon, 01 Jan 2024 12:00:00 GMT</pubDate>
      <category>python</category>
      <category>notion</category>
    </item>
    <item>
      <title>Second post</title>
      <link>https://blog.example.com/second</link>
      <description>No images here</description>
    </item>
  </channel>
</rss>
"""


def feed_transport(body=RSS_TWO_ITEMS, status=200):
    """Serve the same feed document for every URL."""
    return httpx.MockTransport(lambda request: httpx.Response(status, content=body))
