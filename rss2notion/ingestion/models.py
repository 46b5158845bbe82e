"""Data models for ingestion."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class FeedItem(BaseModel):
    """Parsed RSS feed item."""

    title: str = Field("", description="Item title")
    link: str = Field("", description="Item URL")
    published: Optional[datetime] = Field(None, description="Publication date")
    description: Optional[str] = Field(None, description="Item description/summary")
    categories: list[str] = Field(default_factory=list, description="Item tags")
    content: Optional[str] = Field(None, description="Concatenated raw HTML body")


class FeedFetchResult(BaseModel):
    """Result of fetching an RSS feed."""

    feed_name: str = Field(..., description="Feed name")
    feed_url: str = Field(..., description="RSS feed URL")
    success: bool = Field(..., description="Whether fetch was successful")
    items: list[FeedItem] = Field(default_factory=list, description="Parsed feed items")
    error: Optional[str] = Field(None, description="Error message if failed")
    item_count: int = Field(0, description="Number of items fetched")
