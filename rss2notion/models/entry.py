"""Content entry model for rows of the content database."""

from datetime import datetime
from typing import Optional, Set

from pydantic import BaseModel, Field


class ContentEntry(BaseModel):
    """One feed item as it is written to the content database."""

    title: str = Field(..., description="Entry title")
    link: str = Field(..., description="Entry URL")
    description: Optional[str] = Field(None, description="Entry summary")
    categories: Set[str] = Field(default_factory=set, description="Entry tags")
    source_feed_name: str = Field(..., description="Name of the feed the entry came from")
    published_at: Optional[datetime] = Field(None, description="Publication timestamp")
    lead_image_url: Optional[str] = Field(None, description="First image found in the body")


class ArchiveResult(BaseModel):
    """Outcome of archiving a batch of pages."""

    archived: list[str] = Field(default_factory=list, description="Archived page IDs")
    failed: list[str] = Field(default_factory=list, description="Page IDs that failed")

    @property
    def failed_count(self) -> int:
        return len(self.failed)
