"""Base model class for rows stored in Notion."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PageModel(BaseModel):
    """Base model for Notion database rows."""

    page_id: Optional[str] = Field(None, description="Notion page ID")
    created_at: Optional[datetime] = Field(None, description="Page creation timestamp")
    last_modified: Optional[datetime] = Field(None, description="Last edit timestamp")
