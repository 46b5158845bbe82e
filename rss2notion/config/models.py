"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field


class FeedsSchema(BaseModel):
    """Property names of the feeds database."""

    title: str = Field("Title", description="Feed display name (title or rich text)")
    link: str = Field("Link", description="Feed URL (url)")
    enabled: str = Field("Enabled", description="Whether the feed is synced (checkbox)")


class ContentSchema(BaseModel):
    """Property names of the content database."""

    title: str = Field("Title", description="Entry title (title)")
    description: str = Field("Description", description="Entry summary (rich text)")
    link: str = Field("Link", description="Entry URL (url)")
    categories: str = Field("Categories", description="Entry tags (multi-select)")
    source: str = Field("From", description="Source feed name (select)")
    published: str = Field("Published", description="Publication date (date)")
    retention: str = Field("Starred", description="Keep entry across runs (checkbox)")


class ConfigModel(BaseModel):
    """Main configuration model."""

    notion_version: str = Field("2022-06-28", description="Notion-Version header")
    request_timeout: float = Field(30.0, description="Notion API timeout in seconds", gt=0)
    fetch_timeout: float = Field(30.0, description="Feed fetch timeout in seconds", gt=0)
    purge_older_than_days: Optional[int] = Field(
        None,
        description="Only archive unretained entries created more than N days ago",
        ge=0,
    )
    feeds_schema: FeedsSchema = Field(default_factory=FeedsSchema)
    content_schema: ContentSchema = Field(default_factory=ContentSchema)


class Credentials(BaseModel):
    """Secrets and identifiers read from the environment."""

    token: str = Field(..., description="Notion integration token")
    content_database_id: str = Field(..., description="Content database ID")
    feeds_database_id: str = Field(..., description="Feeds database ID")
