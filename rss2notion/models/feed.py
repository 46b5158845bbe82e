"""Feed registration model for rows of the feeds database."""

from pydantic import Field

from .base import PageModel


class FeedRegistration(PageModel):
    """Enabled RSS feed source."""

    name: str = Field(..., description="Feed display name")
    feed_url: str = Field(..., description="RSS/Atom feed URL")
