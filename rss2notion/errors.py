"""Exceptions raised by the sync job."""

from typing import Optional


class Rss2NotionError(Exception):
    """Base class for all rss2notion errors."""


class ConfigurationError(Rss2NotionError):
    """Missing or invalid configuration."""


class NotionAPIError(Rss2NotionError):
    """A Notion API call failed."""

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None) -> None:
        self.status = status
        self.code = code
        self.message = message
        if status is not None:
            message = f"Notion API error {status} ({code or 'unknown'}): {message}"
        super().__init__(message)


class ArchiveError(Rss2NotionError):
    """One or more pages of a batch could not be archived."""

    def __init__(self, failed_count: int, result=None) -> None:
        self.failed_count = failed_count
        self.result = result
        super().__init__(f"failed to archive {failed_count} page(s)")


class SyncError(Rss2NotionError):
    """A sync step failed."""
