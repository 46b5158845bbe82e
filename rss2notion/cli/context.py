"""Wiring shared by the CLI commands."""

from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from ..config import Config
from ..ingestion import RSSFetcher
from ..notion import ContentStore, FeedRegistry, NotionClient
from ..pipeline import SyncJob


def load_config(config_path: Optional[Path]) -> Config:
    """Load configuration and fail fast on missing credentials."""
    config = Config(config_path)
    config.validate()
    return config


@contextmanager
def open_client(config: Config) -> Generator[NotionClient, None, None]:
    """Open a Notion client for the configured integration."""
    with NotionClient(
        config.credentials.token,
        notion_version=config.config.notion_version,
        timeout=config.config.request_timeout,
    ) as client:
        yield client


def build_job(config: Config, client: NotionClient, dry_run: bool = False) -> SyncJob:
    """Assemble a sync job from configuration."""
    settings = config.config
    credentials = config.credentials
    return SyncJob(
        content=ContentStore(client, credentials.content_database_id, settings.content_schema),
        feeds=FeedRegistry(client, credentials.feeds_database_id, settings.feeds_schema),
        fetcher=RSSFetcher(timeout=settings.fetch_timeout),
        purge_older_than_days=settings.purge_older_than_days,
        dry_run=dry_run,
    )
