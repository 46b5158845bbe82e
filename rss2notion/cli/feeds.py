"""Feeds listing command."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..errors import ConfigurationError
from ..logging_config import setup_logging
from ..notion import FeedRegistry
from .context import load_config, open_client

console = Console()


def feeds_command(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """List the enabled feeds of the feeds database."""
    setup_logging()

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    with open_client(config) as client:
        registry = FeedRegistry(
            client,
            config.credentials.feeds_database_id,
            config.config.feeds_schema,
        )
        feeds = list(registry.list_enabled_feeds())

    if not feeds:
        console.print("[yellow]No enabled feeds.[/yellow]")
        return

    table = Table(title="Enabled Feeds")
    table.add_column("Name", style="cyan")
    table.add_column("URL", style="blue")
    table.add_column("Last edited", style="dim")

    for feed in feeds:
        table.add_row(
            feed.name,
            feed.feed_url,
            feed.last_modified.strftime("%Y-%m-%d %H:%M") if feed.last_modified else "-",
        )

    console.print(table)
