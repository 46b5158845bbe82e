"""Run and clean command implementations."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..errors import ConfigurationError
from ..logging_config import setup_logging
from ..pipeline import print_summary
from .context import build_job, load_config, open_client

console = Console()

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to config.yaml (default: ~/.config/rss2notion/config.yaml)",
)


def _sync(config_path: Optional[Path], dry_run: bool, clean: bool, import_feeds: bool, verbose: bool) -> None:
    setup_logging(verbose)

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    try:
        with open_client(config) as client:
            job = build_job(config, client, dry_run=dry_run)
            report = job.run(clean=clean, import_feeds=import_feeds)
    except KeyboardInterrupt:
        console.print("\n[yellow]Sync interrupted by user[/yellow]")
        raise typer.Exit(1)

    print_summary(report, console)

    if not report.success:
        for error in report.errors:
            console.print(f"[red]{error}[/red]")
        raise typer.Exit(1)


def run_command(
    config_path: Optional[Path] = CONFIG_OPTION,
    dry_run: bool = typer.Option(False, "--dry-run", help="Log changes without writing to Notion"),
    skip_clean: bool = typer.Option(False, "--skip-clean", help="Do not archive unretained entries"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Archive unretained entries, then import every enabled feed."""
    _sync(config_path, dry_run, clean=not skip_clean, import_feeds=True, verbose=verbose)


def clean_command(
    config_path: Optional[Path] = CONFIG_OPTION,
    dry_run: bool = typer.Option(False, "--dry-run", help="List entries without archiving them"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Archive unretained entries without importing feeds."""
    _sync(config_path, dry_run, clean=True, import_feeds=False, verbose=verbose)
