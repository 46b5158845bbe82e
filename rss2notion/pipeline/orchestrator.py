"""Sync job that mirrors enabled feeds into the content database."""

import logging
import time
from typing import Callable, Dict, List, Optional, Tuple

import pendulum
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..errors import ArchiveError, NotionAPIError, SyncError
from ..ingestion import RSSFetcher
from ..models import ArchiveResult
from ..notion import ContentStore, FeedRegistry

logger = logging.getLogger(__name__)


class SyncStep:
    """One step of a sync run and its outcome."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.skipped = False
        self.duration = 0.0
        self.error: Optional[SyncError] = None
        self.stats: Dict = {}

    @property
    def success(self) -> bool:
        return self.error is None


class SyncReport:
    """Outcome of a sync run: the clean step, then the import step."""

    def __init__(self):
        self.steps = [
            SyncStep("clean", "Archiving unretained entries"),
            SyncStep("import", "Importing feed items"),
        ]

    @property
    def errors(self) -> List[SyncError]:
        return [s.error for s in self.steps if s.error is not None]

    @property
    def success(self) -> bool:
        return not self.errors

    def step(self, name: str) -> SyncStep:
        return next(s for s in self.steps if s.name == name)

    def record(self, name: str, action: Callable[[], Dict]) -> None:
        """Run one step, keeping its stats, duration and any SyncError."""
        step = self.step(name)
        started = time.monotonic()
        try:
            step.stats = action()
        except SyncError as e:
            logger.error("%s failed: %s", step.description, e)
            step.error = e
        finally:
            step.duration = time.monotonic() - started

    def skip(self, name: str) -> None:
        self.step(name).skipped = True


class SyncJob:
    """Clean the content database, then import every enabled feed."""

    def __init__(
        self,
        content: ContentStore,
        feeds: FeedRegistry,
        fetcher: Optional[RSSFetcher] = None,
        purge_older_than_days: Optional[int] = None,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize sync job.

        Args:
            content: Content database access
            feeds: Feed registry to read enabled feeds from
            fetcher: RSS fetcher, a default one is created if omitted
            purge_older_than_days: Only archive unretained entries older than this
            dry_run: Log archives and creations without writing to Notion
        """
        self.content = content
        self.feeds = feeds
        self.fetcher = fetcher or RSSFetcher()
        self.purge_older_than_days = purge_older_than_days
        self.dry_run = dry_run

    def run(self, clean: bool = True, import_feeds: bool = True) -> SyncReport:
        """
        Run the sync.

        Step failures are collected in the report instead of stopping the
        run, so a failed clean still lets the import go ahead.
        """
        report = SyncReport()
        for name, enabled, action in (
            ("clean", clean, self.clean_unretained_entries),
            ("import", import_feeds, self.import_feeds),
        ):
            if enabled:
                report.record(name, action)
            else:
                report.skip(name)
        return report

    def _unretained_page_ids(self) -> Tuple[List[str], int, int]:
        """Scan the whole content table and pick pages whose flag is false."""
        to_archive = []
        kept = 0
        unflagged = 0
        for page in self.content.iter_entries():
            flag = self.content.retention_flag(page)
            if flag is None:
                unflagged += 1
            elif flag:
                kept += 1
            else:
                to_archive.append(page["id"])
        return to_archive, kept, unflagged

    def clean_unretained_entries(self) -> Dict:
        """
        Archive every content entry whose retention flag is false.

        Entries with the flag set, or without the property at all, are
        left alone. All pages are listed before anything is archived so
        archiving never shifts the pagination cursor.

        Raises:
            SyncError: if the content database cannot be read
        """
        stats = {"kept": 0, "unflagged": 0}
        try:
            if self.purge_older_than_days is not None:
                cutoff = pendulum.now("UTC").subtract(days=self.purge_older_than_days)
                to_archive = self.content.query_unretained_entries(before=cutoff)
            else:
                to_archive, stats["kept"], stats["unflagged"] = self._unretained_page_ids()
        except NotionAPIError as e:
            raise SyncError(f"cleaning content database: {e}") from e

        if self.dry_run:
            for page_id in to_archive:
                logger.info("[dry run] Would archive page %s", page_id)
            stats.update(archived=0, failed=0, candidates=len(to_archive))
            return stats

        try:
            result = self.content.archive_pages(to_archive)
        except ArchiveError as e:
            logger.warning("Cleaning content database: %s", e)
            result = e.result or ArchiveResult()

        for page_id in result.archived:
            logger.info("Archived page %s", page_id)

        stats.update(
            archived=len(result.archived),
            failed=result.failed_count,
            candidates=len(to_archive),
        )
        return stats

    def import_feeds(self) -> Dict:
        """
        Fetch every enabled feed and create an entry per item.

        Feed fetch failures and entry creation failures are logged and
        counted; they never stop the loop.
        """
        stats = {"feeds": 0, "failed_feeds": 0, "items": 0, "created": 0, "failed": 0}

        for registration in self.feeds.list_enabled_feeds():
            stats["feeds"] += 1
            result = self.fetcher.fetch_feed(registration)
            if not result.success:
                stats["failed_feeds"] += 1
                continue

            logger.info("Fetched %d item(s) from %s", result.item_count, registration.name)
            stats["items"] += result.item_count

            for item in result.items:
                entry = self.content.build_entry(item, registration.name)
                if self.dry_run:
                    logger.info("[dry run] Would create entry %r", entry.title)
                    continue
                try:
                    self.content.create_entry(entry, item)
                except NotionAPIError as e:
                    logger.error("Error creating entry %r from %s: %s", entry.title, registration.name, e)
                    stats["failed"] += 1
                else:
                    stats["created"] += 1

        return stats


def print_summary(report: SyncReport, console: Console) -> None:
    """Print sync execution summary."""
    table = Table(title="Sync Summary")
    table.add_column("Step", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Duration", style="yellow")
    table.add_column("Details", style="dim")

    for step in report.steps:
        if step.skipped:
            table.add_row(step.name.title(), "[dim]-[/dim]", "-", "skipped")
            continue

        if step.error is not None:
            table.add_row(step.name.title(), "[red]✗[/red]", f"{step.duration:.1f}s", str(step.error))
            continue

        stats = step.stats
        if step.name == "clean":
            details = f"{stats.get('archived', 0)} archived, {stats.get('failed', 0)} failed"
        else:
            details = (
                f"{stats.get('feeds', 0)} feeds, "
                f"{stats.get('created', 0)} created, "
                f"{stats.get('failed', 0)} failed"
            )
        table.add_row(step.name.title(), "[green]✓[/green]", f"{step.duration:.1f}s", details)

    console.print(table)

    if report.success:
        console.print(Panel("[green]Sync completed successfully[/green]", style="green"))
    else:
        lines = "\n".join(f"• {e}" for e in report.errors)
        console.print(Panel(f"[red]Sync failed[/red]\n\n{lines}", style="red"))
