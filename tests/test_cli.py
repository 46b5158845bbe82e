"""Tests for the command line entry point."""

from contextlib import contextmanager
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from rss2notion.cli import app
from rss2notion.errors import SyncError
from rss2notion.pipeline import SyncReport

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("rss2notion.cli.run.setup_logging"), patch("rss2notion.cli.feeds.setup_logging"):
        yield


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("NOTION_API_TOKEN", "secret")
    monkeypatch.setenv("NOTION_RSS_CONTENT_DATABASE_ID", "content")
    monkeypatch.setenv("NOTION_RSS_FEEDS_DATABASE_ID", "feeds")


@contextmanager
def _fake_client(config):
    yield MagicMock()


def _report(clean_error=None, import_error=None):
    report = SyncReport()
    report.step("clean").error = clean_error
    report.step("import").error = import_error
    return report


def test_missing_environment_exits_before_network(monkeypatch, tmp_path):
    for name in ("NOTION_API_TOKEN", "NOTION_RSS_CONTENT_DATABASE_ID", "NOTION_RSS_FEEDS_DATABASE_ID"):
        monkeypatch.delenv(name, raising=False)

    with patch("rss2notion.cli.run.open_client") as open_client:
        result = runner.invoke(app, ["run", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 1
    assert "NOTION_API_TOKEN" in result.output
    open_client.assert_not_called()


def test_run_exits_zero_on_success(env, tmp_path):
    job = MagicMock()
    job.run.return_value = _report()

    with patch("rss2notion.cli.run.open_client", _fake_client), \
            patch("rss2notion.cli.run.build_job", return_value=job) as build_job:
        result = runner.invoke(app, ["run", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0
    job.run.assert_called_once_with(clean=True, import_feeds=True)
    assert build_job.call_args.kwargs["dry_run"] is False


def test_run_reports_every_error(env, tmp_path):
    job = MagicMock()
    job.run.return_value = _report(SyncError("clean broke"), SyncError("import broke"))

    with patch("rss2notion.cli.run.open_client", _fake_client), \
            patch("rss2notion.cli.run.build_job", return_value=job):
        result = runner.invoke(app, ["run", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 1
    assert "clean broke" in result.output
    assert "import broke" in result.output


def test_run_flags(env, tmp_path):
    job = MagicMock()
    job.run.return_value = _report()

    with patch("rss2notion.cli.run.open_client", _fake_client), \
            patch("rss2notion.cli.run.build_job", return_value=job) as build_job:
        result = runner.invoke(
            app, ["run", "--skip-clean", "--dry-run", "--config", str(tmp_path / "none.yaml")]
        )

    assert result.exit_code == 0
    job.run.assert_called_once_with(clean=False, import_feeds=True)
    assert build_job.call_args.kwargs["dry_run"] is True


def test_clean_command_skips_import(env, tmp_path):
    job = MagicMock()
    job.run.return_value = _report()

    with patch("rss2notion.cli.run.open_client", _fake_client), \
            patch("rss2notion.cli.run.build_job", return_value=job):
        result = runner.invoke(app, ["clean", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0
    job.run.assert_called_once_with(clean=True, import_feeds=False)


def test_feeds_command_lists_enabled_feeds(env, tmp_path):
    from rss2notion.models import FeedRegistration

    feeds = [FeedRegistration(name="Example Blog", feed_url="https://blog.example.com/rss")]

    with patch("rss2notion.cli.feeds.open_client", _fake_client), \
            patch("rss2notion.cli.feeds.FeedRegistry") as registry_cls:
        registry_cls.return_value.list_enabled_feeds.return_value = iter(feeds)
        result = runner.invoke(app, ["feeds", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0
    assert "Example Blog" in result.output


def test_clean_command_handles_interrupt(env, tmp_path):
    job = MagicMock()
    job.run.side_effect = KeyboardInterrupt

    with patch("rss2notion.cli.run.open_client", _fake_client), \
            patch("rss2notion.cli.run.build_job", return_value=job):
        result = runner.invoke(app, ["clean", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 1
    assert "interrupted" in result.output
