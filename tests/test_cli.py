"""Tests for the command line interface."""

from typer.testing import CliRunner

from wordfinder import __version__, cli
from wordfinder.crawl import FetchStrategy, MatchResult

runner = CliRunner()


def test_find_prints_results(monkeypatch):
    """Each result should be listed with its snippet and screenshot."""
    seen = {}

    async def fake_find(target):
        seen["target"] = target
        return [MatchResult(url="http://example.test/", snippet="lorem ipsum dolor")]

    monkeypatch.setattr(cli, "_find", fake_find)

    result = runner.invoke(cli.app, ["find", "example.test", "-p", "lorem ipsum", "-n", "3"])

    assert result.exit_code == 0
    assert "Found 1 results" in result.stdout
    assert "Snippet: lorem ipsum dolor" in result.stdout
    assert "Screenshot: -" in result.stdout
    assert seen["target"].page_bound == 3
    assert seen["target"].strategy is FetchStrategy.STATIC


def test_find_js_uses_rendered_strategy(monkeypatch):
    """--js selects the browser fetcher with the given endpoint."""
    seen = {}

    async def fake_find(target):
        seen["target"] = target
        return []

    monkeypatch.setattr(cli, "_find", fake_find)

    result = runner.invoke(
        cli.app,
        ["find", "example.test", "-p", "x", "--js", "--endpoint", "ws://grid.test:3000"],
    )

    assert result.exit_code == 0
    assert seen["target"].strategy is FetchStrategy.RENDERED
    assert seen["target"].browser_endpoint == "ws://grid.test:3000"


def test_find_invalid_seed_exits_with_error():
    """An invalid seed URL should exit non-zero."""
    result = runner.invoke(cli.app, ["find", "http://", "-p", "x"])

    assert result.exit_code == 1


def test_version():
    """Version command prints the package version."""
    result = runner.invoke(cli.app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
