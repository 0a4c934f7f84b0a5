"""CLI interface using typer."""

import asyncio

import typer

from .crawl import CrawlTarget, FetchStrategy, MatchResult, PhraseCrawler
from .errors import WordFinderError

app = typer.Typer(
    name="wordfinder",
    help="Search a website for a phrase",
    no_args_is_help=True,
)


async def _find(target: CrawlTarget) -> list[MatchResult]:
    return await PhraseCrawler(target).find()


@app.command()
def find(
    url: str = typer.Argument(..., help="Seed URL (scheme optional)"),
    phrase: str = typer.Option(..., "-p", "--phrase", help="Phrase to search for"),
    max_pages: int = typer.Option(5, "--max-pages", "-n", min=1, help="Maximum pages to admit"),
    js: bool = typer.Option(False, "--js", help="Render pages in a browser"),
    endpoint: str = typer.Option(
        None, "--endpoint", help="Browser endpoint (ws:// Playwright server or http:// CDP)"
    ),
):
    """Crawl a site and list the pages that contain a phrase."""
    strategy = FetchStrategy.RENDERED if js else FetchStrategy.STATIC
    try:
        target = CrawlTarget.create(
            url, phrase, max_pages, strategy=strategy, browser_endpoint=endpoint
        )
        results = asyncio.run(_find(target))
    except WordFinderError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"\n=== Found {len(results)} results ===")
    for result in results:
        typer.echo(f"URL: {result.url}")
        typer.echo(f"Snippet: {result.snippet}")
        typer.echo(f"Screenshot: {result.screenshot or '-'}")
        typer.echo("---------------------------")


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"wordfinder {__version__}")


if __name__ == "__main__":
    app()
