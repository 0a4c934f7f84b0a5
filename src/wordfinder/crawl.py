"""Crawler engine: breadth-first traversal of one host looking for a phrase."""

from dataclasses import dataclass
from enum import Enum

import typer

from .config import settings
from .core import Capturer, Fetcher, StaticFetcher
from .errors import CrawlStateError, FetchError
from .extract import contains_phrase, find_snippet
from .frontier import Frontier
from .links import extract_links
from .urls import canonicalize, host_of, normalize


class FetchStrategy(Enum):
    STATIC = "static"
    RENDERED = "rendered"


@dataclass(frozen=True)
class CrawlTarget:
    """What to crawl and what to look for. Build with CrawlTarget.create()."""

    seed_url: str
    scope_host: str
    phrase: str
    page_bound: int
    strategy: FetchStrategy = FetchStrategy.STATIC
    browser_endpoint: str | None = None

    @classmethod
    def create(
        cls,
        seed: str,
        phrase: str,
        page_bound: int,
        strategy: FetchStrategy = FetchStrategy.STATIC,
        browser_endpoint: str | None = None,
    ) -> "CrawlTarget":
        """Validate inputs. Raises InvalidUrlError or ValueError."""
        if page_bound < 1:
            raise ValueError(f"page_bound must be positive, got {page_bound}")
        if not phrase:
            raise ValueError("phrase must not be empty")

        seed_url = canonicalize(normalize(seed))
        return cls(
            seed_url=seed_url,
            scope_host=host_of(seed_url),
            phrase=phrase,
            page_bound=page_bound,
            strategy=strategy,
            browser_endpoint=browser_endpoint,
        )


@dataclass(frozen=True)
class MatchResult:
    """A page containing the phrase."""

    url: str
    snippet: str
    screenshot: str | None = None


class CrawlState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


def build_fetcher(target: CrawlTarget) -> Fetcher:
    """Create the fetcher matching the target's strategy."""
    if target.strategy is FetchStrategy.RENDERED:
        from .core import get_rendered_fetcher
        return get_rendered_fetcher()(
            endpoint=target.browser_endpoint,
            browser=settings.browser,
            timeout=settings.browser_timeout,
            settle_delay=settings.settle_delay,
            consent_pause=settings.consent_pause,
            user_agent=settings.user_agent,
            headless=settings.headless,
            screenshot_dir=settings.screenshot_dir,
        )
    return StaticFetcher(timeout=settings.timeout, user_agent=settings.user_agent)


class PhraseCrawler:
    """Single-use crawler. find() runs once; build a new crawler to crawl again."""

    def __init__(
        self,
        target: CrawlTarget,
        fetcher: Fetcher | None = None,
        context_chars: int = settings.snippet_context,
    ):
        self.target = target
        self.fetcher = fetcher if fetcher is not None else build_fetcher(target)
        self.context_chars = context_chars
        self.frontier = Frontier(target.page_bound)
        self.state = CrawlState.IDLE
        self.pages_fetched = 0

    async def _process(self, url: str) -> MatchResult | None:
        """Fetch one page, record a match, and admit its links."""
        try:
            page = await self.fetcher.fetch(url)
        except FetchError as e:
            typer.echo(f"Error fetching {url}: {e.reason}", err=True)
            return None
        self.pages_fetched += 1

        result = None
        if contains_phrase(page.html, self.target.phrase):
            snippet = find_snippet(page.html, self.target.phrase, self.context_chars)
            screenshot = None
            if isinstance(self.fetcher, Capturer):
                screenshot = await self.fetcher.capture(url)
            result = MatchResult(url=url, snippet=snippet, screenshot=screenshot)
            typer.echo(f" --> Phrase found in: {url}")

        for link in extract_links(page.html, page.url, self.target.scope_host):
            if self.frontier.is_full():
                break
            self.frontier.admit(link)

        return result

    async def find(self) -> list[MatchResult]:
        """Crawl from the seed and return matching pages in breadth-first order."""
        if self.state is not CrawlState.IDLE:
            raise CrawlStateError(f"Crawler is {self.state.value}; create a new one")
        self.state = CrawlState.RUNNING

        found: list[MatchResult] = []
        try:
            await self.fetcher.open()
            self.frontier.admit(self.target.seed_url)

            while self.frontier.visited_count() <= self.target.page_bound:
                url = self.frontier.next()
                if url is None:
                    break
                typer.echo(f"[Crawl] {url}")
                result = await self._process(url)
                if result is not None:
                    found.append(result)
        finally:
            await self.fetcher.close()
            self.state = CrawlState.DONE

        stats = self.frontier.stats()
        typer.echo(
            f"Crawl complete: {self.pages_fetched} pages fetched, "
            f"{stats['admitted']} admitted, {len(found)} matches"
        )
        return found
