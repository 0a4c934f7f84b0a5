"""Browser-based fetcher using Playwright."""

from pathlib import Path
from typing import Callable

import typer
from playwright.async_api import Browser, BrowserContext, Page, async_playwright
from playwright.async_api import Error as PlaywrightError

from ..errors import BrowserSessionError, FetchError
from ..urls import screenshot_name
from .consent import dismiss_consent
from .protocols import FetchedPage


class BrowserSession:
    """A single browser page, either launched locally or attached to an endpoint.

    ws:// and wss:// endpoints are Playwright browser servers; http(s)://
    endpoints are Chrome DevTools Protocol addresses.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        browser: str = "chromium",
        headless: bool = True,
        user_agent: str | None = None,
        timeout: float = 30.0,
    ):
        self.endpoint = endpoint
        self.browser_name = browser
        self.headless = headless
        self.user_agent = user_agent
        self.timeout = timeout * 1000  # Playwright uses milliseconds
        self._playwright = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise BrowserSessionError("Browser session is not started")
        return self._page

    async def _connect(self) -> Browser:
        browser_type = getattr(self._playwright, self.browser_name)
        if self.endpoint is None:
            return await browser_type.launch(headless=self.headless)
        if self.endpoint.startswith(("ws://", "wss://")):
            return await browser_type.connect(self.endpoint, timeout=self.timeout)
        return await self._playwright.chromium.connect_over_cdp(
            self.endpoint, timeout=self.timeout
        )

    async def start(self):
        """Start the browser and open the page used for every fetch."""
        if self._page is not None:
            return

        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._connect()

            context_opts = {}
            if self.user_agent:
                context_opts["user_agent"] = self.user_agent
            self._context = await self._browser.new_context(**context_opts)
            self._page = await self._context.new_page()
            self._page.set_default_timeout(self.timeout)
        except (PlaywrightError, AttributeError) as e:
            await self.close()
            target = self.endpoint or f"local {self.browser_name}"
            raise BrowserSessionError(f"Cannot start browser session ({target}): {e}") from e

    async def close(self):
        """Close all browser resources."""
        self._page = None
        self._context = None
        if self._browser is not None:
            try:
                await self._browser.close()
            except PlaywrightError as e:
                typer.echo(f"Error closing browser: {e}", err=True)
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None


class RenderedFetcher:
    """Fetcher that renders pages in a browser and dismisses cookie banners."""

    def __init__(
        self,
        endpoint: str | None = None,
        browser: str = "chromium",
        timeout: float = 30.0,
        settle_delay: float = 8.0,
        consent_pause: float = 0.5,
        user_agent: str | None = None,
        headless: bool = True,
        screenshot_dir: str | Path = ".",
        session_factory: Callable[..., BrowserSession] = BrowserSession,
    ):
        self.endpoint = endpoint
        self.browser = browser
        self.timeout = timeout
        self.settle_delay = settle_delay
        self.consent_pause = consent_pause
        self.user_agent = user_agent
        self.headless = headless
        self.screenshot_dir = Path(screenshot_dir)
        self._session_factory = session_factory
        self._session: BrowserSession | None = None

    async def open(self) -> None:
        """Create the browser session for one traversal."""
        if self._session is not None:
            return
        session = self._session_factory(
            endpoint=self.endpoint,
            browser=self.browser,
            headless=self.headless,
            user_agent=self.user_agent,
            timeout=self.timeout,
        )
        await session.start()
        self._session = session

    async def fetch(self, url: str) -> FetchedPage:
        """Navigate, let scripts settle, clear consent overlays, read the DOM."""
        if self._session is None:
            raise FetchError(url, "browser session is not open")
        page = self._session.page
        try:
            await page.goto(url, wait_until="domcontentloaded")
            await page.wait_for_timeout(self.settle_delay * 1000)
            await dismiss_consent(page, pause=self.consent_pause)
            html = await page.content()
        except PlaywrightError as e:
            raise FetchError(url, e.message) from e
        return FetchedPage(url=url, html=html)

    async def capture(self, url: str) -> str | None:
        """Screenshot the current viewport. Returns None on failure."""
        if self._session is None:
            return None
        path = self.screenshot_dir / screenshot_name(url)
        try:
            await self._session.page.screenshot(path=str(path))
        except (PlaywrightError, OSError) as e:
            typer.echo(f"Screenshot error: {e}", err=True)
            return None
        return str(path.resolve())

    async def close(self) -> None:
        """Tear down the browser session."""
        if self._session is not None:
            session, self._session = self._session, None
            await session.close()
