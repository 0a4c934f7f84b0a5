"""Static HTTP fetcher implementation using httpx."""

import httpx

from ..errors import FetchError
from .protocols import FetchedPage

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SiteWordFinder/1.0)"


def _is_html(content_type: str | None) -> bool:
    # A missing header is accepted; anything declared must be HTML.
    return content_type is None or "html" in content_type.lower()


class StaticFetcher:
    """Async HTTP fetcher using httpx. Does not execute scripts."""

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = httpx.Timeout(timeout)
        self.user_agent = user_agent
        self._client: httpx.AsyncClient | None = None

    async def open(self) -> None:
        """Create the HTTP client for one traversal."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
            )

    async def fetch(self, url: str) -> FetchedPage:
        """Fetch a URL and return its body as HTML text."""
        if self._client is None:
            raise FetchError(url, "HTTP client is not open")
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
        except httpx.InvalidURL as e:
            raise FetchError(url, f"invalid URL: {e}") from e
        except httpx.TimeoutException as e:
            raise FetchError(url, "timeout") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(url, f"http_{e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        content_type = resp.headers.get("content-type")
        if not _is_html(content_type):
            raise FetchError(url, f"unsupported content type {content_type}")
        return FetchedPage(url=url, html=resp.text)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
