"""Protocol definitions for page fetchers."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class FetchedPage:
    """A fetched page: the URL requested and its HTML source."""

    url: str
    html: str


class Fetcher(Protocol):
    """Protocol for page fetchers.

    open() and close() bracket one traversal; close() must be safe to call
    even when open() failed or was never called.
    """

    async def open(self) -> None:
        """Acquire any resources needed for fetching."""
        ...

    async def fetch(self, url: str) -> FetchedPage:
        """Fetch a URL. Raises FetchError on failure."""
        ...

    async def close(self) -> None:
        """Release resources acquired by open()."""
        ...


@runtime_checkable
class Capturer(Protocol):
    """Fetchers that can also screenshot the page they last fetched."""

    async def capture(self, url: str) -> str | None:
        """Save a screenshot and return its path, or None if it failed."""
        ...
