"""Core fetcher components."""

from .fetcher import StaticFetcher
from .protocols import Capturer, FetchedPage, Fetcher

__all__ = ["Capturer", "FetchedPage", "Fetcher", "StaticFetcher"]


# Lazy import: playwright is only needed for rendered fetching
def get_rendered_fetcher():
    from .browser_fetcher import RenderedFetcher
    return RenderedFetcher
