"""Exception hierarchy for the word finder."""


class WordFinderError(Exception):
    """Base class for all word finder errors."""


class InvalidUrlError(WordFinderError, ValueError):
    """A URL could not be parsed or has no host."""


class FetchError(WordFinderError):
    """A page could not be retrieved."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class BrowserSessionError(WordFinderError):
    """The browser automation session could not be established."""


class CrawlStateError(WordFinderError):
    """find() was called on a crawler that already ran."""
