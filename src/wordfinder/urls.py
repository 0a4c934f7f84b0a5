"""URL normalization helpers shared by the frontier and link extraction."""

import re
from urllib.parse import urlsplit, urlunsplit

from .errors import InvalidUrlError

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.\-]")


def normalize(raw: str) -> str:
    """Default the scheme to http and validate the result.

    Raises InvalidUrlError if the URL cannot be parsed or has no host.
    """
    url = raw.strip()
    if not url.lower().startswith(("http://", "https://")):
        url = "http://" + url

    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL {raw!r}: {e}") from e

    if not parts.hostname:
        raise InvalidUrlError(f"Invalid URL {raw!r}: missing host")
    return url


def canonicalize(url: str) -> str:
    """Remove the fragment, keeping every other component as written."""
    parts = urlsplit(url)
    return urlunsplit(parts._replace(fragment=""))


def host_of(url: str) -> str:
    """Lowercase host of a URL, or an empty string if it has none."""
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


def screenshot_name(url: str) -> str:
    """Deterministic screenshot filename for a page URL."""
    return f"screenshot_{_UNSAFE_FILENAME_CHARS.sub('_', url)}.png"
