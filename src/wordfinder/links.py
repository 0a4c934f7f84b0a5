"""Same-host link discovery."""

from collections.abc import Iterator
from urllib.parse import urljoin, urlsplit

from selectolax.parser import HTMLParser

from .urls import canonicalize, host_of


def _base_href(tree: HTMLParser, page_url: str) -> str:
    """Resolve the document base, honouring a <base href> element."""
    base = tree.css_first("base[href]")
    if base is None:
        return page_url
    href = (base.attributes.get("href") or "").strip()
    return urljoin(page_url, href) if href else page_url


def extract_links(html: str, base_url: str, scope_host: str) -> Iterator[str]:
    """
    Yield canonical absolute URLs of anchors that stay on scope_host.

    Only http(s) links are kept and fragments are removed. Hrefs that
    cannot be resolved are skipped. Duplicates are not filtered here.
    """
    if not html.strip():
        return
    tree = HTMLParser(html)
    base = _base_href(tree, base_url)
    scope_host = scope_host.lower()

    for node in tree.css("a[href]"):
        href = (node.attributes.get("href") or "").strip()
        if not href:
            continue

        try:
            absolute_url = urljoin(base, href)
            parts = urlsplit(absolute_url)
            parts.port  # raises ValueError on a malformed port
            scheme = parts.scheme
        except ValueError:
            continue

        if not scheme.lower().startswith("http"):
            continue
        if host_of(absolute_url) != scope_host:
            continue

        yield canonicalize(absolute_url)
