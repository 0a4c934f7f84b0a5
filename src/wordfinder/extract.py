"""Phrase matching and snippet extraction."""

import re

from selectolax.parser import HTMLParser

NON_VISIBLE_TAGS = ["script", "style", "noscript", "template"]
DEFAULT_CONTEXT_CHARS = 150

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def visible_text(html: str, separator: str = " ") -> str:
    """Text content of a document with tags stripped and whitespace collapsed.

    Text nodes are joined with separator, so neighbouring blocks stay apart.
    """
    if not html.strip():
        return ""
    tree = HTMLParser(html)
    tree.strip_tags(NON_VISIBLE_TAGS)
    if tree.root is None:
        return ""
    return collapse_whitespace(tree.root.text(deep=True, separator=separator))


def contains_phrase(html: str, phrase: str) -> bool:
    """Case-insensitive containment check over the raw markup."""
    return phrase.lower() in html.lower()


def find_snippet(html: str, phrase: str, context_chars: int = DEFAULT_CONTEXT_CHARS) -> str:
    """
    Excerpt of the page text around the first occurrence of phrase.

    Takes up to context_chars // 2 characters on each side of the match.
    Returns an empty string if the phrase does not occur in the visible text,
    for example when it only appears inside an attribute or a script.
    """
    needle = phrase.lower()
    text = visible_text(html)
    idx = text.lower().find(needle)
    if idx == -1:
        # phrase split inside a word by inline markup, e.g. lo<b>rem</b>
        text = visible_text(html, separator="")
        idx = text.lower().find(needle)
    if idx == -1:
        return ""

    half = context_chars // 2
    start = max(0, idx - half)
    end = min(len(text), idx + len(phrase) + half)
    return collapse_whitespace(text[start:end])
