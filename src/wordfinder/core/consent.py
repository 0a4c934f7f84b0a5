"""Best-effort dismissal of cookie consent overlays in a rendered page.

Locators are tried in order and the first one that yields a visible, enabled
element is clicked. When nothing is clicked, every element whose text
mentions "cookie" is removed from the DOM. This is deliberately blunt: it
only has to unblock text extraction, and it may remove unrelated content.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import typer
from playwright.async_api import Locator, Page


class ConsentLocator(Protocol):
    """A strategy for finding consent-accept controls on a page."""

    def resolve(self, page: Page) -> Locator:
        ...


@dataclass(frozen=True)
class CssLocator:
    """Controls matched by a CSS selector."""

    selector: str

    def resolve(self, page: Page) -> Locator:
        return page.locator(self.selector)

    def __str__(self) -> str:
        return self.selector


@dataclass(frozen=True)
class TextLocator:
    """Controls whose text contains a phrase, ignoring case."""

    text: str
    tag: str = "button"

    def resolve(self, page: Page) -> Locator:
        pattern = re.compile(re.escape(self.text), re.IGNORECASE)
        return page.locator(self.tag, has_text=pattern)

    def __str__(self) -> str:
        return f'{self.tag}:has-text("{self.text}")'


CONSENT_LOCATORS: tuple[ConsentLocator, ...] = (
    CssLocator("button[data-action='consent'][data-action-type='accept']"),
    CssLocator("button[data-action-type='accept']"),
    CssLocator("button[data-action='accept']"),
    CssLocator("button#accept"),
    CssLocator("button.accept"),
    CssLocator("button.uc-accept-button"),
    CssLocator("#accept"),
    TextLocator("allow all"),
    TextLocator("accetta"),
    TextLocator("accept"),
)

REMOVE_COOKIE_ELEMENTS_JS = """() => {
    for (const el of document.querySelectorAll('*')) {
        if (el.innerText && el.innerText.toLowerCase().includes('cookie')) {
            el.remove();
        }
    }
}"""


class ConsentAction(Enum):
    CLICKED = "clicked"
    REMOVED = "removed"
    FAILED = "failed"


@dataclass(frozen=True)
class ConsentOutcome:
    action: ConsentAction
    locator: str | None = None


async def _first_actionable(page: Page, locator: ConsentLocator) -> Locator | None:
    candidates = locator.resolve(page)
    for i in range(await candidates.count()):
        element = candidates.nth(i)
        if await element.is_visible() and await element.is_enabled():
            return element
    return None


async def dismiss_consent(
    page: Page,
    locators: tuple[ConsentLocator, ...] = CONSENT_LOCATORS,
    pause: float = 0.5,
) -> ConsentOutcome:
    """Accept or remove a cookie banner. Never raises."""
    try:
        for locator in locators:
            element = await _first_actionable(page, locator)
            if element is None:
                continue
            await element.click()
            typer.echo(f"Cookie banner closed with selector: {locator}")
            await page.wait_for_timeout(pause * 1000)
            return ConsentOutcome(ConsentAction.CLICKED, str(locator))

        await page.evaluate(REMOVE_COOKIE_ELEMENTS_JS)
        typer.echo("No cookie button found, removed cookie elements via script")
        return ConsentOutcome(ConsentAction.REMOVED)
    except Exception as e:
        typer.echo(f"Cookie banner handling failed: {e}", err=True)
        return ConsentOutcome(ConsentAction.FAILED)
