"""Tests for cookie banner dismissal."""

from fakes import FakeElement, FakePage, playwright_error
from wordfinder.core.consent import (
    CONSENT_LOCATORS,
    REMOVE_COOKIE_ELEMENTS_JS,
    ConsentAction,
    CssLocator,
    TextLocator,
    dismiss_consent,
)


class TestLocators:
    def test_attribute_locators_come_first(self):
        """Attribute selectors have priority over id, class and text."""
        assert str(CONSENT_LOCATORS[0]) == "button[data-action='consent'][data-action-type='accept']"
        assert isinstance(CONSENT_LOCATORS[-1], TextLocator)

    def test_text_locator_ignores_case(self):
        """Text locators should match regardless of case."""
        page = FakePage(buttons=[("ALLOW ALL cookies", FakeElement())])
        assert len(TextLocator("allow all").resolve(page).elements) == 1

    def test_text_locator_escapes_text(self):
        """Locator text is matched literally."""
        page = FakePage(buttons=[("accept", FakeElement())])
        assert TextLocator("acc.pt?").resolve(page).elements == []


class TestDismissConsent:
    async def test_clicks_first_matching_locator(self):
        """The first locator with an actionable control wins."""
        by_class = FakeElement()
        by_text = FakeElement()
        page = FakePage(css={"button.accept": [by_class]}, buttons=[("Allow all", by_text)])

        outcome = await dismiss_consent(page, pause=0.5)

        assert outcome.action is ConsentAction.CLICKED
        assert outcome.locator == "button.accept"
        assert by_class.clicks == 1
        assert by_text.clicks == 0
        assert page.waits == [500]
        assert page.scripts == []

    async def test_skips_hidden_and_disabled_controls(self):
        """Invisible or disabled controls are not clicked."""
        hidden = FakeElement(visible=False)
        disabled = FakeElement(enabled=False)
        fallback = FakeElement()
        page = FakePage(
            css={"button#accept": [hidden, disabled]},
            buttons=[("Accetta tutto", fallback)],
        )

        outcome = await dismiss_consent(page)

        assert hidden.clicks == 0
        assert disabled.clicks == 0
        assert fallback.clicks == 1
        assert outcome.locator == 'button:has-text("accetta")'

    async def test_clicks_only_one_element(self):
        """A single click is made even when several controls match."""
        first = FakeElement()
        second = FakeElement()
        page = FakePage(buttons=[("Accept", first), ("Accept all", second)])

        await dismiss_consent(page)

        assert (first.clicks, second.clicks) == (1, 0)

    async def test_falls_back_to_removal(self):
        """Without any control, cookie elements are removed by script."""
        page = FakePage(buttons=[("Subscribe", FakeElement())])

        outcome = await dismiss_consent(page)

        assert outcome.action is ConsentAction.REMOVED
        assert page.scripts == [REMOVE_COOKIE_ELEMENTS_JS]

    async def test_click_failure_is_swallowed(self):
        """An intercepted click never propagates."""
        page = FakePage(css={"#accept": [FakeElement(click_error=playwright_error("intercepted"))]})

        outcome = await dismiss_consent(page)

        assert outcome.action is ConsentAction.FAILED

    async def test_script_failure_is_swallowed(self):
        """A failing removal script never propagates."""
        page = FakePage()

        async def failing_evaluate(script):
            raise playwright_error("Execution context was destroyed")

        page.evaluate = failing_evaluate

        outcome = await dismiss_consent(page)

        assert outcome.action is ConsentAction.FAILED

    async def test_custom_locators(self):
        """Callers may supply their own locator chain."""
        element = FakeElement()
        page = FakePage(css={"#onetrust-accept-btn-handler": [element]})

        outcome = await dismiss_consent(page, locators=(CssLocator("#onetrust-accept-btn-handler"),))

        assert outcome.action is ConsentAction.CLICKED
        assert element.clicks == 1
