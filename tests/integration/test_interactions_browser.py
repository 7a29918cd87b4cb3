"""
Integration tests for the interaction helpers against a real Chromium page.

Each test renders a small fixture document with ``page.set_content`` so
the helpers meet real layout, visibility and constraint validation
without needing the demo site.

Key SDET Concepts Demonstrated:
- Testing test infrastructure in isolation
- Deterministic fixture markup instead of a live site
- AAA pattern (Arrange / Act / Assert)
"""

from __future__ import annotations

import pytest
from playwright.sync_api import Page, expect

from interactions import (
    NoInteractableTarget,
    TimeBudget,
    bring_into_view,
    close_modals,
    dismiss_cookie_banners,
    handle_popups_and_modals,
    resolve,
    safe_submit,
    safe_toggle,
)
from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.fields import CHECKBOX, SELECT, FormField

pytestmark = [pytest.mark.integration, pytest.mark.browser]

COOKIE_BANNER = """
<div class="cookie-banner" id="cookie-banner"
     style="position: fixed; bottom: 0; left: 0; right: 0; height: 72px; background: #333;">
  <button type="button" onclick="this.closest('.cookie-banner').remove()">Accept</button>
</div>
"""

MODAL = """
<div class="modal-backdrop">
  <div class="modal" role="dialog">
    <div class="modal-header">
      <button type="button" class="modal-close" aria-label="Close"
              onclick="this.closest('.modal-backdrop').remove()">&times;</button>
    </div>
  </div>
</div>
"""

LEADIN = """
<div class="leadinModal" id="leadin-popup"
     style="position: fixed; inset: 0; background: rgba(0, 0, 0, 0.5);">
  <span class="leadinModal-close"
        onclick="document.getElementById('leadin-popup').remove()">&times;</span>
</div>
"""


def long_budget() -> TimeBudget:
    return TimeBudget.start(10_000)


class TestResolve:

    def test_hidden_candidate_is_skipped(self, page: Page):
        # Arrange
        page.set_content('<input id="old" style="display:none"><input id="new">')

        # Act
        target = resolve(page, ["#old", "#new"], description="email")

        # Assert
        assert target.index == 1
        assert target.locator.get_attribute("id") == "new"

    def test_first_visible_of_many(self, page: Page):
        page.set_content(
            '<button hidden>One</button><button>Two</button><button>Three</button>'
        )

        target = resolve(page, ["button"])

        assert target.locator.inner_text() == "Two"


class TestBringIntoView:

    def test_target_is_moved_out_from_under_sticky_header(self, page: Page):
        # Arrange
        page.set_content("""
            <body style="margin: 0; height: 3000px;">
              <div class="sticky-header"
                   style="position: fixed; top: 0; left: 0; right: 0; height: 80px;
                          background: #fff; z-index: 900;"></div>
              <textarea id="target"
                        style="position: absolute; top: 1000px; left: 100px; height: 100px;">
              </textarea>
            </body>
        """)
        page.evaluate("window.scrollTo(0, 980)")
        target = page.locator("#target")
        assert target.bounding_box()["y"] < 80

        # Act
        bring_into_view(page, target)

        # Assert
        assert target.bounding_box()["y"] >= 80

    def test_second_call_scrolls_nothing(self, page: Page):
        # Arrange
        page.set_content("""
            <body style="margin: 0; height: 3000px;">
              <div class="sticky-header"
                   style="position: fixed; top: 0; left: 0; right: 0; height: 80px;"></div>
              <input id="target" style="position: absolute; top: 1500px;">
            </body>
        """)
        target = page.locator("#target")
        bring_into_view(page, target)
        scroll_y = page.evaluate("window.scrollY")

        # Act
        bring_into_view(page, target)

        # Assert
        assert page.evaluate("window.scrollY") == scroll_y


class TestPopups:

    def test_cookie_banner_is_dismissed(self, page: Page):
        # Arrange
        page.set_content(COOKIE_BANNER)

        # Act
        dismissed = dismiss_cookie_banners(page, long_budget())

        # Assert
        assert dismissed is True
        expect(page.locator("#cookie-banner")).to_have_count(0)

    def test_modal_is_closed(self, page: Page):
        page.set_content(MODAL)

        assert close_modals(page, long_budget()) is True
        expect(page.locator(".modal")).to_have_count(0)

    def test_page_close_button_is_left_alone(self, page: Page):
        # Arrange
        page.set_content(
            '<main><button class="close-button" onclick="this.remove()">Close</button></main>'
        )

        # Act
        closed = close_modals(page, long_budget())

        # Assert
        assert closed is False
        expect(page.locator(".close-button")).to_be_visible()

    def test_lead_capture_popup_is_closed(self, page: Page):
        page.set_content(LEADIN)

        assert close_modals(page, long_budget()) is True
        expect(page.locator("#leadin-popup")).to_have_count(0)

    def test_clean_page_pass_completes(self, page: Page):
        page.set_content("<h1>Nothing to see</h1>")

        result = handle_popups_and_modals(page)

        assert result.outcome == "completed"
        assert result.dismissed == []


class TestSafeActions:

    def test_toggle_falls_back_to_label_checkbox(self, page: Page):
        # Arrange
        page.set_content("""
            <label class="terms-checkbox">
              <input type="checkbox" id="agree"> By signing up you agree to our terms
            </label>
        """)

        # Act
        safe_toggle(page, ['input[name="terms"]', ".terms-checkbox input"], timeout=500)

        # Assert
        expect(page.locator("#agree")).to_be_checked()

    def test_toggle_is_idempotent(self, page: Page):
        page.set_content('<input type="checkbox" id="terms" checked>')

        safe_toggle(page, ["#terms"])

        expect(page.locator("#terms")).to_be_checked()

    def test_submit_skips_disabled_button(self, page: Page):
        # Arrange
        page.set_content("""
            <button type="submit" disabled onclick="document.title = 'wrong'">Save</button>
            <button class="btn-submit" onclick="document.title = 'submitted'">Finish Setup</button>
        """)

        # Act
        safe_submit(page, ['button[type="submit"]', ".btn-submit"])

        # Assert
        expect(page).to_have_title("submitted")

    def test_submit_with_nothing_clickable_raises(self, page: Page):
        page.set_content("<p>No buttons here</p>")

        with pytest.raises(NoInteractableTarget):
            safe_submit(page, ["#save"], timeout=500)


class TestBasePageHelpers:

    FORM = """
        <form novalidate>
          <div class="form-group">
            <label for="first">First name</label>
            <input id="first" aria-invalid="true">
            <span class="error-message">Please enter your first name</span>
          </div>
          <div class="form-group">
            <label for="email">Email</label>
            <input id="email" type="email" required>
          </div>
          <div class="form-group">
            <label for="size">Size</label>
            <select id="size"><option value="">Please select</option><option value="s">Small</option></select>
          </div>
          <input type="checkbox" id="director">
        </form>
        <div role="alert">Please correct the highlighted fields</div>
    """

    CATALOG = {
        "first": FormField(("#first",)),
        "size": FormField(("#size",), SELECT),
        "director": FormField(("#director",), CHECKBOX),
        "missing": FormField(("#not-rendered",)),
    }

    @pytest.fixture
    def form_page(self, page: Page) -> BasePage:
        page.set_content(self.FORM)
        return BasePage(page, "http://localhost")

    def test_error_next_to_field(self, form_page):
        scope = form_page.expect_validation_error(
            form_page.page.locator("#first"), "Please enter your first name"
        )

        assert scope == "field"

    def test_error_elsewhere_on_page(self, form_page):
        scope = form_page.expect_validation_error(
            form_page.page.locator("#email"), "Please correct the highlighted fields"
        )

        assert scope == "page"

    def test_native_constraint_message(self, form_page):
        # Arrange
        email = form_page.page.locator("#email")
        email.evaluate("(el) => el.setCustomValidity('Please enter a valid email address')")

        # Act
        scope = form_page.expect_validation_error(email, "Please enter a valid email address")

        # Assert
        assert scope == "native"

    def test_missing_message_fails(self, form_page):
        with pytest.raises(AssertionError, match="Could not find validation error"):
            form_page.expect_validation_error(
                form_page.page.locator("#first"), "Something else entirely"
            )

    def test_fill_form_applies_each_kind(self, form_page):
        # Act
        changed = form_page.fill_form(
            self.CATALOG,
            {"first": "Ada", "size": "Small", "director": True, "missing": "skipped"},
        )

        # Assert
        assert changed == ["first", "size", "director"]
        expect(form_page.page.locator("#first")).to_have_value("Ada")
        expect(form_page.page.locator("#size")).to_have_value("s")
        expect(form_page.page.locator("#director")).to_be_checked()

    def test_fill_form_rejects_unknown_field(self, form_page):
        with pytest.raises(KeyError):
            form_page.fill_form(self.CATALOG, {"nickname": "Al"})
