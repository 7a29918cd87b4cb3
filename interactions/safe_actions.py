"""
Checkbox and submit interactions with selector fallback.

These wrappers only orchestrate retries across candidate selectors.
Whether the page ended up in the right state afterwards is for the
calling page object or test to check.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from interactions.catalogs import LOADING_INDICATORS
from interactions.errors import NoInteractableTarget
from interactions.popups import handle_popups_and_modals
from interactions.resolver import SelectorStrategy, as_locator, describe, first_visible
from interactions.scrolling import bring_into_view

logger = logging.getLogger(__name__)

VISIBLE_TIMEOUT_MS = 5000
PRE_CLICK_SETTLE_MS = 500
FORM_READY_SETTLE_MS = 1000
LOADING_TIMEOUT_MS = 5000


def safe_toggle(
    page: Page,
    candidates: Sequence[SelectorStrategy],
    checked: bool = True,
    timeout: float = VISIBLE_TIMEOUT_MS,
) -> None:
    """
    Put the first usable checkbox from ``candidates`` into ``checked`` state.

    The box is only clicked when its current state differs, so calling
    this on an already ticked box leaves it ticked.
    Hidden matches of a selector are passed over in favour of a later
    visible one.

    Raises:
        ValueError: If ``candidates`` is empty.
        NoInteractableTarget: If every candidate failed.
    """
    if not candidates:
        raise ValueError("safe_toggle() needs at least one candidate selector")

    for strategy in candidates:
        try:
            checkbox = as_locator(page, strategy).filter(visible=True).first
            checkbox.wait_for(state="visible", timeout=timeout)
            bring_into_view(page, checkbox)
            if checkbox.is_checked() != checked:
                checkbox.set_checked(checked)
            logger.info("Set checkbox %s to %s", describe(strategy), checked)
            return
        except PlaywrightError as exc:
            logger.info("Failed to toggle checkbox with selector %s: %s", describe(strategy), exc)
            continue

    raise NoInteractableTarget("toggle", len(candidates))


def safe_submit(
    page: Page,
    candidates: Sequence[SelectorStrategy],
    timeout: float = VISIBLE_TIMEOUT_MS,
) -> None:
    """
    Click the first visible, enabled submit control from ``candidates``.

    Overlays commonly block submission, so one popup suppression pass runs
    first. Disabled candidates are skipped without error.

    Raises:
        ValueError: If ``candidates`` is empty.
        NoInteractableTarget: If every candidate failed or was disabled.
    """
    if not candidates:
        raise ValueError("safe_submit() needs at least one candidate selector")

    handle_popups_and_modals(page)

    for strategy in candidates:
        try:
            visible = as_locator(page, strategy).filter(visible=True)
            visible.first.wait_for(state="visible", timeout=timeout)
            button = first_visible(visible, require_enabled=True)
            if button is None:
                logger.info("Submit button %s is disabled, trying next", describe(strategy))
                continue
            logger.debug("Scrolling to submit button: %s", describe(strategy))
            bring_into_view(page, button)
            page.wait_for_timeout(PRE_CLICK_SETTLE_MS)
            logger.info("Clicking submit button: %s", describe(strategy))
            button.click()
            return
        except PlaywrightError as exc:
            logger.info("Failed to click submit button %s: %s", describe(strategy), exc)
            continue

    raise NoInteractableTarget("submit", len(candidates))


def wait_for_form_ready(page: Page) -> None:
    """Wait for the DOM, clear popups, then wait out loading indicators."""
    page.wait_for_load_state("domcontentloaded")
    page.wait_for_timeout(FORM_READY_SETTLE_MS)
    handle_popups_and_modals(page)

    for indicator in LOADING_INDICATORS:
        try:
            page.locator(indicator).first.wait_for(state="hidden", timeout=LOADING_TIMEOUT_MS)
        except PlaywrightError:
            logger.debug("Loading indicator %s still present, continuing", indicator)
