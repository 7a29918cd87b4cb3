"""
Popup and modal suppression.

One pass runs three phases in a fixed order under a single time budget:

1. cookie consent banners (at most one dismissed)
2. generic modal dialogs (at most one closed)
3. CAPTCHA widgets (one click on a checkbox-style challenge, never solved)

The page may close under us at any time, typically because a submit we
just made navigated away. Closure and budget exhaustion both end the
pass quietly; finding nothing is the normal case and is not an error.
"""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from interactions.budget import TimeBudget
from interactions.catalogs import (
    CAPTCHA_CLICKABLE_MARKERS,
    CAPTCHA_SELECTORS,
    COOKIE_BUTTON_SELECTORS,
    LEADIN_MODAL_CLOSE,
    MODAL_ANCESTOR_XPATH,
    MODAL_CLOSE_SELECTORS,
    OVERLAY_ANCESTOR_XPATH,
)
from interactions.resolver import first_visible
from interactions.scrolling import bring_into_view

logger = logging.getLogger(__name__)

POPUP_BUDGET_MS = 2000
MIN_PASS_MS = 1000
FINAL_SETTLE_CAP_MS = 500
CLICK_TIMEOUT_MS = 2000
DISMISS_SETTLE_MS = 500
CAPTCHA_SETTLE_MS = 2000

COMPLETED = "completed"
PAGE_CLOSED = "page_closed"
BUDGET_EXHAUSTED = "budget_exhausted"
FAILED = "failed"


@dataclass
class SuppressionResult:
    """What a suppression pass did and why it stopped."""

    outcome: str = COMPLETED
    phases_run: list[str] = field(default_factory=list)
    dismissed: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0


class _PassInterrupted(Exception):
    """Raised at a checkpoint once the pass has to stop."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def _stop_reason(page: Page, budget: TimeBudget) -> str | None:
    if page.is_closed():
        return PAGE_CLOSED
    if budget.expired:
        return BUDGET_EXHAUSTED
    return None


def _checkpoint(page: Page, budget: TimeBudget) -> None:
    reason = _stop_reason(page, budget)
    if reason:
        raise _PassInterrupted(reason)


def _settle(page: Page, budget: TimeBudget, ms: float) -> None:
    """Trailing wait after an action; skipped once the pass must stop."""
    if _stop_reason(page, budget):
        return
    try:
        page.wait_for_timeout(budget.clamp(ms))
    except PlaywrightError:
        if not page.is_closed():
            raise
        logger.info("Page closed while waiting for popup to disappear")


def _interruptible(name: str) -> Callable:
    """Run a phase with its own default budget and swallow interruptions."""

    def decorator(phase: Callable[[Page, TimeBudget], bool]) -> Callable:
        @functools.wraps(phase)
        def wrapper(page: Page, budget: TimeBudget | None = None) -> bool:
            budget = budget or TimeBudget.start(POPUP_BUDGET_MS)
            try:
                return phase(page, budget)
            except _PassInterrupted as stop:
                logger.info("%s check stopped early: %s", name, stop.reason)
                return False

        return wrapper

    return decorator


@_interruptible("Cookie banner")
def dismiss_cookie_banners(page: Page, budget: TimeBudget) -> bool:
    """Click the first visible consent button. Returns True if one was clicked."""
    logger.debug("Checking for cookie banners")

    for selector in COOKIE_BUTTON_SELECTORS:
        _checkpoint(page, budget)
        try:
            button = first_visible(page.locator(selector))
            if button is None:
                continue
            logger.info("Found and clicking cookie banner button: %s", selector)
            bring_into_view(page, button, budget)
            _checkpoint(page, budget)
            button.click(timeout=budget.clamp(CLICK_TIMEOUT_MS))
        except PlaywrightError as exc:
            logger.debug("Cookie button %s not usable: %s", selector, exc)
            continue
        _settle(page, budget, DISMISS_SETTLE_MS)
        return True

    logger.debug("No cookie banners found")
    return False


def _inside_modal(button) -> bool:
    if button.locator(MODAL_ANCESTOR_XPATH).count() > 0:
        return True
    return button.locator(OVERLAY_ANCESTOR_XPATH).count() > 0


@_interruptible("Modal")
def close_modals(page: Page, budget: TimeBudget) -> bool:
    """
    Close the first open modal found. Returns True if one was closed.

    A visible close button only qualifies when an ancestor looks like a
    modal, dialog, popup, overlay or CAPTCHA container, so that ordinary
    page buttons carrying "close" in their class are left alone. The
    marketing lead-capture popup close button is clicked without that
    check; its markup does not carry a modal ancestor.
    """
    logger.debug("Attempting to close any open modals")

    for selector in MODAL_CLOSE_SELECTORS:
        _checkpoint(page, budget)
        try:
            buttons = page.locator(selector)
            count = buttons.count()
        except PlaywrightError as exc:
            logger.debug("Error handling close button %s: %s", selector, exc)
            continue

        for i in range(count):
            _checkpoint(page, budget)
            button = buttons.nth(i)
            try:
                if not button.is_visible():
                    continue
                if selector == LEADIN_MODAL_CLOSE:
                    logger.info("Found lead-capture popup close button")
                    button.click(force=True, timeout=budget.clamp(CLICK_TIMEOUT_MS))
                elif _inside_modal(button):
                    logger.info("Found modal close button: %s (index %d)", selector, i)
                    bring_into_view(page, button, budget)
                    _checkpoint(page, budget)
                    button.click(timeout=budget.clamp(CLICK_TIMEOUT_MS))
                else:
                    continue
            except PlaywrightError as exc:
                logger.info("Could not click modal close button %s: %s", selector, exc)
                continue
            _settle(page, budget, DISMISS_SETTLE_MS)
            return True

    logger.debug("No modals found to close")
    return False


@_interruptible("CAPTCHA")
def handle_captcha(page: Page, budget: TimeBudget) -> bool:
    """
    Detect a CAPTCHA widget and make one click on a checkbox challenge.

    The challenge is never solved or verified; a human may have to step
    in. Returns True if a widget was detected.
    """
    logger.debug("Checking for CAPTCHA")

    for selector in CAPTCHA_SELECTORS:
        _checkpoint(page, budget)
        try:
            widget = first_visible(page.locator(selector))
            if widget is None:
                continue
            logger.info("Found CAPTCHA element: %s", selector)
            bring_into_view(page, widget, budget)
        except PlaywrightError as exc:
            logger.debug("CAPTCHA selector %s not usable: %s", selector, exc)
            continue

        if any(marker in selector for marker in CAPTCHA_CLICKABLE_MARKERS):
            _checkpoint(page, budget)
            try:
                widget.click(timeout=budget.clamp(CLICK_TIMEOUT_MS))
            except PlaywrightError as exc:
                logger.info("Could not click CAPTCHA element: %s", exc)
            else:
                _settle(page, budget, CAPTCHA_SETTLE_MS)

        logger.warning("CAPTCHA detected, manual interaction may be required")
        return True

    logger.debug("No CAPTCHA found")
    return False


PHASES = (
    ("cookies", dismiss_cookie_banners),
    ("modals", close_modals),
    ("captcha", handle_captcha),
)


def handle_popups_and_modals(
    page: Page,
    budget_ms: float = POPUP_BUDGET_MS,
    clock: Callable[[], float] = time.monotonic,
) -> SuppressionResult:
    """
    Run one time-boxed suppression pass over the page.

    Phases run strictly in order and each starts only if the page is still
    open and the budget is not spent. If the pass finished in under a
    second a short extra wait (at most 500 ms) lets closing animations end.
    Never raises for closure, timeouts or an empty page.

    Args:
        page: Page to clean up.
        budget_ms: Time budget for the phases.
        clock: Monotonic clock in seconds.

    Returns:
        SuppressionResult describing the pass.
    """
    result = SuppressionResult()
    if page.is_closed():
        logger.info("Page is closed, skipping popup handling")
        result.outcome = PAGE_CLOSED
        return result

    logger.info("Handling popups and modals...")
    budget = TimeBudget.start(budget_ms, clock)

    try:
        for name, phase in PHASES:
            reason = _stop_reason(page, budget)
            if reason:
                result.outcome = reason
                logger.info("Popup handling stopped before %s phase: %s", name, reason)
                break
            result.phases_run.append(name)
            if phase(page, budget):
                result.dismissed.append(name)
        if result.outcome == COMPLETED:
            result.outcome = _stop_reason(page, budget) or COMPLETED
    except PlaywrightError as exc:
        result.outcome = PAGE_CLOSED if page.is_closed() else FAILED
        logger.info("Error in popup handling: %s", exc)

    if page.is_closed():
        logger.info("Page closed during popup handling")
        result.outcome = PAGE_CLOSED
        result.elapsed_ms = budget.elapsed_ms
        return result

    elapsed = budget.elapsed_ms
    if elapsed < MIN_PASS_MS:
        try:
            page.wait_for_timeout(min(MIN_PASS_MS - elapsed, FINAL_SETTLE_CAP_MS))
        except PlaywrightError as exc:
            if page.is_closed():
                logger.info("Page closed while waiting for animations")
                result.outcome = PAGE_CLOSED
            else:
                logger.info("Animation wait failed: %s", exc)
                result.outcome = FAILED

    result.elapsed_ms = budget.elapsed_ms
    logger.info("Popup handling finished in %dms (%s)", result.elapsed_ms, result.outcome)
    return result
