"""
Scroll-into-view with compensation for sticky and fixed overlays.

Playwright scrolls a target just far enough to enter the viewport, which
on pages with a fixed header or a bottom cookie bar often leaves it
underneath the overlay. After the plain scroll we look for such overlays
and nudge the window so the target is uncovered.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from interactions.budget import TimeBudget
from interactions.catalogs import STICKY_OVERLAY_SELECTORS

logger = logging.getLogger(__name__)

SCROLL_SETTLE_MS = 500
ADJUST_SETTLE_MS = 300
OVERLAY_MARGIN_PX = 20
SCROLL_TIMEOUT_MS = 5000


def occlusion_offset(
    overlay_box: dict | None,
    target_box: dict | None,
    viewport_height: float | None,
    margin: float = OVERLAY_MARGIN_PX,
) -> float:
    """
    Vertical scroll needed to move a target out from under an overlay.

    Returns 0 when the overlay does not cover the target, or when the
    target sits inside the overlay (scrolling cannot help then). Overlays
    anchored in the top half of the viewport push the page up (negative
    offset), bottom overlays push it down.
    """
    if not overlay_box or not target_box:
        return 0

    o_top, o_bottom = overlay_box["y"], overlay_box["y"] + overlay_box["height"]
    t_top, t_bottom = target_box["y"], target_box["y"] + target_box["height"]
    o_left, o_right = overlay_box["x"], overlay_box["x"] + overlay_box["width"]
    t_left, t_right = target_box["x"], target_box["x"] + target_box["width"]

    if o_top <= t_top and t_bottom <= o_bottom and o_left <= t_left and t_right <= o_right:
        return 0
    if o_top >= t_bottom or t_top >= o_bottom:
        return 0
    if o_left >= t_right or t_left >= o_right:
        return 0

    shift = overlay_box["height"] + margin
    midline = viewport_height / 2 if viewport_height else o_bottom
    overlay_centre = o_top + overlay_box["height"] / 2
    return -shift if overlay_centre <= midline else shift


def _wait(page: Page, ms: float, budget: TimeBudget | None) -> None:
    page.wait_for_timeout(budget.clamp(ms) if budget else ms)


def bring_into_view(page: Page, target: Locator, budget: TimeBudget | None = None) -> None:
    """
    Scroll ``target`` into the viewport and clear any overlay covering it.

    The plain scroll propagates its error (detached or missing target);
    everything after it is best effort and a failing overlay is skipped.
    Calling it again on an uncovered target scrolls nothing.

    Args:
        page: Page owning the target.
        target: Element to reveal.
        budget: Optional deadline bounding the scroll and settle waits.
    """
    timeout = budget.clamp(SCROLL_TIMEOUT_MS) if budget else SCROLL_TIMEOUT_MS
    target.scroll_into_view_if_needed(timeout=timeout)
    _wait(page, SCROLL_SETTLE_MS, budget)

    viewport = page.viewport_size
    viewport_height = viewport["height"] if viewport else None

    for selector in STICKY_OVERLAY_SELECTORS:
        try:
            overlay = page.locator(selector).first
            if not overlay.is_visible():
                continue
            box_timeout = budget.clamp(SCROLL_TIMEOUT_MS) if budget else SCROLL_TIMEOUT_MS
            offset = occlusion_offset(
                overlay.bounding_box(timeout=box_timeout),
                target.bounding_box(timeout=box_timeout),
                viewport_height,
            )
            if not offset:
                continue
            logger.debug("Overlay %s covers target, scrolling by %dpx", selector, offset)
            page.evaluate("(dy) => window.scrollBy(0, dy)", offset)
            _wait(page, ADJUST_SETTLE_MS, budget)
        except PlaywrightError as exc:
            logger.debug("Skipping overlay %s: %s", selector, exc)
            continue
