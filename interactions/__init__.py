"""
Resilient browser interaction helpers.

This package keeps automated form interactions reliable against a page
that renders dynamically and throws overlays at the user:

- resolver: first-visible-wins lookup over an ordered list of selectors
- scrolling: scroll-into-view with compensation for sticky headers
- popups: time-boxed dismissal of cookie banners, modals and CAPTCHAs
- safe_actions: checkbox toggle and form submission with selector fallback

All helpers drive the Playwright sync API.
"""

from interactions.budget import TimeBudget
from interactions.errors import InteractionError, NoInteractableTarget, NotFound
from interactions.popups import (
    SuppressionResult,
    close_modals,
    dismiss_cookie_banners,
    handle_captcha,
    handle_popups_and_modals,
)
from interactions.resolver import (
    ResolvedTarget,
    as_locator,
    by_label,
    by_role,
    by_text,
    first_visible,
    resolve,
)
from interactions.safe_actions import safe_submit, safe_toggle, wait_for_form_ready
from interactions.scrolling import bring_into_view

__all__ = [
    "InteractionError",
    "NoInteractableTarget",
    "NotFound",
    "ResolvedTarget",
    "SuppressionResult",
    "TimeBudget",
    "as_locator",
    "bring_into_view",
    "by_label",
    "by_role",
    "by_text",
    "close_modals",
    "dismiss_cookie_banners",
    "first_visible",
    "handle_captcha",
    "handle_popups_and_modals",
    "resolve",
    "safe_submit",
    "safe_toggle",
    "wait_for_form_ready",
]
