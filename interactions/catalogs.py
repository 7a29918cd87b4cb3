"""
Selector catalogs consumed by the interaction helpers.

Order matters in every list: helpers try entries first to last and the
first visible match wins.
"""

# Fixed or sticky elements that can sit on top of a scrolled-to target.
STICKY_OVERLAY_SELECTORS = (
    ".sticky-header",
    ".fixed-header",
    ".navbar-fixed",
    '[style*="position: fixed"]',
    '[style*="position: sticky"]',
    ".banner",
    ".cookie-banner",
    ".notification-bar",
)

COOKIE_BUTTON_SELECTORS = (
    'button:has-text("Accept")',
    'button:has-text("Accept All")',
    'button:has-text("Allow All")',
    'button:has-text("OK")',
    'button:has-text("Agree")',
    'button:has-text("Continue")',
    'button[id*="accept"]',
    'button[class*="accept"]',
    'button[data-testid*="accept"]',
    ".cookie-banner button",
    ".consent-banner button",
    "#cookie-banner button",
    '[data-testid="cookie-banner"] button',
)

# Marketing popup that is closed without checking for a modal ancestor.
LEADIN_MODAL_CLOSE = ".leadinModal-close"

# Most specific first.
MODAL_CLOSE_SELECTORS = (
    LEADIN_MODAL_CLOSE,
    ".modal-close",
    ".close-button",
    ".modal-header .close",
    '.modal-header button[aria-label="Close"]',
    '[data-dismiss="modal"]',
    '[data-testid="close"]',
    '[data-testid="modal-close"]',
    'button:has-text("×")',
    'button:has-text("✕")',
    'button[aria-label="Close"]:not([class*="main"]):not([class*="primary"])',
    'button[aria-label="close"]:not([class*="main"]):not([class*="primary"])',
    'button[title="Close"]:not([class*="main"]):not([class*="primary"])',
    'button[title="close"]:not([class*="main"]):not([class*="primary"])',
    ".fa-times",
    ".fa-close",
    'span:has-text("×")',
    'span:has-text("✕")',
    'button[class*="close"]:not([class*="main"]):not([class*="primary"])',
    'div[class*="close"]:not([class*="main"]):not([class*="primary"])',
    'span[class*="close"]:not([class*="main"]):not([class*="primary"])',
)

# A close button only counts when one of its ancestors looks like a modal.
MODAL_ANCESTOR_XPATH = (
    "xpath=ancestor::div["
    'contains(@class, "modal") or contains(@class, "dialog") '
    'or contains(@class, "popup") or contains(@role, "dialog")]'
)
OVERLAY_ANCESTOR_XPATH = (
    "xpath=ancestor::div["
    'contains(@class, "overlay") or contains(@class, "recaptcha") '
    'or contains(@class, "captcha")]'
)

CAPTCHA_SELECTORS = (
    'iframe[src*="recaptcha"]',
    'iframe[title*="reCAPTCHA"]',
    ".g-recaptcha",
    "[data-sitekey]",
    "#recaptcha-anchor",
    ".recaptcha-checkbox",
)

# Substrings marking a checkbox-style challenge worth one click.
CAPTCHA_CLICKABLE_MARKERS = ("checkbox", "anchor")

LOADING_INDICATORS = (
    ".loading",
    ".spinner",
    '[data-loading="true"]',
    ".loader",
)

TERMS_CHECKBOX_SELECTORS = (
    'input[type="checkbox"][name*="terms"]',
    'input[type="checkbox"][id*="terms"]',
    'input[type="checkbox"][class*="terms"]',
    '[role="checkbox"]',
    'input[type="checkbox"]',
    'label:has-text("By signing up") input[type="checkbox"]',
    'label:has-text("agree") input[type="checkbox"]',
    ".terms-checkbox input",
    '.checkbox input[type="checkbox"]',
)

SUBMIT_BUTTON_SELECTORS = (
    'button[type="submit"]',
    'input[type="submit"]',
    'button:has-text("Sign Up")',
    'button:has-text("Create Account")',
    'button:has-text("Finish Setup")',
    'button:has-text("Submit")',
    'button:has-text("Register")',
    ".submit-button",
    ".btn-submit",
    '[data-testid="submit"]',
)
