"""
Overlay selection for rendered pages.

Which overlays a page shows is decided per request, in priority order:
the ``overlays`` query parameter, the ``demo_overlays`` cookie, then the
``DEFAULT_OVERLAYS`` config value. Each is a comma separated list of
names from ``KNOWN_OVERLAYS``; ``none`` disables all of them.
"""

from flask import Flask, current_app, request

KNOWN_OVERLAYS = ("cookie", "leadin", "modal", "captcha", "sticky", "banner")
OVERLAY_COOKIE = "demo_overlays"
CONSENT_COOKIE = "cookie_consent"


def parse_overlays(raw: str | None) -> frozenset[str]:
    """Parse a comma separated overlay list, ignoring unknown names."""
    if not raw:
        return frozenset()
    names = {part.strip().lower() for part in raw.split(",")}
    return frozenset(name for name in names if name in KNOWN_OVERLAYS)


def active_overlays() -> frozenset[str]:
    """Overlays to render for the current request."""
    raw = request.args.get("overlays")
    if raw is None:
        raw = request.cookies.get(OVERLAY_COOKIE)
    if raw is None:
        raw = current_app.config.get("DEFAULT_OVERLAYS", "")
    overlays = parse_overlays(raw)
    # Consent is remembered once given
    if request.cookies.get(CONSENT_COOKIE) == "1":
        overlays = overlays - {"cookie"}
    return overlays


def register_overlays(app: Flask) -> None:
    """Expose the active overlays to every template."""

    @app.context_processor
    def inject_overlays():
        return {"overlays": active_overlays()}

    @app.after_request
    def remember_overlays(response):
        # Keep an explicit choice for the rest of the browsing session
        raw = request.args.get("overlays")
        if raw is not None:
            response.set_cookie(OVERLAY_COOKIE, raw)
        return response
