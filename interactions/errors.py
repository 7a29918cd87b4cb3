"""Exceptions raised by the interaction helpers."""

from __future__ import annotations


class InteractionError(Exception):
    """Base class for helper failures surfaced to the calling workflow."""


class NotFound(InteractionError, LookupError):
    """No candidate selector produced a visible match."""

    def __init__(self, attempted: int, description: str | None = None):
        self.attempted = attempted
        self.description = description
        target = f" for {description}" if description else ""
        super().__init__(
            f"No visible element{target} matched any of {attempted} candidate selector(s)"
        )


class NoInteractableTarget(InteractionError):
    """Every candidate for a toggle/submit step failed."""

    def __init__(self, action: str, attempted: int):
        self.action = action
        self.attempted = attempted
        super().__init__(
            f"Could not {action} any element with the {attempted} provided selector(s)"
        )
