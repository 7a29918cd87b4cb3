"""
Locator fallback resolution.

A logical UI element ("the email field", "the submit button") is
described by an ordered list of selector strategies. The first strategy
that currently matches a visible element wins; later strategies are not
queried at all once one succeeds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from interactions.errors import NotFound

logger = logging.getLogger(__name__)

# A selector string, or a callable building a Locator (get_by_label etc.).
SelectorStrategy = Union[str, Callable[[Page], Locator]]


@dataclass(frozen=True)
class ResolvedTarget:
    """The winning candidate and the concrete visible element it matched."""

    index: int
    strategy: SelectorStrategy
    locator: Locator


def as_locator(page: Page, strategy: SelectorStrategy) -> Locator:
    """Turn a selector string or locator factory into a Locator."""
    if callable(strategy):
        return strategy(page)
    return page.locator(strategy)


def describe(strategy: SelectorStrategy) -> str:
    """Human readable form of a strategy for log lines."""
    if isinstance(strategy, str):
        return strategy
    return getattr(strategy, "__name__", repr(strategy))


def first_visible(locator: Locator, require_enabled: bool = False) -> Locator | None:
    """
    Return the first visible element of a possibly multi-match locator.

    Elements present in the DOM but hidden do not count. With
    ``require_enabled`` a visible but disabled element is skipped too.
    """
    for i in range(locator.count()):
        candidate = locator.nth(i)
        if not candidate.is_visible():
            continue
        if require_enabled and not candidate.is_enabled():
            continue
        return candidate
    return None


def resolve(
    page: Page,
    candidates: Sequence[SelectorStrategy],
    *,
    require_enabled: bool = False,
    description: str | None = None,
) -> ResolvedTarget:
    """
    Resolve an ordered candidate list to its first visible match.

    Args:
        page: Page to query. Only read-only queries are issued.
        candidates: Non-empty ordered selector strategies, preferred first.
        require_enabled: Also require the element to be enabled.
        description: Name of the logical element, used in errors and logs.

    Returns:
        The lowest-index candidate with a visible (and enabled) element.

    Raises:
        ValueError: If ``candidates`` is empty.
        NotFound: If no candidate has a visible match.
    """
    if not candidates:
        raise ValueError("resolve() needs at least one candidate selector")

    for index, strategy in enumerate(candidates):
        try:
            match = first_visible(as_locator(page, strategy), require_enabled)
        except PlaywrightError as exc:
            logger.debug("Candidate %s failed to query: %s", describe(strategy), exc)
            continue
        if match is None:
            logger.debug("Candidate %s has no visible match", describe(strategy))
            continue
        if index > 0:
            logger.warning(
                "Fell back to candidate #%d (%s) for %s",
                index,
                describe(strategy),
                description or "element",
            )
        return ResolvedTarget(index=index, strategy=strategy, locator=match)

    raise NotFound(len(candidates), description)


def by_label(text: str, exact: bool = False) -> Callable[[Page], Locator]:
    """Strategy matching form controls by their label text."""

    def strategy(page: Page) -> Locator:
        return page.get_by_label(text, exact=exact)

    strategy.__name__ = f"label={text!r}"
    return strategy


def by_role(role: str, name: str | None = None) -> Callable[[Page], Locator]:
    """Strategy matching elements by ARIA role and accessible name."""

    def strategy(page: Page) -> Locator:
        if name is None:
            return page.get_by_role(role)
        return page.get_by_role(role, name=name)

    strategy.__name__ = f"role={role}[name={name!r}]" if name else f"role={role}"
    return strategy


def by_text(text: str) -> Callable[[Page], Locator]:
    """Strategy matching elements by their visible text."""

    def strategy(page: Page) -> Locator:
        return page.get_by_text(text)

    strategy.__name__ = f"text={text!r}"
    return strategy
