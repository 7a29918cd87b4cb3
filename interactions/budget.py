"""Deadline tracking for time-boxed helper passes."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class TimeBudget:
    """
    A deadline computed once at the start of a pass.

    Every browser call made while the budget is live should be preceded by
    an ``expired`` check and given a timeout from ``clamp`` so the pass
    cannot outlive the deadline by more than one call.

    Attributes:
        duration_ms: Total allowance in milliseconds.
        started_at: Clock reading (seconds) when the budget was created.
        clock: Monotonic clock returning seconds.
    """

    duration_ms: float
    started_at: float
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    @classmethod
    def start(
        cls, duration_ms: float, clock: Callable[[], float] = time.monotonic
    ) -> "TimeBudget":
        """Create a budget whose deadline is ``duration_ms`` from now."""
        return cls(duration_ms=duration_ms, started_at=clock(), clock=clock)

    @property
    def elapsed_ms(self) -> float:
        return (self.clock() - self.started_at) * 1000

    @property
    def remaining_ms(self) -> float:
        return max(0.0, self.duration_ms - self.elapsed_ms)

    @property
    def expired(self) -> bool:
        return self.elapsed_ms >= self.duration_ms

    def clamp(self, timeout_ms: float) -> float:
        """
        Bound a per-operation timeout by what is left of the budget.

        Never returns 0: Playwright treats ``timeout=0`` as "wait forever".
        """
        return max(1.0, min(float(timeout_ms), self.remaining_ms))
