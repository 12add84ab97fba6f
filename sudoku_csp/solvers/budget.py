"""Step and time limits for a search."""

from __future__ import annotations
import time
from typing import Optional


class SearchBudget:
    """
    Limits how much work a search may do before giving up.

    The solver charges one step per trial assignment. Once either limit is
    exceeded the search unwinds with a failure, reverting as it goes.
    """

    def __init__(self, max_steps: Optional[int] = None, timeout_seconds: Optional[float] = None):
        """
        Args:
            max_steps: Maximum number of trial assignments, None for no limit.
            timeout_seconds: Wall-clock limit measured from start(), None for
                no limit.
        """
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        if timeout_seconds is not None and timeout_seconds < 0:
            raise ValueError(f"timeout_seconds must be non-negative, got {timeout_seconds}")

        self.max_steps = max_steps
        self.timeout_seconds = timeout_seconds
        self.steps = 0
        self._deadline: Optional[float] = None
        self._exhausted = False

    def start(self) -> None:
        """Reset the step count and arm the deadline."""
        self.steps = 0
        self._exhausted = False
        if self.timeout_seconds is not None:
            self._deadline = time.perf_counter() + self.timeout_seconds
        else:
            self._deadline = None

    def charge(self) -> bool:
        """
        Account for one more assignment.

        Returns:
            True if the budget is now exceeded and the search must stop.
        """
        if self._exhausted:
            return True

        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            self._exhausted = True
        elif self._deadline is not None and time.perf_counter() >= self._deadline:
            self._exhausted = True
        return self._exhausted

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __repr__(self) -> str:
        return (f"SearchBudget(max_steps={self.max_steps}, "
                f"timeout_seconds={self.timeout_seconds}, steps={self.steps})")
