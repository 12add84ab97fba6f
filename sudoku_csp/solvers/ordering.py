"""Candidate ordering policies for the trial loop."""

from __future__ import annotations
import random
from typing import Callable, Iterable, List, Optional

CandidateOrder = Callable[[Iterable[int]], List[int]]


def natural_order(candidates: Iterable[int]) -> List[int]:
    """Try candidates in ascending order."""
    return sorted(candidates)


class ShuffledOrder:
    """
    Try candidates in a random order drawn from a private, seeded generator.

    The same seed yields the same sequence of orderings, so a randomized
    search is reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def __call__(self, candidates: Iterable[int]) -> List[int]:
        values = sorted(candidates)
        self._rng.shuffle(values)
        return values

    def __repr__(self) -> str:
        return f"ShuffledOrder(seed={self.seed})"
