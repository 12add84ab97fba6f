"""Recursive backtracking search with forward checking."""

from __future__ import annotations
import logging
from typing import Optional

from .base_solver import BaseSolver, SolverStats
from .budget import SearchBudget
from .ordering import CandidateOrder, natural_order
from ..core.board import Board
from ..core.constants import EMPTY

log = logging.getLogger(__name__)


def solve(
    board: Board,
    order: Optional[CandidateOrder] = None,
    budget: Optional[SearchBudget] = None,
    stats: Optional[SolverStats] = None
) -> bool:
    """
    Try to solve the board in place.

    If the puzzle can be solved, the board is left solved and True is
    returned. Otherwise False is returned and the board holds exactly the
    values it held before the call: every branch reverts its own
    assignment before giving up, so no snapshot or undo log is needed.

    A board that already has a conflict is rejected without any trial.
    The search never raises.

    Args:
        board: The board to solve.
        order: Candidate ordering policy (ascending by default).
        budget: Optional step/time limit. Running out counts as failure.
        stats: Optional counters to update.
    """
    if order is None:
        order = natural_order
    if stats is None:
        stats = SolverStats()
    if budget is not None:
        budget.start()

    log.debug("Searching board with %d unresolved positions", board.count_empty())

    if not board.is_consistent():
        log.debug("Board has conflicting values, nothing to search")
        return False

    solved = _search(board, order, budget, stats)

    if budget is not None and budget.exhausted:
        stats.extra["budget_exhausted"] = True
        log.debug("Search budget exhausted after %d steps", budget.steps)
    log.debug(
        "Search %s: %d calls, %d assignments, %d backtracks",
        "succeeded" if solved else "failed",
        stats.iterations, stats.nodes_explored, stats.backtracks
    )
    return solved


def _search(
    board: Board,
    order: CandidateOrder,
    budget: Optional[SearchBudget],
    stats: SolverStats
) -> bool:
    """One level of the recursion; see solve() for the contract."""
    stats.iterations += 1

    if board.is_solved():
        return True

    # Select the first unknown position.
    target = board.first_unresolved()
    if target is None:
        return False

    candidates = target.possible_values()
    if not candidates:
        stats.dead_ends += 1
        return False

    for value in order(candidates):
        if budget is not None and budget.charge():
            return False

        target.set_value(value)
        stats.nodes_explored += 1
        if _search(board, order, budget, stats):
            return True

        target.set_value(EMPTY)
        stats.backtracks += 1

    return False


class BacktrackingSolver(BaseSolver):
    """
    Depth-first backtracking over the board's constraint graph.

    Features:
    - Row-major variable selection (first unresolved position)
    - Forward checking through each position's row, column and box groups
    - Pluggable candidate ordering
    - Optional step and time budget
    """

    name = "Backtracking"

    def __init__(
        self,
        order: Optional[CandidateOrder] = None,
        max_steps: Optional[int] = None,
        timeout_seconds: Optional[float] = None
    ):
        """
        Initialize the solver.

        Args:
            order: Candidate ordering policy (ascending by default).
            max_steps: Give up after this many trial assignments.
            timeout_seconds: Give up after this much wall-clock time.
        """
        super().__init__()
        self.order = order or natural_order
        self.max_steps = max_steps
        self.timeout_seconds = timeout_seconds

    def _solve(self, board: Board) -> bool:
        budget = None
        if self.max_steps is not None or self.timeout_seconds is not None:
            budget = SearchBudget(self.max_steps, self.timeout_seconds)
        return solve(board, self.order, budget, self.stats)
