"""Sliding puzzle solver: A* on the board and its twin in lockstep."""

from __future__ import annotations

import logging

from npuzzle.engine.solver.budget import SearchBudget
from npuzzle.engine.solver.search import Search, SearchStatus
from npuzzle.errors import InvalidSizeError
from npuzzle.models.board import Board
from npuzzle.models.result import SolverStatus

logger = logging.getLogger(__name__)

MIN_DIMENSION = 2
MAX_DIMENSION = 128  # exclusive


class Solver:
    """Find a shortest solution for *initial*, or prove there is none.

    Swapping two non-blank tiles flips the permutation parity, so exactly
    one of the board and its twin can reach the goal. Both are searched
    one step at a time; whichever surfaces a goal first settles the
    question. The search runs to completion inside the constructor.
    """

    def __init__(self, initial: Board, budget: SearchBudget | None = None) -> None:
        n = initial.dimension()
        if n < MIN_DIMENSION or n >= MAX_DIMENSION:
            raise InvalidSizeError(n)
        initial.validate()

        self.initial = initial
        self.budget = budget or SearchBudget.unbounded()
        self.status = SolverStatus.RUNNING
        self._main = Search(initial, self.budget, label="main")
        self._twin = Search(initial.twin(), self.budget, label="twin")

        logger.debug("Solving %d×%d board (manhattan=%d, hamming=%d)",
                     n, n, initial.manhattan(), initial.hamming())
        self._run()
        logger.debug("Finished: %s after %d expansions (%d enqueued)",
                     self.status, self.expanded, self.enqueued)

    # -- search loop ----------------------------------------------------------

    def _run(self) -> None:
        main, twin = self._main, self._twin
        while self.status is SolverStatus.RUNNING:
            if not self._may_expand():
                self.status = SolverStatus.BUDGET_EXCEEDED
                break
            main.step()
            if main.status is SearchStatus.FOUND:
                self.status = SolverStatus.SOLVED
                break

            if not self._may_expand():
                self.status = SolverStatus.BUDGET_EXCEEDED
                break
            twin.step()
            if twin.status is SearchStatus.FOUND:
                self.status = SolverStatus.UNSOLVABLE
                break

            if not (main.running or twin.running):
                self.status = SolverStatus.BUDGET_EXCEEDED

        if self.status is SolverStatus.BUDGET_EXCEEDED:
            logger.info("Search budget exceeded (%d nodes expanded)", self.expanded)

    def _may_expand(self) -> bool:
        """Whether one more step stays within ``max_expansions``."""
        return self.budget.allows_expansions(self.expanded)

    # -- queries --------------------------------------------------------------

    @property
    def expanded(self) -> int:
        return self._main.expanded + self._twin.expanded

    @property
    def enqueued(self) -> int:
        return self._main.enqueued + self._twin.enqueued

    def is_solvable(self) -> bool:
        return self.status is SolverStatus.SOLVED

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board; -1 if not solved."""
        if self._main.goal is None or not self.is_solvable():
            return -1
        return self._main.goal.moves

    def solution(self) -> list[Board] | None:
        """Boards of a shortest solution, initial first; None if not solved."""
        if self._main.goal is None or not self.is_solvable():
            return None
        return self._main.goal.path()
