"""Solver outcome types shared by the engine and the frontends."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.models.board import Board


class SolverStatus(StrEnum):
    RUNNING = "running"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    BUDGET_EXCEEDED = "budget_exceeded"


@dataclass
class SolveResult:
    """One solved (or abandoned) puzzle, ready for printing."""

    source: str
    status: SolverStatus
    moves: int
    seconds: float
    expanded: int
    solution: list[Board] | None = field(default=None, repr=False)

    @property
    def is_solvable(self) -> bool:
        return self.status is SolverStatus.SOLVED
