"""Sliding-tile (N-puzzle) solver."""

from npuzzle.engine.solver import SearchBudget, Solver
from npuzzle.errors import InvalidSizeError, PuzzleError, ValidationError
from npuzzle.models import Board, SolveResult, SolverStatus

__version__ = "1.0.0"

__all__ = [
    "Board",
    "InvalidSizeError",
    "PuzzleError",
    "SearchBudget",
    "SolveResult",
    "Solver",
    "SolverStatus",
    "ValidationError",
]
