from npuzzle.models.board import Board
from npuzzle.models.result import SolveResult, SolverStatus

__all__ = ["Board", "SolveResult", "SolverStatus"]
