from npuzzle.engine.solver.budget import SearchBudget
from npuzzle.engine.solver.node import SearchNode
from npuzzle.engine.solver.parity import is_solvable
from npuzzle.engine.solver.search import Search, SearchStatus
from npuzzle.engine.solver.solver import MAX_DIMENSION, MIN_DIMENSION, Solver

__all__ = [
    "MAX_DIMENSION",
    "MIN_DIMENSION",
    "Search",
    "SearchBudget",
    "SearchNode",
    "SearchStatus",
    "Solver",
    "is_solvable",
]
