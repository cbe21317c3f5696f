"""Solver test suite.

Puzzle files live under ``<project_root>/fixtures/``; the number in each
name is the optimal move count. Every test is hard-killed by
``pytest-timeout`` (configured in ``pyproject.toml``). Returned paths are
replayed slide by slide, and on small boards the move count is checked
against a breadth-first search.
"""

from __future__ import annotations

import itertools
from collections import deque
from pathlib import Path

import pytest

from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.loader import load_board
from npuzzle.engine.solver import SearchBudget, Solver, is_solvable
from npuzzle.errors import InvalidSizeError, ValidationError
from npuzzle.models.board import Board
from npuzzle.models.result import SolverStatus

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

_PUZZLES = {
    "puzzle00.txt": 0,
    "puzzle04.txt": 4,
    "puzzle06.txt": 6,
    "puzzle2x2-02.txt": 2,
    "puzzle2x2-unsolvable.txt": -1,
    "puzzle3x3-unsolvable.txt": -1,
    "puzzle4x4-04.txt": 4,
}


# -- helpers ------------------------------------------------------------------


def _is_single_slide(a: Board, b: Board) -> bool:
    n = a.dimension()
    ar, ac = divmod(a.blank_index, n)
    br, bc = divmod(b.blank_index, n)
    if abs(ar - br) + abs(ac - bc) != 1:
        return False
    changed = {i for i in range(n * n) if a.tiles[i] != b.tiles[i]}
    return changed == {a.blank_index, b.blank_index}


def _assert_solution(solver: Solver, initial: Board) -> None:
    """The path starts at *initial*, ends at the goal, one slide per step."""
    solution = solver.solution()
    assert solution is not None
    assert len(solution) == solver.moves() + 1
    assert solution[0] == initial
    assert solution[-1].is_goal()
    for before, after in itertools.pairwise(solution):
        assert _is_single_slide(before, after), f"{before!r} -> {after!r}"


def _bfs_moves(board: Board) -> int:
    """Shortest distance to the goal, or -1 if the goal is unreachable."""
    goal = BoardGenerator.solved(board.dimension())
    seen = {board}
    queue = deque([(board, 0)])
    while queue:
        current, depth = queue.popleft()
        if current == goal:
            return depth
        for nb in current.neighbors():
            if nb not in seen:
                seen.add(nb)
                queue.append((nb, depth + 1))
    return -1


def _all_2x2() -> list[Board]:
    return [Board.from_flat(2, perm) for perm in itertools.permutations(range(4))]


# -- fixtures -----------------------------------------------------------------


@pytest.mark.parametrize(("name", "expected"), list(_PUZZLES.items()), ids=list(_PUZZLES))
def test_fixture_puzzles(name: str, expected: int) -> None:
    initial = load_board(FIXTURES_DIR / name)
    solver = Solver(initial)

    assert solver.moves() == expected
    if expected < 0:
        assert not solver.is_solvable()
        assert solver.status is SolverStatus.UNSOLVABLE
        assert solver.solution() is None
    else:
        assert solver.is_solvable()
        assert solver.status is SolverStatus.SOLVED
        _assert_solution(solver, initial)


# -- basic outcomes -----------------------------------------------------------


def test_goal_board_needs_no_moves() -> None:
    initial = Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    solver = Solver(initial)
    assert solver.is_solvable()
    assert solver.moves() == 0
    assert solver.solution() == [initial]


def test_four_move_puzzle() -> None:
    initial = Board([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    solver = Solver(initial)
    assert solver.moves() == 4
    _assert_solution(solver, initial)


@pytest.mark.parametrize("pair", list(itertools.combinations([1, 2, 3], 2)))
def test_swapped_tiles_on_solved_2x2_are_unsolvable(pair: tuple[int, int]) -> None:
    a, b = pair
    flat = [1, 2, 3, 0]
    ia, ib = flat.index(a), flat.index(b)
    flat[ia], flat[ib] = flat[ib], flat[ia]

    solver = Solver(Board.from_flat(2, flat))
    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None


def test_swapped_tiles_on_solved_3x3_are_unsolvable() -> None:
    solver = Solver(Board([[2, 1, 3], [4, 5, 6], [7, 8, 0]]))
    assert solver.status is SolverStatus.UNSOLVABLE
    assert solver.moves() == -1
    assert solver.solution() is None


def test_results_are_idempotent() -> None:
    solver = Solver(Board([[4, 1, 3], [7, 2, 5], [0, 8, 6]]))
    first = solver.solution()
    assert solver.moves() == solver.moves() == 6
    assert solver.solution() == first
    assert solver.solution() == first
    assert solver.solution() is not first


# -- parity and optimality ----------------------------------------------------


@pytest.mark.parametrize("board", _all_2x2(), ids=lambda b: "".join(map(str, b.tiles)))
def test_exactly_one_of_board_and_twin_is_solvable(board: Board) -> None:
    main = Solver(board)
    twin = Solver(board.twin())

    assert main.is_solvable() != twin.is_solvable()
    assert main.is_solvable() == is_solvable(board)
    assert main.moves() == _bfs_moves(board)
    assert twin.moves() == _bfs_moves(board.twin())


@pytest.mark.parametrize("seed", range(10))
def test_scrambled_3x3_is_optimal(seed: int) -> None:
    initial = BoardGenerator.generate(3, moves=14, seed=seed)
    solver = Solver(initial)

    assert solver.is_solvable()
    assert solver.moves() == _bfs_moves(initial)
    _assert_solution(solver, initial)

    twin = Solver(initial.twin())
    assert twin.status is SolverStatus.UNSOLVABLE
    assert not is_solvable(initial.twin())


@pytest.mark.parametrize("seed", range(3))
def test_scrambled_4x4_reaches_goal(seed: int) -> None:
    initial = BoardGenerator.generate(4, moves=10, seed=seed)
    solver = Solver(initial)
    assert solver.is_solvable()
    assert solver.moves() <= 10
    _assert_solution(solver, initial)


# -- budget -------------------------------------------------------------------


def test_depth_budget_exceeded_is_not_unsolvable() -> None:
    solver = Solver(
        Board([[4, 1, 3], [7, 2, 5], [0, 8, 6]]),
        SearchBudget(max_moves=3),
    )
    assert solver.status is SolverStatus.BUDGET_EXCEEDED
    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None


def test_expansion_budget_exceeded() -> None:
    solver = Solver(
        Board([[4, 1, 3], [7, 2, 5], [0, 8, 6]]),
        SearchBudget(max_expansions=2),
    )
    assert solver.status is SolverStatus.BUDGET_EXCEEDED
    assert solver.expanded == 2


@pytest.mark.parametrize("cap", [1, 3, 5])
def test_odd_expansion_budget_is_never_overrun(cap: int) -> None:
    # The cap can fall between the main and twin steps of one round.
    solver = Solver(
        Board([[4, 1, 3], [7, 2, 5], [0, 8, 6]]),
        SearchBudget(max_expansions=cap),
    )
    assert solver.status is SolverStatus.BUDGET_EXCEEDED
    assert solver.expanded == cap


def test_depth_budget_still_detects_unsolvable_twin() -> None:
    solver = Solver(
        Board([[2, 1, 3], [4, 5, 6], [7, 8, 0]]),
        SearchBudget(max_moves=0),
    )
    assert solver.status is SolverStatus.UNSOLVABLE


def test_budget_at_optimal_depth_still_solves() -> None:
    solver = Solver(
        Board([[4, 1, 3], [7, 2, 5], [0, 8, 6]]),
        SearchBudget(max_moves=6),
    )
    assert solver.moves() == 6


@pytest.mark.parametrize(
    ("size", "expected"),
    [(2, 6), (3, 31), (4, 80), (5, None)],
)
def test_reference_budget(size: int, expected: int | None) -> None:
    assert SearchBudget.reference(size).max_moves == expected
    assert SearchBudget.reference(size).max_expansions is None


def test_negative_budget_rejected() -> None:
    with pytest.raises(ValueError):
        SearchBudget(max_moves=-1)


# -- errors -------------------------------------------------------------------


@pytest.mark.parametrize("size", [0, 1, 128])
def test_invalid_size(size: int) -> None:
    board = Board.from_flat(size, [*range(1, size * size), 0][: size * size])
    with pytest.raises(InvalidSizeError, match=f"Invalid board size: {size}"):
        Solver(board)


def test_malformed_board_rejected() -> None:
    with pytest.raises(ValidationError):
        Solver(Board([[1, 1], [3, 0]]))
