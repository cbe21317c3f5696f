"""Closed-form solvability test based on permutation parity."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterable

from npuzzle.models.board import Board


def inversions(tiles: Iterable[int]) -> int:
    """Count pairs of non-blank tiles that appear in the wrong order."""
    inv = 0
    seen: list[int] = []
    for v in tiles:
        if v == 0:
            continue
        inv += len(seen) - bisect_left(seen, v)
        insort(seen, v)
    return inv


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    Odd N: the inversion count must be even. Even N: the inversion count
    plus the blank's row counted from the bottom (0-based) must be even.
    """
    n = board.dimension()
    inv = inversions(board.tiles)
    if n % 2 == 1:
        return inv % 2 == 0
    blank_from_bottom = n - 1 - board.blank_index // n
    return (inv + blank_from_bottom) % 2 == 0
