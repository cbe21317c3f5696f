"""Generates puzzle boards by walking the blank away from the goal."""

from __future__ import annotations

import random

from npuzzle.models.board import Board


class BoardGenerator:
    """Creates boards by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.from_flat(size, [*range(1, size * size), 0])

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *moves* random slides, never undoing the last one.

        A random walk only ever visits positions reachable from *board*, so
        a scramble of a solvable board is always solvable.
        """
        rng = rng or random.Random()
        prev_blank: int | None = None

        for _ in range(moves):
            neighbors = board.neighbors(prev_blank)
            if len(neighbors) > 1 and neighbors[-1].costly:
                neighbors.pop()
            prev_blank = board.blank_index
            board = rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int,
        moves: int | None = None,
        seed: int | None = None,
        unsolvable: bool = False,
    ) -> Board:
        """Return a random board of the given size.

        *moves* defaults to ``size * size * 100`` slides. With *unsolvable*
        the scrambled board's twin is returned instead, which can never
        reach the goal.
        """
        rng = random.Random(seed)
        if moves is None:
            moves = size * size * 100

        board = BoardGenerator.scramble(BoardGenerator.solved(size), moves, rng)

        # A walk can close a cycle back onto the goal (every 12 slides on
        # 2×2); one more slide always leaves it.
        if moves > 0 and board.is_goal():
            board = rng.choice(board.neighbors())

        if unsolvable:
            return board.twin()
        return board
