"""Search tree node for the A* solver."""

from __future__ import annotations

from dataclasses import dataclass

from npuzzle.models.board import Board


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board plus the number of moves taken to reach it.

    Nodes form a singly linked chain back to the root through ``parent``.
    Ordering is by ``moves + manhattan``, then manhattan, then hamming.
    """

    board: Board
    moves: int
    parent: SearchNode | None = None

    @property
    def manhattan(self) -> int:
        return self.board.manhattan()

    @property
    def hamming(self) -> int:
        return self.board.hamming()

    @property
    def priority(self) -> int:
        return self.moves + self.manhattan

    def sort_key(self) -> tuple[int, int, int]:
        return (self.priority, self.manhattan, self.hamming)

    def __lt__(self, other: SearchNode) -> bool:
        return self.sort_key() < other.sort_key()

    def path(self) -> list[Board]:
        """Boards from the root down to this node, inclusive."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards
