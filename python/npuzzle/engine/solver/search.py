"""A single A* search over one root board, advanced one pop at a time."""

from __future__ import annotations

import heapq
import itertools
import logging
from enum import StrEnum

from npuzzle.engine.solver.budget import SearchBudget
from npuzzle.engine.solver.node import SearchNode
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


class Search:
    """Best-first search ordered by f = moves + manhattan.

    The search is a tree search: boards may be enqueued more than once.
    The only duplicate pruning is skipping the grandparent board, i.e.
    never undoing the move that was just made.
    """

    def __init__(self, root: Board, budget: SearchBudget, label: str = "") -> None:
        self.label = label
        self.status = SearchStatus.RUNNING
        self.goal: SearchNode | None = None
        self.expanded = 0
        self.enqueued = 0
        self._budget = budget
        self._heap: list[tuple[tuple[int, int, int], int, SearchNode]] = []
        self._counter = itertools.count()
        self._push(SearchNode(root, 0, None))

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def running(self) -> bool:
        return self.status is SearchStatus.RUNNING

    def step(self) -> SearchNode | None:
        """Pop the best node and expand it unless it is the goal.

        Returns the popped node, or ``None`` when the search is no longer
        running or its queue has run dry (only possible under a depth cap).
        """
        if not self.running:
            return None
        if not self._heap:
            self.status = SearchStatus.EXHAUSTED
            logger.debug("%s search exhausted after %d expansions",
                         self.label, self.expanded)
            return None

        _, _, node = heapq.heappop(self._heap)
        if node.board.is_goal():
            self.goal = node
            self.status = SearchStatus.FOUND
            logger.debug("%s search reached goal at depth %d",
                         self.label, node.moves)
            return node

        self._expand(node)
        return node

    # -- helpers --------------------------------------------------------------

    def _push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.sort_key(), next(self._counter), node))
        self.enqueued += 1

    def _expand(self, node: SearchNode) -> None:
        if not self._budget.allows_depth(node.moves):
            return

        moves = node.moves + 1
        manhattan = node.manhattan
        grandparent = node.parent.board if node.parent is not None else None
        forbidden = grandparent.blank_index if grandparent is not None else None

        count = 0
        for board in node.board.neighbors(forbidden):
            if board.manhattan() == manhattan:
                continue
            if count > 0 and grandparent is not None and board == grandparent:
                continue
            self._push(SearchNode(board, moves, node))
            count += 1
        self.expanded += 1
