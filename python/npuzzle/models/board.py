"""Board model for the N-puzzle solver."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence

from npuzzle.errors import ValidationError


class Board:
    """Immutable sliding puzzle state.

    Tiles are stored as a flat row-major tuple. 0 represents the blank.
    Hamming and Manhattan distances are computed on first use and cached;
    boards produced by :meth:`neighbors` arrive with both already filled in.
    """

    __slots__ = ("_n", "_tiles", "_blank", "_hamming", "_manhattan", "costly")

    def __init__(self, rows: Sequence[Sequence[int]]) -> None:
        n = len(rows)
        flat: list[int] = []
        for r, row in enumerate(rows):
            if len(row) != n:
                raise ValidationError(
                    f"Row {r} has {len(row)} tiles, expected {n} for a "
                    f"{n}×{n} board."
                )
            flat.extend(int(v) for v in row)
        self._init(n, tuple(flat))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValidationError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        obj = object.__new__(cls)
        obj._init(size, tuple(int(v) for v in flat))
        return obj

    @classmethod
    def _derive(
        cls,
        size: int,
        tiles: tuple[int, ...],
        blank: int,
        hamming: int,
        manhattan: int,
    ) -> Board:
        obj = object.__new__(cls)
        obj._n = size
        obj._tiles = tiles
        obj._blank = blank
        obj._hamming = hamming
        obj._manhattan = manhattan
        obj.costly = False
        return obj

    def _init(self, size: int, tiles: tuple[int, ...]) -> None:
        self._n = size
        self._tiles = tiles
        self._blank = tiles.index(0) if 0 in tiles else -1
        self._hamming = -1
        self._manhattan = -1
        self.costly = False

    def validate(self) -> Board:
        """Raise :class:`ValidationError` unless the tiles are ``0..N²-1``.

        Returns the board itself so calls can be chained.
        """
        n = self._n
        expected = n * n
        if len(self._tiles) != expected:
            raise ValidationError(
                f"Expected {expected} tiles for a {n}×{n} board, "
                f"got {len(self._tiles)}."
            )
        if sorted(self._tiles) != list(range(expected)):
            counts = Counter(self._tiles)
            dupes = sorted(v for v, k in counts.items() if k > 1)
            missing = sorted(set(range(expected)) - set(self._tiles))
            raise ValidationError(
                f"Tiles of a {n}×{n} board must be 0..{expected - 1} exactly "
                f"once (duplicates: {dupes or 'none'}, "
                f"missing: {missing or 'none'})."
            )
        return self

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self._n

    @property
    def tiles(self) -> tuple[int, ...]:
        return self._tiles

    @property
    def blank_index(self) -> int:
        return self._blank

    def rows(self) -> Iterator[tuple[int, ...]]:
        n = self._n
        for r in range(n):
            yield self._tiles[r * n : (r + 1) * n]

    def tile_at(self, row: int, col: int) -> int:
        return self._tiles[row * self._n + col]

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tile_at(row, col)
        if val == 0:
            return row == self._n - 1 and col == self._n - 1
        return row * self._n + col == val - 1

    def hamming(self) -> int:
        """Number of tiles out of place, blank excluded."""
        if self._hamming < 0:
            self._hamming = sum(
                1 for i, v in enumerate(self._tiles) if v != 0 and v != i + 1
            )
        return self._hamming

    def manhattan(self) -> int:
        """Sum of row and column distances between tiles and their goal cells."""
        if self._manhattan < 0:
            n = self._n
            dist = 0
            for i, v in enumerate(self._tiles):
                if v == 0:
                    continue
                r, c = divmod(i, n)
                gr, gc = divmod(v - 1, n)
                dist += abs(r - gr) + abs(c - gc)
            self._manhattan = dist
        return self._manhattan

    def is_goal(self) -> bool:
        return self.manhattan() == 0

    # -- successors -----------------------------------------------------------

    def neighbors(self, forbidden_blank: int | None = None) -> list[Board]:
        """All boards reachable by sliding one tile into the blank.

        Boards come back ordered by Manhattan distance, lowest first. The
        board whose blank would land on *forbidden_blank* (normally the
        blank cell of the board this one was generated from) is flagged
        ``costly`` and moved to the end. Neither step alters a heuristic
        value.
        """
        n = self._n
        bi = self._blank
        br, bc = divmod(bi, n)

        boards: list[Board] = []
        if br > 0:
            boards.append(self._slide(bi - n))
        if br < n - 1:
            boards.append(self._slide(bi + n))
        if bc > 0:
            boards.append(self._slide(bi - 1))
        if bc < n - 1:
            boards.append(self._slide(bi + 1))

        boards.sort(key=Board.manhattan)
        if forbidden_blank is None:
            return boards

        kept = [b for b in boards if b._blank != forbidden_blank]
        for b in boards:
            if b._blank == forbidden_blank:
                b.costly = True
                kept.append(b)
        return kept

    def _slide(self, src: int) -> Board:
        """Slide the tile at *src* into the blank.

        Only the moved tile changes position, and only along one axis, so
        both heuristics are patched from this board's values.
        """
        n = self._n
        dst = self._blank
        tile = self._tiles[src]
        goal = tile - 1

        if src % n == dst % n:  # vertical move
            before = abs(src // n - goal // n)
            after = abs(dst // n - goal // n)
        else:
            before = abs(src % n - goal % n)
            after = abs(dst % n - goal % n)
        manhattan = self.manhattan() - before + after
        hamming = self.hamming() + (src == goal) - (dst == goal)

        tiles = list(self._tiles)
        tiles[dst] = tile
        tiles[src] = 0
        return Board._derive(n, tuple(tiles), src, hamming, manhattan)

    def twin(self) -> Board:
        """Board with the first two non-blank tiles (row-major) swapped."""
        tiles = list(self._tiles)
        first = 0 if tiles[0] != 0 else 1
        second = first + 1
        if tiles[second] == 0:
            second += 1
        tiles[first], tiles[second] = tiles[second], tiles[first]
        return Board._derive(self._n, tuple(tiles), self._blank, -1, -1)

    # -- value semantics ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Board):
            return NotImplemented
        return self._n == other._n and self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash((self._n, self._tiles))

    def __repr__(self) -> str:
        return f"Board.from_flat({self._n}, {list(self._tiles)!r})"

    def __str__(self) -> str:
        """Dimension on the first line, then the grid in 5-wide columns."""
        lines = [str(self._n)]
        for row in self.rows():
            lines.append("".join(f"{v:5d} " for v in row))
        return "\n".join(lines) + "\n"
