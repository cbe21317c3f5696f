"""Reads boards from the plain-text puzzle format.

The format is the board dimension N followed by N rows of N
whitespace-separated integers, 0 marking the blank::

    3
     0  1  3
     4  2  5
     7  8  6

Line breaks carry no meaning beyond separating tokens.
"""

from __future__ import annotations

import logging
from pathlib import Path

from npuzzle.errors import ValidationError
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


def parse_board(text: str, source: str = "<string>") -> Board:
    """Parse puzzle *text* into a validated :class:`Board`."""
    tokens = text.split()
    if not tokens:
        raise ValidationError(f"{source}: empty puzzle.")

    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise ValidationError(f"{source}: {exc}") from exc

    n, flat = values[0], values[1:]
    if n < 1:
        raise ValidationError(f"{source}: dimension must be positive, got {n}.")
    if len(flat) != n * n:
        raise ValidationError(
            f"{source}: expected {n * n} tiles for a {n}×{n} board, "
            f"got {len(flat)}."
        )

    try:
        board = Board.from_flat(n, flat).validate()
    except ValidationError as exc:
        raise ValidationError(f"{source}: {exc}") from exc
    logger.debug("Loaded %d×%d board from %s", n, n, source)
    return board


def load_board(path: Path | str) -> Board:
    """Read and parse the puzzle file at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValidationError(f"{path.name}: not a text file ({exc.reason}).") from exc
    return parse_board(text, source=path.name)
