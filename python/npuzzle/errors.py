"""Exceptions raised by the puzzle model, loader and solver."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error this package raises on purpose."""


class InvalidSizeError(PuzzleError, ValueError):
    """Board dimension is outside the range the solver accepts."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Invalid board size: {size}")
        self.size = size


class ValidationError(PuzzleError, ValueError):
    """Board or puzzle text is malformed."""
