"""Search limits for the A* solver."""

from __future__ import annotations

from dataclasses import dataclass

# Longest optimal solutions for the small boards (2×2, 3×3, 4×4).
_REFERENCE_MAX_MOVES: dict[int, int] = {2: 6, 3: 31, 4: 80}


@dataclass(frozen=True)
class SearchBudget:
    """Optional caps on a single solver run.

    ``max_moves`` stops nodes at that depth from being expanded.
    ``max_expansions`` caps the nodes expanded by both searches together.
    ``None`` leaves the corresponding limit off.
    """

    max_moves: int | None = None
    max_expansions: int | None = None

    def __post_init__(self) -> None:
        for name in ("max_moves", "max_expansions"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}.")

    @classmethod
    def unbounded(cls) -> SearchBudget:
        return cls()

    @classmethod
    def reference(cls, size: int) -> SearchBudget:
        """Depth cap equal to the hardest known instance for *size*, if any."""
        return cls(max_moves=_REFERENCE_MAX_MOVES.get(size))

    def allows_depth(self, moves: int) -> bool:
        return self.max_moves is None or moves < self.max_moves

    def allows_expansions(self, expanded: int) -> bool:
        return self.max_expansions is None or expanded < self.max_expansions
