"""Vanilla terminal frontend — no third-party dependencies.

Prints results in the classic checker format::

    Minimum number of moves = 4
    3
        0     1     3
    ...
"""

from __future__ import annotations

from npuzzle.models.result import SolveResult, SolverStatus


def _outcome_line(result: SolveResult) -> str:
    if result.status is SolverStatus.SOLVED:
        return f"Minimum number of moves = {result.moves}"
    if result.status is SolverStatus.UNSOLVABLE:
        return "No solution possible"
    return f"Search budget exceeded ({result.expanded} nodes expanded)"


def summary_line(result: SolveResult) -> str:
    """``<source>: <moves>\\t\\t<seconds>``; moves is ``?`` if the budget ran out."""
    moves = "?" if result.status is SolverStatus.BUDGET_EXCEEDED else result.moves
    return f"{result.source}: {moves}\t\t{result.seconds:.2f}"


def render(result: SolveResult) -> str:
    """Return the full report: outcome line, then every board of the path."""
    lines = [_outcome_line(result)]
    for board in result.solution or []:
        lines.append(str(board))
    return "\n".join(lines)


# -- public entry point -------------------------------------------------------


def report(result: SolveResult, quiet: bool = False) -> None:
    """Print one result, either as a summary line or in full."""
    if quiet:
        print(summary_line(result))
        return
    print(render(result))
