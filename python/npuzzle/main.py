"""N-puzzle solver.

Usage::

    npuzzle solve puzzle04.txt             # outcome plus every board
    npuzzle solve puzzles/*.txt -q         # one summary line per file
    npuzzle solve puzzle04.txt -f rich     # Rich terminal output
    npuzzle generate 3 --moves 20 --seed 7 # print a scrambled board
"""

import importlib
import logging
import time
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.loader import load_board
from npuzzle.engine.solver import SearchBudget, Solver
from npuzzle.errors import PuzzleError
from npuzzle.models.result import SolveResult

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def solve_file(
    path: Path,
    max_moves: int | None = None,
    max_expansions: int | None = None,
    reference_budget: bool = False,
) -> SolveResult:
    """Load one puzzle file and run the solver on it."""
    board = load_board(path)
    if reference_budget and max_moves is None:
        max_moves = SearchBudget.reference(board.dimension()).max_moves
    budget = SearchBudget(max_moves=max_moves, max_expansions=max_expansions)

    logger.info("Solving %s (%d×%d)", path.name, board.dimension(), board.dimension())
    start = time.perf_counter()
    solver = Solver(board, budget)
    seconds = time.perf_counter() - start
    logger.info("%s: %s in %.2fs", path.name, solver.status, seconds)

    return SolveResult(
        source=path.name,
        status=solver.status,
        moves=solver.moves(),
        seconds=seconds,
        expanded=solver.expanded,
        solution=solver.solution(),
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def solve(
    files: list[Path] = typer.Argument(
        ...,
        exists=True, dir_okay=False, readable=True,
        help="Puzzle files: dimension N, then N rows of N tiles (0 = blank).",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Print one summary line per file instead of the full path.",
    ),
    max_moves: Optional[int] = typer.Option(
        None, "--max-moves",
        min=0,
        help="Do not expand boards this many moves deep.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        help="Give up after expanding this many boards.",
    ),
    reference_budget: bool = typer.Option(
        False, "--reference-budget",
        help="Cap depth at the hardest known instance (2×2: 6, 3×3: 31, 4×4: 80).",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose",
        count=True,
        help="Log progress (-v) or search details (-vv).",
    ),
) -> None:
    """Solve sliding puzzles with A*."""
    _configure_logging(verbose)
    mod = importlib.import_module(_RUNNERS[frontend])

    for path in files:
        try:
            result = solve_file(path, max_moves, max_expansions, reference_budget)
        except PuzzleError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=2) from exc
        mod.report(result, quiet=quiet)


@app.command()
def generate(
    size: int = typer.Argument(
        ...,
        min=2, max=127,
        help="Board dimension N.",
    ),
    moves: Optional[int] = typer.Option(
        None, "-m", "--moves",
        min=0,
        help="Random slides away from the goal (default N*N*100).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
    unsolvable: bool = typer.Option(
        False, "--unsolvable",
        help="Emit a board that cannot be solved.",
    ),
) -> None:
    """Print a random board in the puzzle file format."""
    board = BoardGenerator.generate(size, moves=moves, seed=seed, unsolvable=unsolvable)
    typer.echo(str(board), nl=False)


if __name__ == "__main__":
    app()
