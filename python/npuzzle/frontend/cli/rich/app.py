"""Rich terminal frontend with tables, colours, and panels.

Shows the same information as the vanilla printer: the outcome, then
every board along the solution path. Tiles already in their goal cell
are green and the tile that just slid is marked.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.models.board import Board
from npuzzle.models.result import SolveResult, SolverStatus

console = Console()


# -- board rendering ----------------------------------------------------------


def _moved_tile(before: Board, after: Board) -> int:
    """Label of the tile that slid between two consecutive boards."""
    return after.tiles[before.blank_index]


def _cell(board: Board, index: int, moved: int | None, width: int) -> Text:
    val = board.tiles[index]
    if val == 0:
        return Text("·", style="dim")
    label = f"{val:>{width}}"
    if val == moved:
        return Text(label, style="bold black on yellow")
    row, col = divmod(index, board.dimension())
    return Text(label, style="bold green" if board.is_tile_correct(row, col) else "white")


def _render_board(board: Board, moved: int | None = None) -> Table:
    """Grid for one board; *moved* names the tile that just slid, if any."""
    n = board.dimension()
    width = len(str(n * n - 1))
    table = Table(
        show_header=False,
        box=rich.box.ROUNDED,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(n):
        table.add_column(min_width=width, justify="right")
    for start in range(0, n * n, n):
        table.add_row(*(_cell(board, i, moved, width) for i in range(start, start + n)))
    return table


def _outcome(result: SolveResult) -> Text:
    text = Text()
    if result.status is SolverStatus.SOLVED:
        text.append("Minimum number of moves = ", style="dim")
        text.append(str(result.moves), style="bold green")
    elif result.status is SolverStatus.UNSOLVABLE:
        text.append("No solution possible", style="bold red")
    else:
        text.append("Search budget exceeded", style="bold yellow")
        text.append(f" ({result.expanded} nodes expanded)", style="dim")
    return text


def _stats(result: SolveResult) -> Text:
    stats = Text()
    stats.append("Time: ", style="dim")
    stats.append(f"{result.seconds:.2f}s", style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(result.expanded), style="bold yellow")
    return stats


def _path_panels(solution: list[Board]) -> list[Panel]:
    last = len(solution) - 1
    panels = []
    for i, board in enumerate(solution):
        moved = _moved_tile(solution[i - 1], board) if i else None
        subtitle = f"[dim]slid {moved}[/dim]" if moved is not None else "[dim]start[/dim]"
        panels.append(
            Panel(
                _render_board(board, moved),
                title=f"[cyan]{i}/{last}[/cyan]",
                subtitle=subtitle,
                border_style="green" if board.is_goal() else "dim",
                expand=False,
            )
        )
    return panels


# -- public entry point -------------------------------------------------------


def report(result: SolveResult, quiet: bool = False) -> None:
    """Print one result, either as a summary line or in full."""
    if quiet:
        line = Text()
        line.append(f"{result.source}: ", style="bold")
        line.append_text(_outcome(result))
        line.append("  ")
        line.append_text(_stats(result))
        console.print(line)
        return

    parts = [Align.center(_outcome(result)), Align.center(_stats(result))]
    if result.solution:
        parts.append(Text(""))
        parts.append(Columns(_path_panels(result.solution)))

    border = {
        SolverStatus.SOLVED: "bright_blue",
        SolverStatus.UNSOLVABLE: "red",
    }.get(result.status, "yellow")
    console.print(
        Panel(
            Group(*parts),
            title=f"[bold]{result.source}[/bold]",
            border_style=border,
            padding=(1, 2),
        )
    )
