"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import SIZE, TILE_COUNT, Board, Direction

console = Console()


# -- board rendering ----------------------------------------------------------


def _is_tile_correct(idx: int, val: int) -> bool:
    if val == 0:
        return idx == TILE_COUNT - 1
    return val == idx + 1


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(TILE_COUNT - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=width + 1, justify="center")

    tiles = board.tiles
    for r in range(SIZE):
        cells: list[str] = []
        for c in range(SIZE):
            idx = r * SIZE + c
            val = tiles[idx]
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif _is_tile_correct(idx, val):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_moves(moves: list[Direction]) -> Text:
    text = Text()
    for i, direction in enumerate(moves):
        if i:
            text.append(", ", style="dim")
        text.append(str(direction), style="bold cyan")
    return text


def _print_replay(board: Board, moves: list[Direction]) -> None:
    game = GamePlay.from_board(board)
    for step, direction, current in game.replay(moves):
        console.print(
            Panel(
                _render_board(current),
                title=f"[bold cyan]Move {step}/{len(moves)}  ({direction})[/bold cyan]",
                border_style="cyan",
                expand=False,
            )
        )


# -- public entry point -------------------------------------------------------


def run(board: Board, *, replay: bool = False, dedupe: bool = False) -> bool:
    """Render *board*, solve it and report the moves.

    Returns True if a solution was printed.
    """
    console.print(
        Panel(
            _render_board(board),
            title="[bold]1 5 - P U Z Z L E[/bold]",
            border_style="bright_blue",
            expand=False,
        )
    )
    if not Solver.is_solvable(board):
        console.print("[red]Board cannot be solved[/red]")
        return False

    with console.status("[cyan]Solving…[/cyan]"):
        moves = Solver.solve(board, dedupe=dedupe)

    if moves is None:
        console.print("[yellow]Could not solve board[/yellow]")
        return False

    console.print(f"[bold green]Number of moves needed: {len(moves)}[/bold green]")
    if replay:
        _print_replay(board, moves)
    else:
        console.print(_render_moves(moves))
    return True
