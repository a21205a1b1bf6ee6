#!/usr/bin/env python3
"""Game Fifteen (15-puzzle) solver.

Usage::

    game15 < board.txt             # read a board from stdin
    game15 board.txt --replay      # replay the solution step by step
    game15 --scramble 20 -f rich   # solvable board, Rich output
    game15 --random --seed 7       # uniformly shuffled board
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from backend.engine.gamegenerator import GameGenerator
from backend.models.board import Board
from frontend.cli.input_handler import parse_board

logger = logging.getLogger("game15")

EPILOG = (
    "If neither --random nor --scramble is supplied, a board is read from "
    "BOARD_FILE or stdin: one row per line, each row holding 4 "
    "space-separated numbers, 0 being the blank."
)


# -- option choices ----------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"
    critical = "CRITICAL"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_board(
    board_file: Optional[Path],
    use_random: bool,
    scramble: Optional[int],
    seed: Optional[int],
) -> Board:
    rng = random.Random(seed)
    if use_random:
        return Board.random(rng)
    if scramble is not None:
        return GameGenerator.generate(scramble, rng)
    if board_file is not None:
        return parse_board(board_file.read_text())
    return parse_board(sys.stdin.read())


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command(epilog=EPILOG)
def main(
    board_file: Optional[Path] = typer.Argument(
        None,
        exists=True, dir_okay=False, readable=True,
        help="Board configuration file. Omit to read stdin.",
    ),
    use_random: bool = typer.Option(
        False, "--random",
        help="Use a randomly generated board (may be unsolvable).",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Use a solvable board scrambled with this many random moves.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random / --scramble.",
    ),
    replay: bool = typer.Option(
        False, "--replay",
        help="Replay the moves instead of just printing a list.",
    ),
    dedupe: bool = typer.Option(
        False, "--dedupe",
        help="Skip boards already reached at equal or lower cost.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output frontend.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        envvar="GAME15_LOG_LEVEL",
        help="Logging level.",
    ),
) -> None:
    """Solves a 15-puzzle instance."""
    _configure_logging(log_level)

    if use_random and scramble is not None:
        raise typer.BadParameter("--random and --scramble are mutually exclusive")

    try:
        board = _load_board(board_file, use_random, scramble, seed)
    except ValueError as exc:
        typer.echo(f"Invalid board: {exc}", err=True)
        raise typer.Exit(code=1) from None

    logger.info("solving with the %s frontend (dedupe=%s)", frontend.value, dedupe)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, replay=replay, dedupe=dedupe)


if __name__ == "__main__":
    app()
