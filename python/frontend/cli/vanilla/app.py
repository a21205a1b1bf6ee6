"""Vanilla terminal frontend — no third-party dependencies.

Prints boards in the plain bracketed row format so the output can be
piped or diffed.
"""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction


def _format_moves(moves: list[Direction]) -> str:
    return "[" + ", ".join(str(m) for m in moves) + "]"


def _print_replay(board: Board, moves: list[Direction]) -> None:
    game = GamePlay.from_board(board)
    for _, direction, current in game.replay(moves):
        print(direction)
        print(current)


# -- public entry point -------------------------------------------------------


def run(board: Board, *, replay: bool = False, dedupe: bool = False) -> bool:
    """Print *board*, solve it and report the moves.

    Returns True if a solution was printed.
    """
    print(board)
    if not Solver.is_solvable(board):
        print("Board cannot be solved")
        return False

    moves = Solver.solve(board, dedupe=dedupe)
    if moves is None:
        print("Could not solve board")
        return False

    print(f"Number of moves needed: {len(moves)}")
    if replay:
        _print_replay(board, moves)
    else:
        print(_format_moves(moves))
    return True
