"""Replays move sequences against a board, one checked slide at a time."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from backend.models.board import Board, Direction, InvalidMoveError


class GamePlay:
    """A session over a private copy of a board."""

    def __init__(self, board: Board | None = None) -> None:
        self.board = board.copy() if board is not None else Board()
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a session from an existing board (e.g. loaded from file)."""
        return cls(board)

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Slide the blank in *direction*.

        Returns True if the move was valid; an invalid move leaves the
        board untouched.
        """
        try:
            self.board.slide_safe(direction)
        except InvalidMoveError:
            return False
        self.moves += 1
        return True

    def replay(self, moves: Iterable[Direction]) -> Iterator[tuple[int, Direction, Board]]:
        """Apply *moves* in order, yielding ``(step, direction, board)`` after each.

        Raises :class:`InvalidMoveError` on the first move that does not
        fit the board.
        """
        for step, direction in enumerate(moves, 1):
            self.board.slide_safe(direction)
            self.moves += 1
            yield step, direction, self.board

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.solved()
