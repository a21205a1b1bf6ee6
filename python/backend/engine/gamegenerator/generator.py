"""Generates solvable 15-puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.models.board import TILE_COUNT, Board, Direction

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by sliding the blank away from the solved state."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.from_flat([*range(1, TILE_COUNT), 0])

    @staticmethod
    def scramble(
        board: Board, num_moves: int, rng: random.Random | None = None
    ) -> list[Direction]:
        """Scramble *board* in-place using random valid moves.

        The previous move is never undone straight away. Returns the moves
        applied, in order.
        """
        if rng is None:
            rng = random.Random()
        moves: list[Direction] = []

        for _ in range(num_moves):
            candidates = [d for d in Direction if board.can_slide(d)]
            if moves and len(candidates) > 1:
                candidates = [d for d in candidates if not moves[-1].opposites(d)]
            direction = rng.choice(candidates)
            board.slide(direction)
            moves.append(direction)

        logger.debug("scrambled with %d moves: %s", len(moves), moves)
        return moves

    @staticmethod
    def generate(num_moves: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board *num_moves* slides from the goal."""
        if rng is None:
            rng = random.Random()
        while True:
            board = GameGenerator.solved()
            GameGenerator.scramble(board, num_moves, rng)
            # Ensure the board is not already solved
            if num_moves == 0 or not board.solved():
                return board
