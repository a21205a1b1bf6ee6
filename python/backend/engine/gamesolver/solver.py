"""A* solver for the 15-puzzle."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass

from backend.models.board import SIZE, Board, Direction

logger = logging.getLogger(__name__)

# Expansion order for successor boards.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.LEFT,
    Direction.RIGHT,
    Direction.UP,
    Direction.DOWN,
)


def _priority(f: int, g: int, seq: int) -> tuple[int, int, int]:
    """Frontier key: lowest ``f`` first, then the longer path, then FIFO."""
    return f, -g, seq


@dataclass
class SearchResult:
    """Outcome of one search plus the counters gathered along the way."""

    moves: list[Direction] | None
    expanded: int = 0
    generated: int = 0

    @property
    def found(self) -> bool:
        return self.moves is not None


class Solver:
    """A* search over board states. Holds no state between calls."""

    @staticmethod
    def solve(board: Board, *, dedupe: bool = False) -> list[Direction] | None:
        """Return the moves that solve *board*, or ``None`` if none were found.

        An already-solved board yields ``[]``. Unsolvable boards are never
        exhausted without *dedupe*, so filter them with :meth:`is_solvable`
        first.
        """
        return Solver.search(board, dedupe=dedupe).moves

    @staticmethod
    def hint(board: Board, *, dedupe: bool = False) -> Direction | None:
        """Return the first move of a full solution.

        ``None`` for a solved board or one that cannot reach the goal; the
        solvability check runs before any search.
        """
        if board.solved() or not Solver.is_solvable(board):
            return None

        moves = Solver.solve(board, dedupe=dedupe)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return board.solvable()

    @staticmethod
    def heuristic(board: Board) -> int:
        """Sum of Manhattan distances of every tile from its goal slot.

        The blank is counted too, with goal index ``-1`` (so its goal row
        is ``-1`` and its goal column is the last one).
        """
        return sum(
            Solver.manhattan_distance(tile, idx)
            for idx, tile in enumerate(board.tiles)
        )

    @staticmethod
    def manhattan_distance(tile: int, idx: int) -> int:
        row, col = divmod(idx, SIZE)
        goal_row, goal_col = divmod(tile - 1, SIZE)
        return abs(row - goal_row) + abs(col - goal_col)

    @staticmethod
    def search(board: Board, *, dedupe: bool = False) -> SearchResult:
        """Best-first search ordered by ``f = g + h``.

        Ties on ``f`` go to the node with the longer move path. The only
        pruning is never undoing the previous move, unless *dedupe* is set,
        in which case a board already reached at the same or lower cost
        is not pushed again.
        """
        counter = itertools.count()
        root = board.copy()
        frontier: list[tuple[int, int, int, list[Direction], Board]] = [
            (*_priority(Solver.heuristic(root), 0, next(counter)), [], root)
        ]
        best_g: dict[tuple[int, ...], int] = {root.key(): 0}
        result = SearchResult(moves=None, generated=1)

        while frontier:
            _, _, _, moves, node = heapq.heappop(frontier)
            if node.solved():
                result.moves = moves
                logger.debug(
                    "solved in %d moves (expanded=%d generated=%d frontier=%d)",
                    len(moves), result.expanded, result.generated, len(frontier),
                )
                return result

            result.expanded += 1
            g = len(moves) + 1
            last = moves[-1] if moves else None
            for direction in DIRECTIONS:
                # Never undo the previous move.
                if last is not None and last.opposites(direction):
                    continue
                if not node.can_slide(direction):
                    continue
                child = node.copy()
                child.slide(direction)
                if dedupe:
                    key = child.key()
                    if best_g.get(key, g + 1) <= g:
                        continue
                    best_g[key] = g
                result.generated += 1
                f = g + Solver.heuristic(child)
                heapq.heappush(
                    frontier, (*_priority(f, g, next(counter)), moves + [direction], child)
                )

        logger.debug(
            "frontier exhausted (expanded=%d generated=%d)",
            result.expanded, result.generated,
        )
        return result
