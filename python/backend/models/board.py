"""Board model for the 15-puzzle.

Tiles are stored as a flat row-major list with the blank (``0``) index
cached alongside, so a move is a single swap of two list slots.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from enum import StrEnum

SIZE = 4
TILE_COUNT = SIZE * SIZE


# -- errors -------------------------------------------------------------------


class BoardValidationError(ValueError):
    """Raised when a tile sequence does not describe a legal board."""


class MissingOrRepeatedTileError(BoardValidationError):
    pass


class TooManyTilesError(BoardValidationError):
    pass


class TileOutOfRangeError(BoardValidationError):
    pass


class InvalidMoveError(ValueError):
    """Raised by :meth:`Board.slide_safe` for a move off the grid."""


# -- directions ---------------------------------------------------------------


class Direction(StrEnum):
    """Direction the blank travels in."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def __str__(self) -> str:
        return self.name.capitalize()

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def opposites(self, other: Direction) -> bool:
        return other.opposite() is self

    @property
    def offset(self) -> int:
        """Signed step through the flat tile list."""
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_OFFSETS = {
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
    Direction.UP: -SIZE,
    Direction.DOWN: SIZE,
}


# -- board --------------------------------------------------------------------


class Board:
    """A 4×4 sliding puzzle board.

    ``Board()`` is the identity board (``tiles[i] == i``, blank at index
    0). Use :meth:`from_flat` for external input and :meth:`random` for a
    shuffled board.
    """

    __slots__ = ("_tiles", "_empty")

    def __init__(self) -> None:
        self._tiles: list[int] = list(range(TILE_COUNT))
        self._empty: int = 0

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, values: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile sequence.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])
        """
        tiles = list(values)
        for v in tiles:
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < TILE_COUNT:
                raise TileOutOfRangeError(
                    f"tiles should be in the range [0, {TILE_COUNT - 1}], got {v!r}"
                )
        if len(tiles) > TILE_COUNT:
            raise TooManyTilesError(
                f"too many tiles: expected {TILE_COUNT}, got {len(tiles)}"
            )
        if len(set(tiles)) < TILE_COUNT:
            raise MissingOrRepeatedTileError("missing or repeated tiles")

        board = cls()
        board._tiles = tiles
        board._empty = tiles.index(0)
        return board

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Board:
        """Return a uniformly shuffled board.

        The result is *not* filtered for solvability; check
        :meth:`solvable` before handing it to the solver.
        """
        board = cls()
        board.shuffle(rng)
        return board

    def shuffle(self, rng: random.Random | None = None) -> None:
        if rng is None:
            rng = random.Random()
        rng.shuffle(self._tiles)
        if 0 not in self._tiles:
            raise RuntimeError(f"shuffle lost the blank tile: {self._tiles}")
        self._empty = self._tiles.index(0)

    def copy(self) -> Board:
        clone = Board.__new__(Board)
        clone._tiles = self._tiles[:]
        clone._empty = self._empty
        return clone

    # -- queries --------------------------------------------------------------

    @property
    def tiles(self) -> tuple[int, ...]:
        return tuple(self._tiles)

    @property
    def empty(self) -> int:
        """Index of the blank tile."""
        return self._empty

    def key(self) -> tuple[int, ...]:
        """Hashable fingerprint of the tile permutation."""
        return tuple(self._tiles)

    def can_slide(self, direction: Direction) -> bool:
        return self._target(direction) != self._empty

    def solved(self) -> bool:
        """Check if tiles read 1..15 with the blank in the last slot."""
        t = self._tiles
        return (
            self._empty == TILE_COUNT - 1
            and t[-1] == 0
            and all(b == 0 or a < b for a, b in zip(t, t[1:]))
        )

    def solvable(self) -> bool:
        """Return True if the goal board is reachable from this one.

        For an even grid width a board is solvable exactly when the
        inversion count and the blank's row (from the top) have different
        parities.
        """
        t = self._tiles
        inversions = sum(
            1
            for i, a in enumerate(t)
            for b in t[i + 1 :]
            if b != 0 and b < a
        )
        blank_row = self._empty // SIZE
        return (inversions % 2 == 0) != (blank_row % 2 == 0)

    # -- moves ----------------------------------------------------------------

    def slide(self, direction: Direction) -> None:
        """Move the blank one step in *direction*.

        Callers are expected to check :meth:`can_slide` first. A move off
        the grid, or across a row boundary, clamps to the blank's own slot
        and leaves the board unchanged.
        """
        pos = self._target(direction)
        t = self._tiles
        t[self._empty], t[pos] = t[pos], t[self._empty]
        self._empty = pos

    def slide_safe(self, direction: Direction) -> None:
        if not self.can_slide(direction):
            raise InvalidMoveError(
                f"Invalid move: cannot slide {direction.value} from index {self._empty}"
            )
        self.slide(direction)

    def _target(self, direction: Direction) -> int:
        empty = self._empty
        pos = empty + direction.offset
        if not 0 <= pos < TILE_COUNT:
            return empty
        if direction in (Direction.LEFT, Direction.RIGHT) and pos // SIZE != empty // SIZE:
            return empty
        return pos

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._empty == other._empty and self._tiles == other._tiles

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board.from_flat({self._tiles!r})"

    def __str__(self) -> str:
        rows = (self._tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE))
        return "\n".join("[" + " ".join(str(v) for v in row) + "]" for row in rows)
