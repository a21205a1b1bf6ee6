from backend.models.board import (
    SIZE,
    TILE_COUNT,
    Board,
    BoardValidationError,
    Direction,
    InvalidMoveError,
    MissingOrRepeatedTileError,
    TileOutOfRangeError,
    TooManyTilesError,
)

__all__ = [
    "SIZE",
    "TILE_COUNT",
    "Board",
    "BoardValidationError",
    "Direction",
    "InvalidMoveError",
    "MissingOrRepeatedTileError",
    "TileOutOfRangeError",
    "TooManyTilesError",
]
