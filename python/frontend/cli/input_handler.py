"""Reads board configurations from the line-oriented text format.

One row per line, tiles separated by whitespace, blank lines ignored::

    0 1 2 3
    4 5 6 7
    8 9 10 11
    12 13 14 15

Rows are concatenated in order, so the row width is not enforced here;
:meth:`Board.from_flat` validates the resulting flat sequence.
"""

from __future__ import annotations

from typing import TextIO

from backend.models.board import Board


class BoardFormatError(ValueError):
    """Raised for text that is not whitespace-separated integers."""


def parse_tiles(text: str) -> list[int]:
    """Return the flat tile list described by *text*."""
    tiles: list[int] = []
    for lineno, line in enumerate(text.splitlines(), 1):
        for token in line.split():
            try:
                tiles.append(int(token))
            except ValueError:
                raise BoardFormatError(
                    f"line {lineno}: failed to parse number {token!r}"
                ) from None
    return tiles


def parse_board(text: str) -> Board:
    return Board.from_flat(parse_tiles(text))


def read_board(stream: TextIO) -> Board:
    """Read the whole of *stream* and build a validated board from it."""
    return parse_board(stream.read())
