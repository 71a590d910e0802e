"""Coordinate type and bounds helpers.

Board layout (row-major, rank 8 on top):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file a, col 7 = file h

So ``Coordinate(0, 0)`` is a8 and ``Coordinate(7, 7)`` is h1.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


class Coordinate(NamedTuple):
    """Board cell as (row, col)."""

    row: int
    col: int

    def offset(self, row_step: int, col_step: int) -> Coordinate:
        return Coordinate(self.row + row_step, self.col + col_step)

    def __str__(self) -> str:
        return square_name(self)


def out_of_bounds(value: int) -> bool:
    """Whether a single row or column index falls off the board."""
    return value < 0 or value > BOARD_SIZE - 1


def in_bounds(row: int, col: int) -> bool:
    return not (out_of_bounds(row) or out_of_bounds(col))


def square_name(coord: Coordinate) -> str:
    """File-rank name, e.g. (0, 0) → 'a8', (7, 7) → 'h1'."""
    return _FILES[coord.col] + str(BOARD_SIZE - coord.row)


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' → Coordinate(4, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))


def chebyshev_distance(a: Coordinate, b: Coordinate) -> int:
    """King-move distance between two cells."""
    return max(abs(a.row - b.row), abs(a.col - b.col))


def all_coordinates() -> list[Coordinate]:
    """Every cell in row-major order (a8, b8, ..., h1)."""
    return [Coordinate(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
