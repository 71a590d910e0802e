"""Shared board geometry: direction tables, blocked paths and ray search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from chez.core.enums import RayAxis
from chez.core.types import Coordinate, in_bounds, square_name

if TYPE_CHECKING:
    from chez.core.board import Board
    from chez.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


class Direction(NamedTuple):
    """One compass step and the line family it belongs to."""

    row_step: int
    col_step: int
    axis: RayAxis


def _classify(row_step: int, col_step: int) -> RayAxis:
    return RayAxis.DIAGONAL if row_step and col_step else RayAxis.ORTHOGONAL


# Row-major order: (-1,-1), (-1,0), (-1,1), (0,-1), (0,1), (1,-1), (1,0), (1,1).
DIRECTIONS: tuple[Direction, ...] = tuple(
    Direction(dr, dc, _classify(dr, dc))
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if (dr, dc) != (0, 0)
)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (2, -1),
    (2, 1),
    (1, -2),
    (1, 2),
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def step_between(origin: Coordinate, destination: Coordinate) -> tuple[int, int]:
    """Per-axis unit step (-1, 0 or 1) leading from *origin* toward *destination*."""
    return (
        _sign(destination.row - origin.row),
        _sign(destination.col - origin.col),
    )


def is_colinear(origin: Coordinate, destination: Coordinate) -> bool:
    """Whether two cells share a rank, a file or a diagonal."""
    d_row = abs(destination.row - origin.row)
    d_col = abs(destination.col - origin.col)
    return d_row == 0 or d_col == 0 or d_row == d_col


def is_blocked_path(board: Board, origin: Coordinate, destination: Coordinate) -> bool:
    """Whether any cell strictly between two colinear endpoints is occupied.

    Neither endpoint is inspected; whether the destination holds a friend or
    a foe is the caller's concern. Non-colinear endpoints are reported as
    unblocked.
    """
    if not is_colinear(origin, destination):
        return False

    row_step, col_step = step_between(origin, destination)
    steps = max(abs(destination.row - origin.row), abs(destination.col - origin.col))

    cell = origin.offset(row_step, col_step)
    for _ in range(steps - 1):
        if board[cell] is not None:
            _LOGGER.debug(
                "Path %s-%s blocked at %s",
                square_name(origin),
                square_name(destination),
                square_name(cell),
            )
            return True
        cell = cell.offset(row_step, col_step)
    return False


def find_nearest_piece(
    board: Board, origin: Coordinate, row_step: int, col_step: int
) -> Piece | None:
    """First piece met walking from *origin* by (*row_step*, *col_step*)."""
    if row_step == 0 and col_step == 0:
        return None
    row = origin.row + row_step
    col = origin.col + col_step
    while in_bounds(row, col):
        piece = board[row, col]
        if piece is not None:
            return piece
        row += row_step
        col += col_step
    return None
