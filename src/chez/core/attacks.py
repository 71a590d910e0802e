"""Attack detection: which enemy pieces threaten a given square.

All functions here are read-only over a :class:`Board` snapshot. Callers
wanting to know whether a move would expose their king simulate it on
:meth:`Board.copy` and query the copy.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import TYPE_CHECKING

from chez.core.enums import Color, PieceKind, RayAxis
from chez.core.geometry import DIRECTIONS, KNIGHT_OFFSETS, find_nearest_piece
from chez.core.types import Coordinate, all_coordinates, chebyshev_distance, in_bounds

if TYPE_CHECKING:
    from chez.core.board import Board
    from chez.core.piece import Piece


def _pawn_source_row(target: Coordinate, enemy_color: Color) -> int:
    """Row an enemy pawn must stand on to capture into *target*.

    White pawns advance toward row 0, so a white attacker sits one row
    below the target; black attackers sit one row above.
    """
    return target.row + 1 if enemy_color == Color.WHITE else target.row - 1


def _threatens_along_ray(piece: Piece, target: Coordinate, axis: RayAxis) -> bool:
    match piece.kind:
        case PieceKind.QUEEN:
            return True
        case PieceKind.BISHOP:
            return axis is RayAxis.DIAGONAL
        case PieceKind.ROOK:
            return axis is RayAxis.ORTHOGONAL
        case PieceKind.KING:
            # The ray only guarantees the king is nearest, not adjacent.
            return chebyshev_distance(piece.coordinate, target) <= 1
        case PieceKind.PAWN | PieceKind.KNIGHT:
            return False


def iter_attacking_pieces(
    board: Board, target: Coordinate, enemy_color: Color
) -> Iterator[Piece]:
    """Lazily yield every *enemy_color* piece attacking *target*.

    Order: knights, then pawns, then ray pieces in row-major direction
    order. A piece seen by two mechanisms is yielded twice.
    """
    for d_row, d_col in KNIGHT_OFFSETS:
        row, col = target.row + d_row, target.col + d_col
        if not in_bounds(row, col):
            continue
        piece = board[row, col]
        if (
            piece is not None
            and piece.color == enemy_color
            and piece.kind == PieceKind.KNIGHT
        ):
            yield piece

    pawn_row = _pawn_source_row(target, enemy_color)
    for col in (target.col - 1, target.col + 1):
        if not in_bounds(pawn_row, col):
            continue
        piece = board[pawn_row, col]
        if (
            piece is not None
            and piece.color == enemy_color
            and piece.kind == PieceKind.PAWN
        ):
            yield piece

    for direction in DIRECTIONS:
        piece = find_nearest_piece(
            board, target, direction.row_step, direction.col_step
        )
        if piece is None or piece.color != enemy_color:
            continue
        if _threatens_along_ray(piece, target, direction.axis):
            yield piece


def find_attacking_pieces(
    board: Board,
    target: Coordinate,
    enemy_color: Color,
    quick_check: bool = False,
) -> list[Piece]:
    """All enemy pieces attacking *target*.

    With *quick_check* the enumeration stops at the first attacker, so the
    result holds at most one piece: the first one the full enumeration
    would list.
    """
    attackers = iter_attacking_pieces(board, target, enemy_color)
    if quick_check:
        return list(islice(attackers, 1))
    return list(attackers)


def is_square_under_attack(
    board: Board, target: Coordinate, enemy_color: Color
) -> bool:
    """Is *target* attacked by any piece of *enemy_color*?"""
    return bool(find_attacking_pieces(board, target, enemy_color, quick_check=True))


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? False when *color* has no king on the board."""
    king = board.king(color)
    if king is None:
        return False
    return is_square_under_attack(board, king.coordinate, color.opposite)


def attacked_squares(board: Board, by_color: Color) -> set[Coordinate]:
    """Every cell attacked by at least one piece of *by_color*."""
    return {
        coord
        for coord in all_coordinates()
        if is_square_under_attack(board, coord, by_color)
    }
