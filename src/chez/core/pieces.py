"""Concrete piece variants and construction helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chez.core.enums import Color, PieceKind
from chez.core.geometry import is_blocked_path
from chez.core.piece import Piece
from chez.core.types import Coordinate

if TYPE_CHECKING:
    from chez.core.board import Board


def _deltas(piece: Piece, destination: Coordinate) -> tuple[int, int]:
    return destination.row - piece.row, destination.col - piece.col


def _is_diagonal(d_row: int, d_col: int) -> bool:
    return abs(d_row) == abs(d_col) != 0


def _is_orthogonal(d_row: int, d_col: int) -> bool:
    return (d_row == 0) != (d_col == 0)


class Pawn(Piece):
    """Steps one cell forward, captures one cell diagonally forward."""

    __slots__ = ()

    kind = PieceKind.PAWN
    name = "Pawn"
    short_name = "P"
    value = 1
    icons = {Color.WHITE: "♙", Color.BLACK: "♟"}

    @property
    def forward(self) -> int:
        """Row step of an advance: white heads for row 0, black for row 7."""
        return -1 if self.color == Color.WHITE else 1

    def can_reach(self, board: Board, destination: Coordinate) -> bool:
        d_row, d_col = _deltas(self, destination)
        if d_row != self.forward:
            return False
        if d_col == 0:
            return board.is_empty(destination)
        if abs(d_col) == 1:
            target = board[destination]
            return target is not None and target.color == self.enemy_color
        return False


class Knight(Piece):
    __slots__ = ()

    kind = PieceKind.KNIGHT
    name = "Knight"
    short_name = "N"
    value = 3
    icons = {Color.WHITE: "♘", Color.BLACK: "♞"}

    def can_reach(self, board: Board, destination: Coordinate) -> bool:
        d_row, d_col = _deltas(self, destination)
        return {abs(d_row), abs(d_col)} == {1, 2}


class Bishop(Piece):
    __slots__ = ()

    kind = PieceKind.BISHOP
    name = "Bishop"
    short_name = "B"
    value = 3
    icons = {Color.WHITE: "♗", Color.BLACK: "♝"}

    def can_reach(self, board: Board, destination: Coordinate) -> bool:
        if not _is_diagonal(*_deltas(self, destination)):
            return False
        return not is_blocked_path(board, self.coordinate, destination)


class Rook(Piece):
    __slots__ = ()

    kind = PieceKind.ROOK
    name = "Rook"
    short_name = "R"
    value = 5
    icons = {Color.WHITE: "♖", Color.BLACK: "♜"}

    def can_reach(self, board: Board, destination: Coordinate) -> bool:
        if not _is_orthogonal(*_deltas(self, destination)):
            return False
        return not is_blocked_path(board, self.coordinate, destination)


class Queen(Piece):
    __slots__ = ()

    kind = PieceKind.QUEEN
    name = "Queen"
    short_name = "Q"
    value = 9
    icons = {Color.WHITE: "♕", Color.BLACK: "♛"}

    def can_reach(self, board: Board, destination: Coordinate) -> bool:
        d_row, d_col = _deltas(self, destination)
        if not (_is_diagonal(d_row, d_col) or _is_orthogonal(d_row, d_col)):
            return False
        return not is_blocked_path(board, self.coordinate, destination)


class King(Piece):
    """Moves one cell in any direction. Castling is handled by the game layer."""

    __slots__ = ()

    kind = PieceKind.KING
    name = "King"
    short_name = "K"
    value = 0
    icons = {Color.WHITE: "♔", Color.BLACK: "♚"}

    def can_reach(self, board: Board, destination: Coordinate) -> bool:
        d_row, d_col = _deltas(self, destination)
        return max(abs(d_row), abs(d_col)) == 1


_CLASSES: dict[PieceKind, type[Piece]] = {
    PieceKind.PAWN: Pawn,
    PieceKind.KNIGHT: Knight,
    PieceKind.BISHOP: Bishop,
    PieceKind.ROOK: Rook,
    PieceKind.QUEEN: Queen,
    PieceKind.KING: King,
}

# FEN character ↔ PieceKind
_CHAR_MAP: dict[str, PieceKind] = {
    cls.short_name: kind for kind, cls in _CLASSES.items()
}


def piece_class(kind: PieceKind) -> type[Piece]:
    return _CLASSES[kind]


def create_piece(kind: PieceKind, color: Color) -> Piece:
    """Fresh, unplaced piece of *kind* and *color*."""
    return _CLASSES[kind](color)


def piece_from_char(char: str) -> Piece:
    """Create piece from FEN character, e.g. 'N' → white knight."""
    try:
        kind = _CHAR_MAP[char.upper()]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None
    color = Color.WHITE if char.isupper() else Color.BLACK
    return create_piece(kind, color)
