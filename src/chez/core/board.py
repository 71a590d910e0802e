"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import TYPE_CHECKING

from chez.core.enums import Color, PieceKind
from chez.core.types import BOARD_SIZE, Coordinate, in_bounds, square_name

if TYPE_CHECKING:
    from chez.core.piece import Piece

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional piece references.

    The board is the single owner of placement. A piece's ``row``/``col``
    mirror the cell that holds it and are only changed through
    :meth:`Piece.place` (moves) or :meth:`put` (setup).
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    @staticmethod
    def _check(cell: tuple[int, int]) -> tuple[int, int]:
        row, col = cell
        if not in_bounds(row, col):
            raise IndexError(f"Cell out of bounds: {cell!r}")
        return row, col

    def __getitem__(self, cell: tuple[int, int]) -> Piece | None:
        row, col = self._check(cell)
        return self._cells[row][col]

    def __setitem__(self, cell: tuple[int, int], piece: Piece | None) -> None:
        row, col = self._check(cell)
        self._cells[row][col] = piece

    def is_empty(self, cell: tuple[int, int]) -> bool:
        return self[cell] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[Piece]:
        """Pieces on the board in row-major order, optionally of one *color*."""
        for row in self._cells:
            for piece in row:
                if piece is not None and (color is None or piece.color == color):
                    yield piece

    def king(self, color: Color) -> Piece | None:
        """The first king of *color* found on the board, if any."""
        for piece in self.pieces(color):
            if piece.kind == PieceKind.KING:
                return piece
        return None

    # -- Setup --------------------------------------------------------------

    def put(self, piece: Piece, row: int, col: int) -> Piece:
        """Bind a fresh *piece* to an empty cell without counting a move."""
        if not in_bounds(row, col):
            raise ValueError(f"Cannot put {piece} out of bounds at ({row}, {col})")
        occupant = self._cells[row][col]
        if occupant is not None:
            raise ValueError(
                f"Cannot put {piece} on {square_name(Coordinate(row, col))}: "
                f"occupied by {occupant}"
            )
        piece.row = row
        piece.col = col
        self._cells[row][col] = piece
        return piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Independent copy with cloned pieces, for move simulation."""
        b = Board()
        for row_idx, row in enumerate(self._cells):
            b._cells[row_idx] = [
                copy.copy(piece) if piece is not None else None for piece in row
            ]
        return b

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on rows 0-1, white on rows 6-7)."""
        from chez.core.pieces import create_piece

        b = cls()
        for col in range(BOARD_SIZE):
            b.put(create_piece(PieceKind.PAWN, Color.BLACK), 1, col)
            b.put(create_piece(PieceKind.PAWN, Color.WHITE), 6, col)
        for col, kind in enumerate(_BACK_RANK):
            b.put(create_piece(kind, Color.BLACK), 0, col)
            b.put(create_piece(kind, Color.WHITE), 7, col)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._layout() == other._layout()

    def _layout(self) -> list[list[tuple[Color, PieceKind] | None]]:
        return [
            [(p.color, p.kind) if p is not None else None for p in row]
            for row in self._cells
        ]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._cells):
            cells = [p.letter if p is not None else "." for p in row]
            rows.append(f"{BOARD_SIZE - row_idx} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
