"""Piece base class: identity, placement and the move template."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from chez.core.attacks import is_square_under_attack
from chez.core.enums import Color, PieceKind
from chez.core.types import Coordinate, in_bounds, square_name

if TYPE_CHECKING:
    from chez.core.board import Board

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :meth:`Piece.move`; truthy only when the move was made."""

    moved: bool
    points: int = 0
    captured: Piece | None = None

    def __bool__(self) -> bool:
        return self.moved


_REJECTED = MoveResult(moved=False)


class Piece(ABC):
    """A chess piece bound to one cell of a :class:`Board`.

    Identity (kind, name, short name, value, glyphs) is fixed per variant.
    ``row``/``col`` cache the piece's cell and are kept in step with the
    board by :meth:`place`.
    """

    __slots__ = ("color", "row", "col", "times_moved", "captured")

    kind: ClassVar[PieceKind]
    name: ClassVar[str]
    short_name: ClassVar[str]
    value: ClassVar[int]
    icons: ClassVar[dict[Color, str]]

    def __init__(self, color: Color, row: int = 0, col: int = 0) -> None:
        self.color = color
        self.row = row
        self.col = col
        self.times_moved = 0
        self.captured = False

    # ── Identity ─────────────────────────────────────────────────────────

    @property
    def enemy_color(self) -> Color:
        return self.color.opposite

    @property
    def icon(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return self.icons[self.color]

    @property
    def letter(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        if self.color == Color.WHITE:
            return self.short_name
        return self.short_name.lower()

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.row, self.col)

    @property
    def alphanumeric_loc(self) -> str:
        """Current cell in file-rank notation, e.g. 'e4'."""
        return square_name(self.coordinate)

    def __str__(self) -> str:
        """Short code plus color suffix, e.g. 'Nw'."""
        return self.short_name + self.color.suffix

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.name}, {self.alphanumeric_loc})"

    # ── Placement ────────────────────────────────────────────────────────

    def place(self, board: Board, row: int, col: int) -> None:
        """Relocate to (*row*, *col*) and count the move.

        Out-of-bounds requests are ignored.
        """
        if not in_bounds(row, col):
            return
        if board[self.coordinate] is self:
            board[self.coordinate] = None
        self.row = row
        self.col = col
        board[row, col] = self
        self.times_moved += 1

    # ── Moving ───────────────────────────────────────────────────────────

    @abstractmethod
    def can_reach(self, board: Board, destination: Coordinate) -> bool:
        """Whether this variant's geometry allows moving to *destination*.

        The destination is in bounds, differs from the current cell and is
        not held by a friendly piece.
        """

    def move(self, board: Board, row: int, col: int) -> MoveResult:
        """Validate and, if legal, perform a move to (*row*, *col*).

        Illegal requests return a falsy result and leave the board untouched.
        A capture marks the taken piece and reports its value in ``points``.
        """
        if self.captured or board[self.coordinate] is not self:
            return self._reject("piece is not on the board", row, col)
        if not in_bounds(row, col):
            return self._reject("destination off the board", row, col)
        destination = Coordinate(row, col)
        if destination == self.coordinate:
            return self._reject("destination is the current square", row, col)

        target = board[destination]
        if target is not None and target.color == self.color:
            return self._reject("destination holds a friendly piece", row, col)
        if not self.can_reach(board, destination):
            return self._reject(f"not a {self.name.lower()} move", row, col)
        if self._exposes_king(board, destination):
            return self._reject("own king would be in check", row, col)

        points = 0
        if target is not None:
            target.captured = True
            points = target.value
        self.place(board, row, col)
        return MoveResult(moved=True, points=points, captured=target)

    def _exposes_king(self, board: Board, destination: Coordinate) -> bool:
        if board.king(self.color) is None:
            return False
        trial = board.copy()
        mover = trial[self.coordinate]
        assert mover is not None
        mover.place(trial, destination.row, destination.col)
        king = trial.king(self.color)
        assert king is not None
        return is_square_under_attack(trial, king.coordinate, self.enemy_color)

    def _reject(self, reason: str, row: int, col: int) -> MoveResult:
        _LOGGER.debug(
            "%s on %s cannot move to (%d, %d): %s",
            self,
            self.alphanumeric_loc,
            row,
            col,
            reason,
        )
        return _REJECTED
