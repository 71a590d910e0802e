"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def suffix(self) -> str:
        """Single-letter suffix used in piece display strings."""
        return "w" if self is Color.WHITE else "b"


class PieceKind(IntEnum):
    """Closed set of piece kinds, ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class RayAxis(Enum):
    """Line family a compass direction belongs to."""

    ORTHOGONAL = "orthogonal"
    DIAGONAL = "diagonal"
