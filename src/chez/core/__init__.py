"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chez.core import (
        Color,
        board_from_placement,
        find_attacking_pieces,
        parse_square,
    )

    board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
    for piece in find_attacking_pieces(board, parse_square("e1"), Color.BLACK):
        print(piece, piece.alphanumeric_loc)   # Rb a1
"""

from chez.core.attacks import (
    attacked_squares,
    find_attacking_pieces,
    is_in_check,
    is_square_under_attack,
    iter_attacking_pieces,
)
from chez.core.board import Board
from chez.core.enums import Color, PieceKind, RayAxis
from chez.core.geometry import (
    DIRECTIONS,
    KNIGHT_OFFSETS,
    Direction,
    find_nearest_piece,
    is_blocked_path,
    is_colinear,
)
from chez.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chez.core.piece import MoveResult, Piece
from chez.core.pieces import (
    Bishop,
    King,
    Knight,
    Pawn,
    Queen,
    Rook,
    create_piece,
    piece_class,
    piece_from_char,
)
from chez.core.types import (
    BOARD_SIZE,
    Coordinate,
    chebyshev_distance,
    in_bounds,
    out_of_bounds,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    "RayAxis",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "chebyshev_distance",
    "in_bounds",
    "out_of_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveResult",
    "Piece",
    "Pawn",
    "Knight",
    "Bishop",
    "Rook",
    "Queen",
    "King",
    "create_piece",
    "piece_class",
    "piece_from_char",
    # Geometry
    "DIRECTIONS",
    "KNIGHT_OFFSETS",
    "Direction",
    "find_nearest_piece",
    "is_blocked_path",
    "is_colinear",
    # Attack detection
    "attacked_squares",
    "find_attacking_pieces",
    "is_in_check",
    "is_square_under_attack",
    "iter_attacking_pieces",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
