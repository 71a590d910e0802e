"""FEN piece-placement parsing and serialization."""

from __future__ import annotations

from chez.core.board import Board
from chez.core.pieces import piece_from_char
from chez.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(text: str) -> Board:
    """Parse the placement field of a FEN string into a :class:`Board`.

    A full FEN record is accepted; only its first field is read. Ranks are
    listed from rank 8 down, which is row 0 down to row 7.
    """
    parts = text.split()
    if not parts:
        raise ValueError(f"Invalid FEN placement (empty): {text!r}")
    placement = parts[0]

    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {text!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {text!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {text!r}")
                board.put(piece_from_char(ch), row, col)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {text!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {text!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to the FEN placement field."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[row, col]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += piece.letter
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
