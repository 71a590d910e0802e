"""Tests for Board."""

import pytest

from chez.core.board import Board
from chez.core.enums import Color, PieceKind
from chez.core.pieces import King, Knight, Pawn, Rook
from chez.core.types import Coordinate, parse_square


class TestBoardInitial:
    def test_kings(self) -> None:
        board = Board.initial()
        white_king = board.king(Color.WHITE)
        black_king = board.king(Color.BLACK)
        assert white_king is not None and white_king.alphanumeric_loc == "e1"
        assert black_king is not None and black_king.alphanumeric_loc == "e8"

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
            PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
        ]
        for col, kind in enumerate(expected):
            black = board[0, col]
            white = board[7, col]
            assert black is not None and white is not None
            assert (black.kind, black.color) == (kind, Color.BLACK)
            assert (white.kind, white.color) == (kind, Color.WHITE)

    def test_pawns(self) -> None:
        board = Board.initial()
        assert all(board[1, col].kind == PieceKind.PAWN for col in range(8))
        assert all(board[6, col].color == Color.WHITE for col in range(8))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board.is_empty(Coordinate(row, col))

    def test_setup_does_not_count_moves(self) -> None:
        board = Board.initial()
        assert all(p.times_moved == 0 for p in board.pieces())

    def test_matches_placement(self, initial_board: Board) -> None:
        assert Board.initial() == initial_board


class TestBoardOperations:
    def test_put_binds_coordinate(self, empty_board: Board) -> None:
        knight = empty_board.put(Knight(Color.WHITE), 4, 4)
        assert knight.coordinate == Coordinate(4, 4)
        assert empty_board[parse_square("e4")] is knight

    def test_put_occupied(self, empty_board: Board) -> None:
        empty_board.put(Knight(Color.WHITE), 4, 4)
        with pytest.raises(ValueError, match="occupied"):
            empty_board.put(Pawn(Color.BLACK), 4, 4)

    def test_put_out_of_bounds(self, empty_board: Board) -> None:
        with pytest.raises(ValueError, match="out of bounds"):
            empty_board.put(Pawn(Color.BLACK), 8, 0)

    @pytest.mark.parametrize("cell", [(8, 0), (0, 8), (-1, 0), (0, -1)])
    def test_index_out_of_bounds(
        self, empty_board: Board, cell: tuple[int, int]
    ) -> None:
        with pytest.raises(IndexError):
            empty_board[cell]

    def test_pieces_by_color(self, initial_board: Board) -> None:
        assert len(list(initial_board.pieces())) == 32
        assert len(list(initial_board.pieces(Color.BLACK))) == 16
        assert all(p.color == Color.WHITE for p in initial_board.pieces(Color.WHITE))

    def test_no_king(self, empty_board: Board) -> None:
        empty_board.put(Rook(Color.WHITE), 0, 0)
        assert empty_board.king(Color.WHITE) is None

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        king = copy.king(Color.WHITE)
        assert king is not None
        assert king is not board.king(Color.WHITE)
        king.place(copy, 5, 4)
        assert board != copy
        original = board.king(Color.WHITE)
        assert original is not None and original.coordinate == Coordinate(7, 4)
        assert original.times_moved == 0

    def test_copy_keeps_coordinates(self, initial_board: Board) -> None:
        for piece in initial_board.copy().pieces():
            assert initial_board[piece.coordinate] is not piece
            assert initial_board[piece.coordinate] is not None

    def test_clear(self, initial_board: Board) -> None:
        initial_board.clear()
        assert list(initial_board.pieces()) == []

    def test_equality_ignores_identity(self, empty_board: Board) -> None:
        other = Board()
        empty_board.put(King(Color.BLACK), 0, 4)
        other.put(King(Color.BLACK), 0, 4)
        assert empty_board == other

    def test_repr(self, initial_board: Board) -> None:
        lines = repr(initial_board).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[4] == "4 . . . . . . . ."
        assert lines[-1] == "  a b c d e f g h"
