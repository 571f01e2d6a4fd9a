"""Tests for Board."""

from chesslaw.core.board import Board
from chesslaw.core.enums import Color, PieceType
from chesslaw.core.piece import Piece
from chesslaw.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    D2, F2,
    A3, A4, A5, B2, B3, C3, D4, D5, E4, E5, E6, F5, H6,
    A8, B8, C8, D8, E8, F8, G8, H8,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawn_ranks(self) -> None:
        board = Board.initial()
        white = [sq for sq, pt in board.pieces_of_color(Color.WHITE) if pt == PieceType.PAWN]
        black = [sq for sq, pt in board.pieces_of_color(Color.BLACK) if pt == PieceType.PAWN]
        assert sorted(white) == list(range(8, 16))
        assert sorted(black) == list(range(48, 56))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert len(board.pieces_of_color(Color.WHITE)) == 16
        assert len(board.pieces_of_color(Color.BLACK)) == 16
        assert len(list(board.occupied())) == 32


class TestBoardAccess:
    def test_set_and_clear_square(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.QUEEN)
        assert board.has(E4, Color.WHITE, PieceType.QUEEN)
        assert not board.has(E4, Color.BLACK, PieceType.QUEEN)
        board[E4] = None
        assert board.is_empty(E4)

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_find_king_missing(self) -> None:
        board = Board()
        assert board.find_king(Color.WHITE) is None

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[E1] = None
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert clone != board

    def test_equality(self) -> None:
        assert Board.initial() == Board.initial()
        assert Board() != Board.initial()

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.occupied()) == []

    def test_repr_shows_pieces(self) -> None:
        text = repr(Board.initial())
        assert "r n b q k b n r" in text
        assert "R N B Q K B N R" in text


class TestAttacks:
    def test_white_pawn_attacks_diagonally(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.PAWN)
        assert board.is_attacked(D5, Color.WHITE)
        assert board.is_attacked(F5, Color.WHITE)
        assert not board.is_attacked(E5, Color.WHITE)

    def test_black_pawn_attacks_downward(self) -> None:
        board = Board()
        board[D5] = Piece(Color.BLACK, PieceType.PAWN)
        assert board.is_attacked(E4, Color.BLACK)
        assert not board.is_attacked(D4, Color.BLACK)
        assert not board.is_attacked(E5, Color.BLACK)

    def test_knight_attacks(self) -> None:
        board = Board()
        board[B1] = Piece(Color.WHITE, PieceType.KNIGHT)
        assert board.is_attacked(C3, Color.WHITE)
        assert board.is_attacked(A3, Color.WHITE)
        assert board.is_attacked(D2, Color.WHITE)
        assert not board.is_attacked(B3, Color.WHITE)

    def test_rook_blocked_by_piece(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.ROOK)
        board[A4] = Piece(Color.BLACK, PieceType.PAWN)
        assert board.is_attacked(A3, Color.WHITE)
        assert board.is_attacked(A4, Color.WHITE)
        assert not board.is_attacked(A5, Color.WHITE)

    def test_rook_does_not_attack_diagonally(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.ROOK)
        assert not board.is_attacked(B2, Color.WHITE)

    def test_bishop_long_diagonal(self) -> None:
        board = Board()
        board[C1] = Piece(Color.WHITE, PieceType.BISHOP)
        assert board.is_attacked(H6, Color.WHITE)
        assert not board.is_attacked(C3, Color.WHITE)

    def test_queen_combines_lines_and_diagonals(self) -> None:
        board = Board()
        board[D4] = Piece(Color.BLACK, PieceType.QUEEN)
        assert board.is_attacked(D8, Color.BLACK)
        assert board.is_attacked(H8, Color.BLACK)
        assert board.is_attacked(A1, Color.BLACK)
        assert not board.is_attacked(E6, Color.BLACK)

    def test_king_adjacency(self) -> None:
        board = Board()
        board[E1] = Piece(Color.WHITE, PieceType.KING)
        assert board.is_attacked(D1, Color.WHITE)
        assert board.is_attacked(F2, Color.WHITE)
        assert not board.is_attacked(G1, Color.WHITE)

    def test_initial_position_attacks(self) -> None:
        board = Board.initial()
        assert board.is_attacked(A3, Color.WHITE)
        assert not board.is_attacked(E4, Color.WHITE)
        assert not board.is_attacked(E5, Color.BLACK)
