"""Tests for the legality filter: pins, checks and castling safety."""

from chesslaw.core.enums import Color, PieceType
from chesslaw.core.legality import (
    can_castle,
    generate_legal_moves,
    has_legal_move,
    is_in_check,
    is_legal_move,
    simulate_move,
)
from chesslaw.core.move import Move
from chesslaw.core.notation import position_from_fen
from chesslaw.core.piece import Piece
from chesslaw.core.types import (
    C3, C8, D3, D4, D5, D6, D8, E1, E4, E5, E7, E8, F1, F6, G1, G7, G8, H1,
)


def _has_move(fen: str, move: Move) -> bool:
    return move in generate_legal_moves(position_from_fen(fen))


class TestCheckDetection:
    def test_queen_on_open_file(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppp1ppp/8/8/8/8/PPPPQPPP/RNB1KBNR b KQkq - 0 1"
        )
        assert is_in_check(pos)
        assert is_in_check(pos, Color.BLACK)
        assert not is_in_check(pos, Color.WHITE)

    def test_starting_position_not_in_check(self) -> None:
        pos = position_from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
        assert not is_in_check(pos)

    def test_missing_king_is_not_in_check(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        pos.board[E1] = None
        assert not is_in_check(pos)


class TestPins:
    FEN = "6k1/6b1/8/8/3Q4/8/8/K7 w - - 0 1"

    def test_pinned_queen_cannot_leave_diagonal(self) -> None:
        assert not _has_move(self.FEN, Move(D4, D5))
        assert not _has_move(self.FEN, Move(D4, E4))

    def test_pinned_queen_moves_along_pin(self) -> None:
        assert _has_move(self.FEN, Move(D4, C3))
        assert _has_move(self.FEN, Move(D4, E5))
        assert _has_move(self.FEN, Move(D4, F6))
        assert _has_move(self.FEN, Move(D4, G7))

    def test_en_passant_exposing_king(self) -> None:
        fen = "8/8/8/8/k2Pp2Q/8/8/4K3 b - d3 0 1"
        pos = position_from_fen(fen)
        ep = Move(E4, D3, is_en_passant=True)
        assert not is_legal_move(pos, ep)
        assert ep not in generate_legal_moves(pos)


class TestEscapingCheck:
    def test_only_blocks_on_e7(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppp1ppp/8/8/8/8/PPPPQPPP/RNB1KBNR b KQkq - 0 1"
        )
        moves = generate_legal_moves(pos)
        assert len(moves) == 3
        assert {m.to_sq for m in moves} == {E7}

    def test_double_check_allows_only_king_moves(self) -> None:
        pos = position_from_fen("4r1k1/8/8/8/8/3n4/8/R3K3 w - - 0 1")
        moves = generate_legal_moves(pos)
        assert moves
        assert all(m.from_sq == E1 for m in moves)
        assert has_legal_move(pos)

    def test_checkmated_side_has_no_moves(self) -> None:
        pos = position_from_fen("R5k1/5ppp/8/8/8/8/8/7K b - - 0 1")
        assert generate_legal_moves(pos) == []
        assert not has_legal_move(pos)


class TestCastlingLegality:
    def test_both_wings_available(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1")
        assert can_castle(pos, Color.BLACK, kingside=True)
        assert can_castle(pos, Color.BLACK, kingside=False)
        assert Move(E8, G8, is_castling=True) in generate_legal_moves(pos)
        assert Move(E8, C8, is_castling=True) in generate_legal_moves(pos)

    def test_cannot_castle_through_check(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R2QK2R b KQkq - 0 1")
        assert not can_castle(pos, Color.BLACK, kingside=False)
        assert can_castle(pos, Color.BLACK, kingside=True)

    def test_cannot_castle_in_check(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/4Q3/R3K2R b KQkq - 0 1")
        assert not can_castle(pos, Color.BLACK, kingside=True)
        assert not can_castle(pos, Color.BLACK, kingside=False)

    def test_cannot_castle_into_check(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K1QR b KQkq - 0 1")
        assert not can_castle(pos, Color.BLACK, kingside=True)
        assert can_castle(pos, Color.BLACK, kingside=False)

    def test_attacked_b_file_does_not_block_queenside(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/RR2K2R b KQkq - 0 1")
        assert can_castle(pos, Color.BLACK, kingside=False)

    def test_cannot_castle_without_right(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K3 w Qkq - 0 1")
        assert not can_castle(pos, Color.WHITE, kingside=True)
        assert can_castle(pos, Color.WHITE, kingside=False)


class TestSimulateMove:
    def test_leaves_position_untouched(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        board = simulate_move(pos, Move(E1, G1, is_castling=True))
        assert board[G1] == Piece(Color.WHITE, PieceType.KING)
        assert board[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[H1] is None
        assert pos.board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_en_passant_removes_pawn(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        board = simulate_move(pos, Move(E5, D6, is_en_passant=True))
        assert board[D5] is None
        assert board[D6] == Piece(Color.WHITE, PieceType.PAWN)

    def test_promotion(self) -> None:
        pos = position_from_fen("3r4/4P3/8/8/8/8/k7/4K3 w - - 0 1")
        board = simulate_move(pos, Move(E7, D8, promotion=PieceType.KNIGHT))
        assert board[D8] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert board[E7] is None
