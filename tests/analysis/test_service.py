"""Tests for static move analysis."""

from __future__ import annotations

import pytest

from chesslaw.analysis import (
    MoveCategory,
    analyze_all_moves,
    analyze_move,
    categorize_move,
    piece_value,
)
from chesslaw.core.enums import PieceType
from chesslaw.core.move import Move
from chesslaw.core.notation import STARTING_FEN, position_from_fen
from chesslaw.core.types import C1, D1, D5, D6, D8, E1, E2, E4, E5, E7, E8, F7, G1, H5

SCHOLARS_SETUP = "r1bqkb1r/pppp1ppp/2n2n2/4p2Q/2B1P3/8/PPPP1PPP/RNB1K1NR w KQkq - 4 4"


class TestPieceValues:
    @pytest.mark.parametrize(
        ("piece_type", "value"),
        [
            (PieceType.PAWN, 100),
            (PieceType.KNIGHT, 320),
            (PieceType.BISHOP, 330),
            (PieceType.ROOK, 500),
            (PieceType.QUEEN, 900),
            (PieceType.KING, 0),
        ],
    )
    def test_values(self, piece_type: PieceType, value: int) -> None:
        assert piece_value(piece_type) == value


class TestCategorize:
    def test_special_moves_take_priority(self) -> None:
        castle = Move(E1, G1, is_castling=True)
        assert categorize_move(castle, False, True) == MoveCategory.CASTLE
        ep = Move(E5, D6, is_en_passant=True)
        assert categorize_move(ep, True, True) == MoveCategory.EN_PASSANT

    def test_promotion(self) -> None:
        promo = Move(E7, E8, promotion=PieceType.QUEEN)
        assert categorize_move(promo, False, True) == MoveCategory.PROMOTION
        assert categorize_move(promo, True, False) == MoveCategory.PROMOTION_CAPTURE

    def test_plain_moves(self) -> None:
        move = Move(E2, E4)
        assert categorize_move(move, False, False) == MoveCategory.QUIET
        assert categorize_move(move, True, False) == MoveCategory.CAPTURE
        assert categorize_move(move, False, True) == MoveCategory.CHECK
        assert categorize_move(move, True, True) == MoveCategory.CHECK_CAPTURE


class TestAnalyzeMove:
    def test_quiet(self) -> None:
        result = analyze_move(position_from_fen(STARTING_FEN), Move(E2, E4))
        assert result.category == MoveCategory.QUIET
        assert not result.is_capture
        assert result.captured_piece is None
        assert result.material_change == 0

    def test_capture(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 2"
        )
        result = analyze_move(pos, Move(E4, D5))
        assert result.category == MoveCategory.CAPTURE
        assert result.captured_piece == PieceType.PAWN
        assert result.material_change == 100

    def test_check(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/ppppp1pp/5p2/8/4P3/8/PPPP1PPP/RNBQKBNR w KQkq - 0 2"
        )
        result = analyze_move(pos, Move(D1, H5))
        assert result.is_check
        assert result.category == MoveCategory.CHECK

    def test_check_capture(self) -> None:
        result = analyze_move(position_from_fen(SCHOLARS_SETUP), Move(H5, F7))
        assert result.is_check
        assert result.is_capture
        assert result.category == MoveCategory.CHECK_CAPTURE

    def test_castle(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        result = analyze_move(pos, Move(E1, C1, is_castling=True))
        assert result.category == MoveCategory.CASTLE
        assert not result.is_capture

    def test_en_passant_counts_captured_pawn(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        result = analyze_move(pos, Move(E5, D6, is_en_passant=True))
        assert result.category == MoveCategory.EN_PASSANT
        assert result.is_capture
        assert result.captured_piece == PieceType.PAWN
        assert result.material_change == 100

    def test_promotion_capture(self) -> None:
        pos = position_from_fen("3r4/4P3/8/8/8/8/k7/4K3 w - - 0 1")
        result = analyze_move(pos, Move(E7, D8, promotion=PieceType.QUEEN))
        assert result.category == MoveCategory.PROMOTION_CAPTURE
        assert result.captured_piece == PieceType.ROOK
        assert result.material_change == 500


class TestAnalyzeAll:
    def test_starting_position(self) -> None:
        results = analyze_all_moves(position_from_fen(STARTING_FEN))
        assert len(results) == 20
        assert all(r.category == MoveCategory.QUIET for r in results)

    def test_finds_mate_in_one(self) -> None:
        results = analyze_all_moves(position_from_fen(SCHOLARS_SETUP))
        checks = [r.move.uci for r in results if r.is_check]
        assert "h5f7" in checks
