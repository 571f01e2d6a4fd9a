"""Static move analysis: captures, checks and move categories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from chesslaw.analysis.models import MoveAnalysis, MoveCategory
from chesslaw.core.enums import PieceType
from chesslaw.core.legality import generate_legal_moves, is_king_attacked, simulate_move

if TYPE_CHECKING:
    from chesslaw.core.move import Move
    from chesslaw.core.position import Position

# Centipawns; the king carries no material value.
PIECE_VALUES: Final[dict[PieceType, int]] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 0,
}


def piece_value(piece_type: PieceType) -> int:
    return PIECE_VALUES[piece_type]


def categorize_move(move: Move, is_capture: bool, is_check: bool) -> MoveCategory:
    if move.is_castling:
        return MoveCategory.CASTLE
    if move.is_en_passant:
        return MoveCategory.EN_PASSANT
    if move.promotion is not None:
        return MoveCategory.PROMOTION_CAPTURE if is_capture else MoveCategory.PROMOTION

    if is_capture:
        return MoveCategory.CHECK_CAPTURE if is_check else MoveCategory.CAPTURE
    return MoveCategory.CHECK if is_check else MoveCategory.QUIET


def analyze_move(position: Position, move: Move) -> MoveAnalysis:
    """Describe *move* as played by the side to move in *position*."""
    if move.is_en_passant:
        captured: PieceType | None = PieceType.PAWN
    else:
        target = position.board[move.to_sq]
        captured = target.piece_type if target is not None else None
    is_capture = captured is not None

    after = simulate_move(position, move)
    is_check = is_king_attacked(after, position.side_to_move.opposite)

    return MoveAnalysis(
        move=move,
        is_capture=is_capture,
        is_check=is_check,
        captured_piece=captured,
        category=categorize_move(move, is_capture, is_check),
        material_change=piece_value(captured) if captured is not None else 0,
    )


def analyze_all_moves(position: Position) -> list[MoveAnalysis]:
    """Analysis of every legal move in *position*."""
    return [analyze_move(position, move) for move in generate_legal_moves(position)]
