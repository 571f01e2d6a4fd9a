"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from chesslaw.core.legality import has_legal_move, is_in_check
from chesslaw.core.status import (
    CHECK,
    DRAW_BY_FIFTY_MOVE_RULE,
    DRAW_BY_INSUFFICIENT_MATERIAL,
    DRAW_BY_REPETITION,
    IN_PROGRESS,
    STALEMATE,
    GameStatus,
)

if TYPE_CHECKING:
    from chesslaw.core.position import Position

FIFTY_MOVE_HALFMOVES: Final = 100  # 100 half-moves = 50 full moves


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return is_in_check(position) and not has_legal_move(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not is_in_check(position) and not has_legal_move(position)

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        return position.has_insufficient_material()

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= FIFTY_MOVE_HALFMOVES

    @staticmethod
    def is_threefold_repetition(position: Position) -> bool:
        return position.is_repetition()

    @staticmethod
    def game_status(position: Position) -> GameStatus:
        """Derive the status from scratch; the first matching rule wins."""
        in_check = is_in_check(position)

        if not has_legal_move(position):
            if in_check:
                return GameStatus.checkmate(position.side_to_move.opposite)
            return STALEMATE

        if Rules.is_fifty_move_rule(position):
            return DRAW_BY_FIFTY_MOVE_RULE

        if position.has_insufficient_material():
            return DRAW_BY_INSUFFICIENT_MATERIAL

        if position.is_repetition():
            return DRAW_BY_REPETITION

        if in_check:
            return CHECK

        return IN_PROGRESS
