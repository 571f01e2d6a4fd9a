"""Static evaluator: material + piece-square tables + mobility."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from chesslaw.analysis.service import piece_value
from chesslaw.core.enums import Color, PieceType
from chesslaw.core.legality import generate_legal_moves
from chesslaw.core.types import Square, file_of, rank_of

if TYPE_CHECKING:
    from chesslaw.core.position import Position

# Tables are indexed [rank][file] from White's side, rank 0 = rank 1.
_PAWN_TABLE: Final = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (50, 50, 50, 50, 50, 50, 50, 50),
    (10, 10, 20, 30, 30, 20, 10, 10),
    (5, 5, 10, 25, 25, 10, 5, 5),
    (0, 0, 0, 20, 20, 0, 0, 0),
    (5, -5, -10, 0, 0, -10, -5, 5),
    (5, 10, 10, -20, -20, 10, 10, 5),
    (0, 0, 0, 0, 0, 0, 0, 0),
)

_KNIGHT_TABLE: Final = (
    (-50, -40, -30, -30, -30, -30, -40, -50),
    (-40, -20, 0, 0, 0, 0, -20, -40),
    (-30, 0, 10, 15, 15, 10, 0, -30),
    (-30, 5, 15, 20, 20, 15, 5, -30),
    (-30, 0, 15, 20, 20, 15, 0, -30),
    (-30, 5, 10, 15, 15, 10, 5, -30),
    (-40, -20, 0, 5, 5, 0, -20, -40),
    (-50, -40, -30, -30, -30, -30, -40, -50),
)

_BISHOP_TABLE: Final = (
    (-20, -10, -10, -10, -10, -10, -10, -20),
    (-10, 0, 0, 0, 0, 0, 0, -10),
    (-10, 0, 5, 10, 10, 5, 0, -10),
    (-10, 5, 5, 10, 10, 5, 5, -10),
    (-10, 0, 10, 10, 10, 10, 0, -10),
    (-10, 10, 10, 10, 10, 10, 10, -10),
    (-10, 5, 0, 0, 0, 0, 5, -10),
    (-20, -10, -10, -10, -10, -10, -10, -20),
)

_ROOK_TABLE: Final = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (5, 10, 10, 10, 10, 10, 10, 5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (-5, 0, 0, 0, 0, 0, 0, -5),
    (0, 0, 0, 5, 5, 0, 0, 0),
)

_QUEEN_TABLE: Final = (
    (-20, -10, -10, -5, -5, -10, -10, -20),
    (-10, 0, 0, 0, 0, 0, 0, -10),
    (-10, 0, 5, 5, 5, 5, 0, -10),
    (-5, 0, 5, 5, 5, 5, 0, -5),
    (0, 0, 5, 5, 5, 5, 0, -5),
    (-10, 5, 5, 5, 5, 5, 0, -10),
    (-10, 0, 5, 0, 0, 0, 0, -10),
    (-20, -10, -10, -5, -5, -10, -10, -20),
)

_KING_MIDDLEGAME_TABLE: Final = (
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-30, -40, -40, -50, -50, -40, -40, -30),
    (-20, -30, -30, -40, -40, -30, -30, -20),
    (-10, -20, -20, -20, -20, -20, -20, -10),
    (20, 20, 0, 0, 0, 0, 20, 20),
    (20, 30, 10, 0, 0, 10, 30, 20),
)

_TABLES: Final[dict[PieceType, tuple[tuple[int, ...], ...]]] = {
    PieceType.PAWN: _PAWN_TABLE,
    PieceType.KNIGHT: _KNIGHT_TABLE,
    PieceType.BISHOP: _BISHOP_TABLE,
    PieceType.ROOK: _ROOK_TABLE,
    PieceType.QUEEN: _QUEEN_TABLE,
    PieceType.KING: _KING_MIDDLEGAME_TABLE,
}


@dataclass(slots=True, frozen=True)
class EvalConfig:
    """Mobility tuning: bonus is ``clamp(moves - baseline, -cap, cap)``."""

    mobility_baseline: int = 20
    mobility_cap: int = 20


def piece_square_value(piece_type: PieceType, color: Color, sq: Square) -> int:
    """Signed positional bonus (positive favours White)."""
    rank = rank_of(sq)
    table_rank = rank if color == Color.WHITE else 7 - rank
    bonus = _TABLES[piece_type][table_rank][file_of(sq)]
    return bonus if color == Color.WHITE else -bonus


class Evaluator:
    """Scores a position in centipawns from White's point of view."""

    __slots__ = ("_config",)

    def __init__(self, config: EvalConfig | None = None) -> None:
        self._config = config or EvalConfig()

    def evaluate(self, position: Position) -> int:
        return (
            self.material_balance(position)
            + self.piece_square_score(position)
            + self.mobility_bonus(position)
        )

    @staticmethod
    def material_balance(position: Position) -> int:
        score = 0
        for _, piece in position.board.occupied():
            value = piece_value(piece.piece_type)
            score += value if piece.color == Color.WHITE else -value
        return score

    @staticmethod
    def piece_square_score(position: Position) -> int:
        return sum(
            piece_square_value(piece.piece_type, piece.color, sq)
            for sq, piece in position.board.occupied()
        )

    def mobility_bonus(self, position: Position) -> int:
        cfg = self._config
        mobility = len(generate_legal_moves(position))
        bonus = max(
            -cfg.mobility_cap,
            min(cfg.mobility_cap, mobility - cfg.mobility_baseline),
        )
        return bonus if position.side_to_move == Color.WHITE else -bonus
