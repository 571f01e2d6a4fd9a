"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslaw.core.enums import PieceType
from chesslaw.core.types import Square, square_name

PROMOTION_CHARS: dict[PieceType, str] = {
    PieceType.QUEEN: "q",
    PieceType.ROOK: "r",
    PieceType.BISHOP: "b",
    PieceType.KNIGHT: "n",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Equality is structural: two moves with the same squares but different
    promotion or special-move flags are different moves.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    is_castling: bool = False
    is_en_passant: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += PROMOTION_CHARS[self.promotion]
        return base

    @property
    def uci(self) -> str:
        """Long-algebraic notation, e.g. ``e7e8q``."""
        return str(self)
