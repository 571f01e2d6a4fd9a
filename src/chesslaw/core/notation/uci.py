"""Move strings: from-square + to-square + optional promotion letter."""

from __future__ import annotations

from chesslaw.core.enums import PieceType
from chesslaw.core.errors import ChessError, ParseError
from chesslaw.core.move import PROMOTION_CHARS, Move
from chesslaw.core.types import Square, parse_square

_PROMOTION_NAMES: dict[str, PieceType] = {
    **{char: pt for pt, char in PROMOTION_CHARS.items()},
    "queen": PieceType.QUEEN,
    "rook": PieceType.ROOK,
    "bishop": PieceType.BISHOP,
    "knight": PieceType.KNIGHT,
}


def move_to_uci(move: Move) -> str:
    """Render *move* as e.g. ``e2e4`` or ``e7e8q``."""
    return move.uci


def parse_promotion(text: str) -> PieceType:
    """``q``/``queen`` (any case) → :attr:`PieceType.QUEEN`, etc."""
    try:
        return _PROMOTION_NAMES[text.lower()]
    except KeyError:
        raise ParseError(text) from None


def parse_uci(text: str) -> tuple[Square, Square, PieceType | None]:
    """Split a 4- or 5-character move string into its parts.

    Special-move flags cannot be recovered from text alone; callers resolve
    the result against the legal-move list.
    """
    if len(text) not in (4, 5):
        raise ParseError(text)
    try:
        from_sq = parse_square(text[0:2])
        to_sq = parse_square(text[2:4])
    except ChessError as exc:
        raise ParseError(text) from exc
    promotion = None
    if len(text) == 5:
        promotion = _PROMOTION_NAMES.get(text[4])
        if promotion is None:
            raise ParseError(text)
    return from_sq, to_sq, promotion
