"""Notation package: FEN codec and UCI-style move strings."""

from chesslaw.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chesslaw.core.notation.uci import move_to_uci, parse_promotion, parse_uci

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "move_to_uci",
    "parse_promotion",
    "parse_uci",
]
