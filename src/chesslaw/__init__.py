"""chesslaw — a complete chess rules engine.

Quick start::

    from chesslaw import ChessGame

    game = ChessGame()
    print(len(game.legal_moves()))  # 20
"""

from chesslaw.core import (
    STARTING_FEN,
    ChessError,
    Color,
    GameOver,
    GameStatus,
    InvalidFen,
    InvalidMove,
    InvalidSquare,
    Move,
    ParseError,
    PieceType,
    Position,
    StatusKind,
    position_from_fen,
    position_to_fen,
)
from chesslaw.game import ChessGame
from chesslaw.session import GameSession

__all__ = [
    "STARTING_FEN",
    "ChessError",
    "ChessGame",
    "Color",
    "GameOver",
    "GameSession",
    "GameStatus",
    "InvalidFen",
    "InvalidMove",
    "InvalidSquare",
    "Move",
    "ParseError",
    "PieceType",
    "Position",
    "StatusKind",
    "position_from_fen",
    "position_to_fen",
]
