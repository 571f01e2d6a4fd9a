"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesslaw.core import generate_legal_moves, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for move in generate_legal_moves(pos):
        print(move)
"""

from chesslaw.core.board import Board
from chesslaw.core.enums import CastlingRights, Color, PieceType
from chesslaw.core.errors import (
    ChessError,
    GameOver,
    InvalidFen,
    InvalidMove,
    InvalidSquare,
    ParseError,
)
from chesslaw.core.legality import (
    can_castle,
    generate_legal_moves,
    is_in_check,
    is_legal_move,
    simulate_move,
)
from chesslaw.core.move import Move
from chesslaw.core.move_generator import MoveGenerator
from chesslaw.core.notation import (
    STARTING_FEN,
    move_to_uci,
    parse_promotion,
    parse_uci,
    position_from_fen,
    position_to_fen,
)
from chesslaw.core.perft import divide, perft
from chesslaw.core.piece import Piece
from chesslaw.core.position import Position
from chesslaw.core.rules import Rules
from chesslaw.core.status import GameStatus, StatusKind
from chesslaw.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    "StatusKind",
    # Errors
    "ChessError",
    "GameOver",
    "InvalidFen",
    "InvalidMove",
    "InvalidSquare",
    "ParseError",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "GameStatus",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Legality
    "can_castle",
    "generate_legal_moves",
    "is_in_check",
    "is_legal_move",
    "simulate_move",
    # Counting
    "divide",
    "perft",
    # Notation
    "STARTING_FEN",
    "move_to_uci",
    "parse_promotion",
    "parse_uci",
    "position_from_fen",
    "position_to_fen",
]
