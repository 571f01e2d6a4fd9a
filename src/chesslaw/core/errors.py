"""Exception hierarchy raised by the rules engine.

Every error derives from :class:`ChessError`, itself a ``ValueError`` so that
callers which only care about "bad input" can keep catching ``ValueError``.
"""

from __future__ import annotations


class ChessError(ValueError):
    """Base class for all engine errors."""


class InvalidFen(ChessError):
    """Malformed or semantically inconsistent FEN text."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid FEN: {reason}")
        self.reason = reason


class InvalidMove(ChessError):
    """Move rejected by the legality filter, or nothing left to undo."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid move: {reason}")
        self.reason = reason


class InvalidSquare(ChessError):
    """Square name that is not two characters ``[a-h][1-8]``."""

    def __init__(self, square: str) -> None:
        super().__init__(f"Invalid square: {square}")
        self.square = square


class GameOver(ChessError):
    """Mutation attempted after the game reached a terminal status."""

    def __init__(self, status: object) -> None:
        super().__init__(f"Game is over: {status}")
        self.status = status


class ParseError(ChessError):
    """Generic textual parse failure (move strings, promotion names, ...)."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Parse error: {text}")
        self.input = text
