"""GameSession — string-level command surface over one :class:`ChessGame`.

Translates algebraic square names and promotion names into engine calls and
serialises access with a lock, so a UI or service thread pool can share a
single session.
"""

from __future__ import annotations

import logging
import threading

from chesslaw.analysis.evaluator import Evaluator
from chesslaw.analysis.models import MoveAnalysis
from chesslaw.analysis.service import analyze_all_moves, analyze_move
from chesslaw.core.enums import PieceType
from chesslaw.core.errors import ChessError, GameOver, InvalidMove
from chesslaw.core.move import Move
from chesslaw.core.notation import parse_promotion, parse_uci
from chesslaw.core.position import Position
from chesslaw.core.status import GameStatus
from chesslaw.core.types import Square, parse_square
from chesslaw.game.controller import ChessGame

_LOGGER = logging.getLogger(__name__)


class GameSession:
    """One game plus the lock that guards it."""

    __slots__ = ("_game", "_lock", "_evaluator")

    def __init__(self, evaluator: Evaluator | None = None) -> None:
        self._game = ChessGame()
        self._lock = threading.Lock()
        self._evaluator = evaluator or Evaluator()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self) -> GameStatus:
        with self._lock:
            self._game = ChessGame()
            _LOGGER.info("New game started")
            return self._game.status

    def load_fen(self, fen: str) -> Position:
        """Replace the current game; the old one survives a decode failure."""
        try:
            game = ChessGame.from_fen(fen)
        except ChessError as exc:
            _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
            raise
        with self._lock:
            self._game = game
            _LOGGER.info("Loaded position %s", fen)
            return game.position.copy()

    # ── Queries ──────────────────────────────────────────────────────────

    def fen(self) -> str:
        with self._lock:
            return self._game.to_fen()

    def status(self) -> GameStatus:
        with self._lock:
            return self._game.status

    def position(self) -> Position:
        """Independent copy of the current position for read-only analysis."""
        with self._lock:
            return self._game.position.copy()

    def move_history(self) -> list[str]:
        with self._lock:
            return [move.uci for move in self._game.move_history]

    def legal_moves(self, square: str | None = None) -> list[Move]:
        """Legal moves, optionally only those starting on *square* (``"e2"``).

        Empty once the game is over.
        """
        from_sq = _parse_square(square) if square is not None else None
        with self._lock:
            if from_sq is None:
                return self._game.legal_moves()
            return self._game.legal_moves_for_square(from_sq)

    # ── Mutation ─────────────────────────────────────────────────────────

    def make_move(
        self, from_square: str, to_square: str, promotion: str | None = None
    ) -> GameStatus:
        """Play the legal move matching the given squares and promotion."""
        from_sq, to_sq, promo = _parse_request(from_square, to_square, promotion)
        with self._lock:
            move = self._resolve(from_sq, to_sq, promo)
            return self._game.make_move(move)

    def make_uci_move(self, text: str) -> GameStatus:
        """Play a move given as ``e2e4`` / ``e7e8q``."""
        try:
            from_sq, to_sq, promo = parse_uci(text)
        except ChessError as exc:
            _LOGGER.debug("Rejected move text %r: %s", text, exc)
            raise
        with self._lock:
            move = self._resolve(from_sq, to_sq, promo)
            return self._game.make_move(move)

    def undo_move(self) -> GameStatus:
        with self._lock:
            return self._game.undo_move()

    # ── Analysis ─────────────────────────────────────────────────────────

    def analyze_move(
        self, from_square: str, to_square: str, promotion: str | None = None
    ) -> MoveAnalysis:
        """Analysis of one legal move.

        Like :meth:`make_move`, raises :class:`GameOver` once the game is over.
        """
        from_sq, to_sq, promo = _parse_request(from_square, to_square, promotion)
        with self._lock:
            move = self._resolve(from_sq, to_sq, promo)
            return analyze_move(self._game.position, move)

    def analyze_all_moves(self) -> list[MoveAnalysis]:
        """Analysis of every legal move; empty once the game is over."""
        with self._lock:
            if not self._game.status.is_playable:
                return []
            return analyze_all_moves(self._game.position)

    def evaluate(self) -> int:
        """Static score in centipawns, positive when White is better."""
        with self._lock:
            return self._evaluator.evaluate(self._game.position)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _resolve(
        self, from_sq: Square, to_sq: Square, promo: PieceType | None
    ) -> Move:
        status = self._game.status
        if not status.is_playable:
            _LOGGER.debug("Rejected move request: game is over (%s)", status)
            raise GameOver(status)
        for move in self._game.legal_moves():
            if (
                move.from_sq == from_sq
                and move.to_sq == to_sq
                and move.promotion == promo
            ):
                return move
        move_text = Move(from_sq, to_sq).uci
        _LOGGER.debug("No legal move matches %s (promotion=%s)", move_text, promo)
        raise InvalidMove(f"Illegal move: {move_text}")


def _parse_square(name: str) -> Square:
    try:
        return parse_square(name)
    except ChessError as exc:
        _LOGGER.debug("Rejected square %r: %s", name, exc)
        raise


def _parse_request(
    from_square: str, to_square: str, promotion: str | None
) -> tuple[Square, Square, PieceType | None]:
    from_sq = _parse_square(from_square)
    to_sq = _parse_square(to_square)
    if promotion is None:
        return from_sq, to_sq, None
    try:
        return from_sq, to_sq, parse_promotion(promotion)
    except ChessError as exc:
        _LOGGER.debug("Rejected promotion %r: %s", promotion, exc)
        raise
