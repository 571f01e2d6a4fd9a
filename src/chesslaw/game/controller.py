"""ChessGame — owns a position, its undo snapshots and the derived status.

All mutation goes through :meth:`ChessGame.make_move` and
:meth:`ChessGame.undo_move`; the status is recomputed from scratch after each.
"""

from __future__ import annotations

import logging

from chesslaw.core.errors import GameOver, InvalidMove
from chesslaw.core.legality import generate_legal_moves
from chesslaw.core.move import Move
from chesslaw.core.notation import position_from_fen, position_to_fen
from chesslaw.core.position import Position
from chesslaw.core.rules import Rules
from chesslaw.core.status import GameStatus
from chesslaw.core.types import Square

_LOGGER = logging.getLogger(__name__)


class ChessGame:
    """A single game: current position, applied moves and undo snapshots.

    Thread-safety: none. Callers sharing one instance between threads must
    serialise access themselves (see :class:`chesslaw.session.GameSession`).
    """

    __slots__ = ("_position", "_moves", "_snapshots", "_status")

    def __init__(self, position: Position | None = None) -> None:
        self._position = position if position is not None else Position.initial()
        self._moves: list[Move] = []
        self._snapshots: list[Position] = []
        self._status = Rules.game_status(self._position)

    @classmethod
    def from_fen(cls, fen: str) -> ChessGame:
        return cls(position_from_fen(fen))

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        """The live position. Treat as read-only; use ``copy()`` to explore."""
        return self._position

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def move_history(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def to_fen(self) -> str:
        return position_to_fen(self._position)

    # ── Move queries ─────────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move; empty once the game is over."""
        if not self._status.is_playable:
            return []
        return generate_legal_moves(self._position)

    def legal_moves_for_square(self, square: Square) -> list[Move]:
        return [move for move in self.legal_moves() if move.from_sq == square]

    # ── Mutation ─────────────────────────────────────────────────────────

    def make_move(self, move: Move) -> GameStatus:
        """Apply a legal *move* and return the new status.

        Raises :class:`GameOver` if the game already ended and
        :class:`InvalidMove` if *move* is not legal here. A rejected move
        leaves the game exactly as it was.
        """
        if not self._status.is_playable:
            raise GameOver(self._status)

        if move not in generate_legal_moves(self._position):
            raise InvalidMove(f"Move {move.uci} is not legal")

        self._snapshots.append(self._position.copy())
        try:
            self._position.make_move(move)
        except InvalidMove as exc:
            # Preconditions are checked before the board is touched.
            self._snapshots.pop()
            _LOGGER.warning("Rejected %s while applying: %s", move, exc.reason)
            raise

        self._moves.append(move)
        self._refresh_status()
        _LOGGER.debug("Applied %s -> %s", move, self._status)
        return self._status

    def undo_move(self) -> GameStatus:
        """Restore the position before the last move and return its status."""
        if not self._snapshots:
            raise InvalidMove("No moves to undo")

        self._position = self._snapshots.pop()
        move = self._moves.pop()
        self._refresh_status()
        _LOGGER.debug("Undid %s -> %s", move, self._status)
        return self._status

    # ── Internal helpers ─────────────────────────────────────────────────

    def _refresh_status(self) -> None:
        self._status = Rules.game_status(self._position)
        if self._status.is_terminal:
            _LOGGER.info("Game ended: %s", self._status)
