"""Position — complete game state (board + metadata) with move application."""

from __future__ import annotations

from typing import Final

from chesslaw.core.board import Board
from chesslaw.core.enums import CastlingRights, Color, PieceType
from chesslaw.core.errors import InvalidMove
from chesslaw.core.move import Move
from chesslaw.core.piece import Piece
from chesslaw.core.types import (
    A1,
    A8,
    H1,
    H8,
    Square,
    file_of,
    is_valid_square,
    make_square,
    rank_of,
    square_name,
    square_parity,
)
from chesslaw.core.zobrist import compute_hash

REPETITION_LIMIT: Final = 3

# Rook home square -> the castling right that depends on it.
_ROOK_CORNERS: Final[dict[Square, CastlingRights]] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}

_MINOR_PIECES: Final = frozenset((PieceType.BISHOP, PieceType.KNIGHT))


def castling_rook_squares(king_from: Square, king_to: Square) -> tuple[Square, Square]:
    """``(rook_from, rook_to)`` for a castling king move on its home rank."""
    rank = rank_of(king_from)
    if file_of(king_to) > file_of(king_from):
        return make_square(7, rank), make_square(5, rank)
    return make_square(0, rank), make_square(3, rank)


def en_passant_capture_square(move: Move) -> Square:
    """Square of the pawn removed by an en passant capture."""
    return make_square(file_of(move.to_sq), rank_of(move.from_sq))


class Position:
    """Full chess position: board + side to move + castling + en passant +
    clocks + the hash of every position reached so far.

    Undo is handled by the owner keeping :meth:`copy` snapshots; a copy
    shares no mutable state with its source.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "history",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        history: list[int] | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.history: list[int] = (
            history if history is not None else [self.compute_hash()]
        )

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position with its hash already recorded."""
        return cls()

    @classmethod
    def empty(cls) -> Position:
        """Blank board, no rights, empty history. Used while decoding FEN."""
        return cls(Board(), Color.WHITE, CastlingRights.NONE, history=[])

    # ── Hashing / repetition ─────────────────────────────────────────────

    def compute_hash(self) -> int:
        return compute_hash(
            self.board.occupied(),
            self.castling,
            self.en_passant,
            self.side_to_move,
        )

    @property
    def zobrist_hash(self) -> int:
        """Hash of the current position (the most recent history entry)."""
        return self.history[-1] if self.history else self.compute_hash()

    def repetition_count(self) -> int:
        """How many times the current hash occurs anywhere in the history."""
        if not self.history:
            return 0
        return self.history.count(self.history[-1])

    def is_repetition(self) -> bool:
        """Threefold repetition, compared by hash value only."""
        if len(self.history) < REPETITION_LIMIT:
            return False
        return self.repetition_count() >= REPETITION_LIMIT

    # ── Material ─────────────────────────────────────────────────────────

    def has_insufficient_material(self) -> bool:
        """K vs K, K+minor vs K, K+B vs K+B with bishops on one square color.

        Anything else counts as sufficient, including K+N+N vs K.
        """
        white = self.board.pieces_of_color(Color.WHITE)
        black = self.board.pieces_of_color(Color.BLACK)

        if len(white) == 1 and len(black) == 1:
            return True

        if len(white) == 1 and len(black) == 2:
            return any(pt in _MINOR_PIECES for _, pt in black)

        if len(black) == 1 and len(white) == 2:
            return any(pt in _MINOR_PIECES for _, pt in white)

        if len(white) == 2 and len(black) == 2:
            white_bishop = next(
                (sq for sq, pt in white if pt == PieceType.BISHOP), None
            )
            black_bishop = next(
                (sq for sq, pt in black if pt == PieceType.BISHOP), None
            )
            if white_bishop is not None and black_bishop is not None:
                return square_parity(white_bishop) == square_parity(black_bishop)

        return False

    # ── Move application ─────────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move* and all its bookkeeping.

        The move is trusted to be legal. Castling preconditions (king and
        rook on their home squares) are verified before anything changes;
        on failure :class:`InvalidMove` is raised with the position intact.
        Square indices outside 0..63 are rejected the same way.
        """
        for sq in (move.from_sq, move.to_sq):
            if not is_valid_square(sq):
                raise InvalidMove(f"Square index out of range: {sq}")

        piece = self.board[move.from_sq]
        if piece is None:
            raise InvalidMove(f"No piece on {square_name(move.from_sq)}")

        is_capture = move.is_en_passant or self.board[move.to_sq] is not None

        if move.is_castling:
            self._apply_castling(move, piece)
        elif move.is_en_passant:
            self.board[en_passant_capture_square(move)] = None
            self.board[move.from_sq] = None
            self.board[move.to_sq] = piece
        else:
            self.board[move.from_sq] = None
            if move.promotion is not None:
                self.board[move.to_sq] = Piece(piece.color, move.promotion)
            else:
                self.board[move.to_sq] = piece

        self.update_castling_rights(move, piece)

        # En passant target for the opponent
        from_rank = rank_of(move.from_sq)
        to_rank = rank_of(move.to_sq)
        if piece.piece_type == PieceType.PAWN and abs(to_rank - from_rank) == 2:
            self.en_passant = make_square(
                file_of(move.from_sq), (from_rank + to_rank) // 2
            )
        else:
            self.en_passant = None

        # Clocks
        if piece.piece_type == PieceType.PAWN or is_capture:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite
        self.history.append(self.compute_hash())

    def _apply_castling(self, move: Move, king: Piece) -> None:
        if king.piece_type != PieceType.KING:
            origin = square_name(move.from_sq)
            raise InvalidMove(f"King not found at castling origin square {origin}")
        rook_from, rook_to = castling_rook_squares(move.from_sq, move.to_sq)
        if not self.board.has(rook_from, king.color, PieceType.ROOK):
            raise InvalidMove(
                f"Rook not found at expected position {square_name(rook_from)} "
                "for castling"
            )

        rook = self.board[rook_from]
        self.board[move.from_sq] = None
        self.board[move.to_sq] = king
        self.board[rook_from] = None
        self.board[rook_to] = rook

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def update_castling_rights(self, move: Move, piece: Piece) -> None:
        """Drop rights invalidated by *piece* making *move*.

        A king move clears both of its side's rights. Leaving or landing on
        a rook home square clears the right tied to that corner, whatever
        piece stood there.
        """
        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(piece.color)

        for sq in (move.from_sq, move.to_sq):
            right = _ROOK_CORNERS.get(sq)
            if right is not None:
                castling &= ~right

        self.castling = castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent deep copy, history included."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            history=self.history.copy(),
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, "
            f"castling={self.castling!r}, en_passant={self.en_passant}, "
            f"halfmove_clock={self.halfmove_clock}, "
            f"fullmove_number={self.fullmove_number})\n{self.board!r}"
        )
