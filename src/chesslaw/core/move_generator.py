"""Pseudo-legal move generation."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chesslaw.core.board import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
)
from chesslaw.core.enums import Color, PieceType
from chesslaw.core.move import Move
from chesslaw.core.types import Square, file_of, make_square, rank_of

if TYPE_CHECKING:
    from chesslaw.core.position import Position


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# King home file and the files that must be empty per wing.
_KING_FILE = 4
_KINGSIDE_PATH = (5, 6)
_QUEENSIDE_PATH = (1, 2, 3)


def home_rank(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


class MoveGenerator:
    """Generates pseudo-legal moves for a given :class:`Position`.

    Pseudo-legal moves respect piece movement and occupancy but may leave
    the mover's own king in check; :mod:`chesslaw.core.legality` filters
    them.
    """

    __slots__ = ("_pos", "_board", "_dispatch")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board
        self._dispatch: dict[
            PieceType, Callable[[Square, Color, list[Move]], None]
        ] = {
            PieceType.PAWN: self._gen_pawn,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.BISHOP: self._gen_bishop,
            PieceType.ROOK: self._gen_rook,
            PieceType.QUEEN: self._gen_queen,
            PieceType.KING: self._gen_king,
        }

    # -- Public API ---------------------------------------------------------

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves for the side to move, castling last."""
        moves: list[Move] = []
        color = self._pos.side_to_move
        for sq, piece_type in self._board.pieces_of_color(color):
            self._dispatch[piece_type](sq, color, moves)
        self._gen_castling(color, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        direction = 1 if color == Color.WHITE else -1
        start_rank = 1 if color == Color.WHITE else 6
        promotion_rank = 7 if color == Color.WHITE else 0
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        next_rank = rank_idx + direction
        if not 0 <= next_rank < 8:
            return

        one_step = make_square(file_idx, next_rank)
        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, next_rank == promotion_rank, moves)
            if rank_idx == start_rank:
                two_step = make_square(file_idx, rank_idx + 2 * direction)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for df in (-1, 1):
            cap_file = file_idx + df
            if not 0 <= cap_file < 8:
                continue
            cap_sq = make_square(cap_file, next_rank)
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    self._add_pawn_move(
                        sq, cap_sq, next_rank == promotion_rank, moves
                    )
            elif cap_sq == self._pos.en_passant:
                moves.append(Move(sq, cap_sq, is_en_passant=True))

    @staticmethod
    def _add_pawn_move(
        from_sq: Square, to_sq: Square, promotes: bool, moves: list[Move]
    ) -> None:
        if promotes:
            for pt in PROMOTION_TYPES:
                moves.append(Move(from_sq, to_sq, promotion=pt))
        else:
            moves.append(Move(from_sq, to_sq))

    def _gen_leaper(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_knight(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_leaper(sq, color, KNIGHT_TARGETS[sq], moves)

    def _gen_king(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_leaper(sq, color, KING_TARGETS[sq], moves)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_bishop(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_sliding(sq, color, BISHOP_RAYS[sq], moves)

    def _gen_rook(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_sliding(sq, color, ROOK_RAYS[sq], moves)

    def _gen_queen(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_sliding(sq, color, QUEEN_RAYS[sq], moves)

    # -- Castling -----------------------------------------------------------

    def _gen_castling(self, color: Color, moves: list[Move]) -> None:
        # Check safety is left to the legality filter.
        rank = home_rank(color)
        king_sq = make_square(_KING_FILE, rank)
        for kingside in (True, False):
            if castling_path_clear(self._pos, color, kingside):
                to_file = 6 if kingside else 2
                moves.append(
                    Move(king_sq, make_square(to_file, rank), is_castling=True)
                )


def castling_path_clear(position: Position, color: Color, kingside: bool) -> bool:
    """Right set, king and rook physically home, and nothing between them.

    The board is checked independently of the right because the rights are
    bookkeeping and may disagree with the board.
    """
    if not position.castling.can_castle(color, kingside):
        return False

    board = position.board
    rank = home_rank(color)
    if not board.has(make_square(_KING_FILE, rank), color, PieceType.KING):
        return False

    rook_file = 7 if kingside else 0
    if not board.has(make_square(rook_file, rank), color, PieceType.ROOK):
        return False

    path = _KINGSIDE_PATH if kingside else _QUEENSIDE_PATH
    return all(board.is_empty(make_square(f, rank)) for f in path)
