"""Legality filter: turns pseudo-legal moves into legal ones."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslaw.core.board import Board
from chesslaw.core.enums import Color
from chesslaw.core.move import Move
from chesslaw.core.move_generator import (
    MoveGenerator,
    castling_path_clear,
    home_rank,
)
from chesslaw.core.piece import Piece
from chesslaw.core.position import castling_rook_squares, en_passant_capture_square
from chesslaw.core.types import file_of, make_square

if TYPE_CHECKING:
    from chesslaw.core.position import Position


def simulate_move(position: Position, move: Move) -> Board:
    """Copy of the board after the move's piece effects.

    Covers relocation, promotion, en passant removal and the castling rook.
    Rights, clocks and side to move are not touched.
    """
    board = position.board.copy()

    if move.is_en_passant:
        board[en_passant_capture_square(move)] = None

    if move.is_castling:
        rook_from, rook_to = castling_rook_squares(move.from_sq, move.to_sq)
        board[rook_to] = board[rook_from]
        board[rook_from] = None

    piece = board[move.from_sq]
    board[move.from_sq] = None
    if move.promotion is not None and piece is not None:
        board[move.to_sq] = Piece(piece.color, move.promotion)
    else:
        board[move.to_sq] = piece
    return board


def is_king_attacked(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked on *board*? ``False`` if there is no king."""
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    return board.is_attacked(king_sq, color.opposite)


def is_in_check(position: Position, color: Color | None = None) -> bool:
    """Whether *color* (default: side to move) is in check."""
    if color is None:
        color = position.side_to_move
    return is_king_attacked(position.board, color)


def can_castle(position: Position, color: Color, kingside: bool) -> bool:
    """Full castling legality for *color* on one wing."""
    if not castling_path_clear(position, color, kingside):
        return False

    if is_in_check(position, color):
        return False

    rank = home_rank(color)
    # King passes through the f/d file and lands on the g/c file.
    transit, landing = (5, 6) if kingside else (3, 2)
    opponent = color.opposite
    board = position.board
    return not (
        board.is_attacked(make_square(transit, rank), opponent)
        or board.is_attacked(make_square(landing, rank), opponent)
    )


def is_legal_move(position: Position, move: Move) -> bool:
    """Whether playing *move* leaves the mover's king safe.

    *move* is assumed to be pseudo-legal for the side to move.
    """
    color = position.side_to_move
    if move.is_castling:
        return can_castle(position, color, file_of(move.to_sq) > file_of(move.from_sq))
    return not is_king_attacked(simulate_move(position, move), color)


def generate_legal_moves(position: Position) -> list[Move]:
    """All strictly legal moves for the side to move."""
    return [
        move
        for move in MoveGenerator(position).generate_pseudo_legal_moves()
        if is_legal_move(position, move)
    ]


def has_legal_move(position: Position) -> bool:
    """Cheaper than ``bool(generate_legal_moves(...))``: stops at the first hit."""
    return any(
        is_legal_move(position, move)
        for move in MoveGenerator(position).generate_pseudo_legal_moves()
    )
