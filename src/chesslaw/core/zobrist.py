"""Zobrist hashing keys.

Tables are produced once at import time by a 64-bit linear-congruential
generator with fixed seeds, so hash values are identical across runs.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Final

from chesslaw.core.enums import CastlingRights, Color
from chesslaw.core.piece import Piece
from chesslaw.core.types import Square, file_of

_MASK_64: Final = 0xFFFFFFFFFFFFFFFF
_LCG_MULTIPLIER: Final = 6364136223846793005
_LCG_INCREMENT: Final = 1442695040888963407

_PIECE_SEED: Final = 123456789
_CASTLING_SEED: Final = 987654321
_EN_PASSANT_SEED: Final = 456789123
_SIDE_TO_MOVE_SEED: Final = 321654987


def _lcg(seed: int) -> Iterator[int]:
    """Infinite stream of 64-bit LCG states following *seed*."""
    state = seed
    while True:
        state = (state * _LCG_MULTIPLIER + _LCG_INCREMENT) & _MASK_64
        yield state


def _build_piece_keys() -> tuple[tuple[tuple[int, ...], ...], ...]:
    # Draw order is square-major, then color, then piece kind.
    rng = _lcg(_PIECE_SEED)
    return tuple(
        tuple(tuple(next(rng) for _ptype in range(6)) for _color in range(2))
        for _sq in range(64)
    )


def _take(seed: int, count: int) -> tuple[int, ...]:
    rng = _lcg(seed)
    return tuple(next(rng) for _ in range(count))


# [square][color][piece_type - 1]
_PIECE_KEYS: Final = _build_piece_keys()
# WHITE_KINGSIDE, WHITE_QUEENSIDE, BLACK_KINGSIDE, BLACK_QUEENSIDE
_CASTLING_KEYS: Final = _take(_CASTLING_SEED, 4)
_EN_PASSANT_KEYS: Final = _take(_EN_PASSANT_SEED, 8)
_SIDE_TO_MOVE_KEY: Final = _take(_SIDE_TO_MOVE_SEED, 1)[0]

_CASTLING_ORDER: Final = (
    CastlingRights.WHITE_KINGSIDE,
    CastlingRights.WHITE_QUEENSIDE,
    CastlingRights.BLACK_KINGSIDE,
    CastlingRights.BLACK_QUEENSIDE,
)


def piece_key(piece: Piece, sq: Square) -> int:
    """Hash key for a specific piece on a square."""
    return _PIECE_KEYS[sq][int(piece.color)][int(piece.piece_type) - 1]


def side_to_move_key() -> int:
    """Key XOR-ed in when Black is to move."""
    return _SIDE_TO_MOVE_KEY


def castling_key(castling: CastlingRights) -> int:
    """Combined key for every right set in *castling*."""
    key = 0
    for idx, right in enumerate(_CASTLING_ORDER):
        if castling & right:
            key ^= _CASTLING_KEYS[idx]
    return key


def en_passant_key(ep_square: Square) -> int:
    """Key for an en passant target; only the file contributes."""
    return _EN_PASSANT_KEYS[file_of(ep_square)]


def compute_hash(
    squares: Iterable[tuple[Square, Piece]],
    castling: CastlingRights,
    en_passant: Square | None,
    side_to_move: Color,
) -> int:
    """From-scratch 64-bit hash of a position's features."""
    key = 0
    for sq, piece in squares:
        key ^= piece_key(piece, sq)
    key ^= castling_key(castling)
    if en_passant is not None:
        key ^= en_passant_key(en_passant)
    if side_to_move == Color.BLACK:
        key ^= _SIDE_TO_MOVE_KEY
    return key
