"""Perft — counting legal move sequences to a fixed depth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslaw.core.legality import generate_legal_moves

if TYPE_CHECKING:
    from chesslaw.core.position import Position


def perft(position: Position, depth: int) -> int:
    """Number of leaf nodes *depth* plies below *position*.

    Children are built from copies, so *position* is left untouched.
    """
    if depth <= 0:
        return 1
    moves = generate_legal_moves(position)
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        child = position.copy()
        child.make_move(move)
        nodes += perft(child, depth - 1)
    return nodes


def divide(position: Position, depth: int) -> dict[str, int]:
    """Perft split by root move, keyed by UCI string."""
    counts: dict[str, int] = {}
    for move in generate_legal_moves(position):
        child = position.copy()
        child.make_move(move)
        counts[move.uci] = perft(child, depth - 1)
    return counts
