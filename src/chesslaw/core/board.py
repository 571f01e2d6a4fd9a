"""Board - piece placement on an 8x8 grid plus attack detection."""

from __future__ import annotations

from collections.abc import Iterator

from chesslaw.core.enums import Color, PieceType
from chesslaw.core.piece import Piece
from chesslaw.core.types import Square, make_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attackers() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    """[attacker color][target square] -> squares a pawn must stand on."""
    per_color: list[tuple[tuple[Square, ...], ...]] = []
    for rank_delta in (-1, 1):  # white pawns sit behind the target, black ahead
        per_square: list[tuple[Square, ...]] = []
        for sq in range(64):
            file_idx = sq & 7
            rank_idx = (sq >> 3) + rank_delta
            cells: list[Square] = []
            if 0 <= rank_idx < 8:
                for df in (-1, 1):
                    af = file_idx + df
                    if 0 <= af < 8:
                        cells.append(make_square(af, rank_idx))
            per_square.append(tuple(cells))
        per_color.append(tuple(per_square))
    return tuple(per_color)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)
_PAWN_ATTACKERS = _build_pawn_attackers()

_DIAGONAL_SLIDERS = frozenset((PieceType.BISHOP, PieceType.QUEEN))
_ORTHOGONAL_SLIDERS = frozenset((PieceType.ROOK, PieceType.QUEEN))


class Board:
    """Mutable 64-cell board. Each cell is empty or holds one :class:`Piece`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def has(self, sq: Square, color: Color, piece_type: PieceType) -> bool:
        """Whether *sq* holds exactly *color*'s *piece_type*."""
        piece = self._squares[sq]
        return (
            piece is not None
            and piece.color == color
            and piece.piece_type == piece_type
        )

    # -- Query helpers ------------------------------------------------------

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for sq, piece in enumerate(self._squares):
            if (
                piece is not None
                and piece.piece_type == PieceType.KING
                and piece.color == color
            ):
                return sq
        return None

    def pieces_of_color(self, color: Color) -> list[tuple[Square, PieceType]]:
        """All ``(square, piece_type)`` pairs of *color*, in square order."""
        return [
            (sq, piece.piece_type)
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    # -- Attack detection ---------------------------------------------------

    def is_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        squares = self._squares

        for from_sq in _PAWN_ATTACKERS[int(by_color)][sq]:
            piece = squares[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.PAWN
            ):
                return True

        for from_sq in KNIGHT_TARGETS[sq]:
            piece = squares[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.KNIGHT
            ):
                return True

        for from_sq in KING_TARGETS[sq]:
            piece = squares[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.KING
            ):
                return True

        return self._ray_attack(BISHOP_RAYS[sq], by_color, _DIAGONAL_SLIDERS) or (
            self._ray_attack(ROOK_RAYS[sq], by_color, _ORTHOGONAL_SLIDERS)
        )

    def _ray_attack(
        self,
        rays: tuple[tuple[Square, ...], ...],
        by_color: Color,
        sliders: frozenset[PieceType],
    ) -> bool:
        squares = self._squares
        for ray in rays:
            for to_sq in ray:
                piece = squares[to_sq]
                if piece is None:
                    continue
                # First occupied cell blocks the ray whatever its color.
                if piece.color == by_color and piece.piece_type in sliders:
                    return True
                break
        return False

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        back_rank = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for f, pt in enumerate(back_rank):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
