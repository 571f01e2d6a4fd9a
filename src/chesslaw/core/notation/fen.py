"""FEN parsing and serialization."""

from __future__ import annotations

from chesslaw.core.enums import CastlingRights, Color, PieceType
from chesslaw.core.errors import InvalidFen, InvalidSquare, ParseError
from chesslaw.core.piece import Piece
from chesslaw.core.position import Position
from chesslaw.core.types import (
    A1,
    A8,
    E1,
    E8,
    H1,
    H8,
    Square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# right -> (color, king square, rook square, wing name)
_CASTLING_HOMES: tuple[tuple[CastlingRights, Color, Square, Square, str], ...] = (
    (CastlingRights.WHITE_KINGSIDE, Color.WHITE, E1, H1, "kingside"),
    (CastlingRights.WHITE_QUEENSIDE, Color.WHITE, E1, A1, "queenside"),
    (CastlingRights.BLACK_KINGSIDE, Color.BLACK, E8, H8, "kingside"),
    (CastlingRights.BLACK_QUEENSIDE, Color.BLACK, E8, A8, "queenside"),
)


def position_from_fen(fen: str) -> Position:
    """Parse and validate a six-field FEN string into a :class:`Position`.

    Raises :class:`InvalidFen` for malformed text as well as for positions
    that cannot occur (king counts, pawns on the back ranks, an en passant
    square on the wrong rank, castling rights without king and rook home).
    """
    parts = fen.split()
    if len(parts) != 6:
        raise InvalidFen(f"Expected 6 fields, got {len(parts)}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts
    pos = Position.empty()

    _parse_placement(pos, placement)
    pos.side_to_move = _parse_side(side_part)
    pos.castling = _parse_castling(castling_part)
    pos.en_passant = _parse_en_passant(ep_part)
    pos.halfmove_clock = _parse_counter(half_part, "halfmove clock")
    pos.fullmove_number = _parse_counter(full_part, "fullmove number")

    _validate(pos)

    pos.history.append(pos.compute_hash())
    return pos


def _parse_placement(pos: Position, placement: str) -> None:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidFen(f"Expected 8 ranks, got {len(ranks)}")

    board = pos.board
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx  # FEN starts from rank 8
        file = 0
        for ch in rank_text:
            if file >= 8:
                raise InvalidFen(f"Too many squares in rank {rank + 1}")
            if ch.isascii() and ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise InvalidFen(f"Invalid digit {ch!r} in FEN (must be 1-8)")
                if file + step > 8:
                    raise InvalidFen(
                        f"Rank {rank + 1} has too many squares "
                        f"(file {file} + {step} empty squares > 8)"
                    )
                file += step
            else:
                try:
                    board[make_square(file, rank)] = Piece.from_char(ch)
                except ParseError:
                    raise InvalidFen(f"Invalid piece character: {ch}") from None
                file += 1
        if file != 8:
            raise InvalidFen(f"Rank {rank + 1} has {file} squares, expected 8")


def _parse_side(text: str) -> Color:
    if text == "w":
        return Color.WHITE
    if text == "b":
        return Color.BLACK
    raise InvalidFen(f"Invalid active color: {text}")


def _parse_castling(text: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if text == "-":
        return castling
    for ch in text:
        right = _CASTLING_CHARS.get(ch)
        if right is None:
            raise InvalidFen(f"Invalid castling character: {ch}")
        if castling & right:
            raise InvalidFen(f"Duplicate castling character: {ch}")
        castling |= right
    return castling


def _parse_en_passant(text: str) -> Square | None:
    if text == "-":
        return None
    try:
        return parse_square(text)
    except InvalidSquare as exc:
        raise InvalidFen(f"Invalid en passant square: {text}") from exc


def _parse_counter(text: str, label: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise InvalidFen(f"Invalid {label}: {text}")
    return int(text)


def _validate(pos: Position) -> None:
    board = pos.board
    for color in (Color.WHITE, Color.BLACK):
        kings = sum(
            1
            for _, piece in board.occupied()
            if piece.piece_type == PieceType.KING and piece.color == color
        )
        if kings == 0:
            raise InvalidFen(f"{color.name.capitalize()} king not found")
        if kings > 1:
            raise InvalidFen(f"Multiple {color} kings found: {kings}")

    for sq, piece in board.occupied():
        if piece.piece_type == PieceType.PAWN and rank_of(sq) in (0, 7):
            raise InvalidFen(f"Pawn on rank {rank_of(sq) + 1}")

    if pos.en_passant is not None:
        expected_rank = 5 if pos.side_to_move == Color.WHITE else 2
        if rank_of(pos.en_passant) != expected_rank:
            raise InvalidFen(
                f"Invalid en passant square: {square_name(pos.en_passant)}"
            )

    for right, color, king_sq, rook_sq, wing in _CASTLING_HOMES:
        if not pos.castling & right:
            continue
        if not board.has(king_sq, color, PieceType.KING):
            raise InvalidFen(
                f"{color.name.capitalize()} {wing} castling right requires "
                f"{color} king on {square_name(king_sq)}"
            )
        if not board.has(rook_sq, color, PieceType.ROOK):
            raise InvalidFen(
                f"{color.name.capitalize()} {wing} castling right requires "
                f"{color} rook on {square_name(rook_sq)}"
            )


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling, always in KQkq order
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
