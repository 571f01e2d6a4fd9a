"""Data models produced by move analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from chesslaw.core.enums import PieceType
from chesslaw.core.move import Move


class MoveCategory(StrEnum):
    """Coarse classification of a legal move."""

    QUIET = "Quiet"
    CAPTURE = "Capture"
    CHECK = "Check"
    CHECK_CAPTURE = "CheckCapture"
    CASTLE = "Castle"
    PROMOTION = "Promotion"
    PROMOTION_CAPTURE = "PromotionCapture"
    EN_PASSANT = "EnPassant"


@dataclass(slots=True, frozen=True)
class MoveAnalysis:
    """Static facts about one move in one position."""

    move: Move
    is_capture: bool
    is_check: bool
    captured_piece: PieceType | None
    category: MoveCategory
    material_change: int
