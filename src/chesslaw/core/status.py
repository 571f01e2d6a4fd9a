"""Game status: exactly one variant holds for any position."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from chesslaw.core.enums import Color


class StatusKind(StrEnum):
    """Closed set of status variants."""

    IN_PROGRESS = "InProgress"
    CHECK = "Check"
    CHECKMATE = "Checkmate"
    STALEMATE = "Stalemate"
    DRAW_BY_FIFTY_MOVE_RULE = "DrawByFiftyMoveRule"
    DRAW_BY_INSUFFICIENT_MATERIAL = "DrawByInsufficientMaterial"
    DRAW_BY_REPETITION = "DrawByRepetition"


_PLAYABLE = frozenset((StatusKind.IN_PROGRESS, StatusKind.CHECK))
_DRAWS = frozenset(
    (
        StatusKind.STALEMATE,
        StatusKind.DRAW_BY_FIFTY_MOVE_RULE,
        StatusKind.DRAW_BY_INSUFFICIENT_MATERIAL,
        StatusKind.DRAW_BY_REPETITION,
    )
)


@dataclass(frozen=True, slots=True)
class GameStatus:
    """A status variant; ``winner`` is set for, and only for, checkmate."""

    kind: StatusKind
    winner: Color | None = None

    def __post_init__(self) -> None:
        if (self.kind == StatusKind.CHECKMATE) != (self.winner is not None):
            raise ValueError(f"winner must be given exactly for checkmate: {self.kind}")

    @classmethod
    def checkmate(cls, winner: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, winner)

    @property
    def is_playable(self) -> bool:
        """Moves may still be made (in progress or check)."""
        return self.kind in _PLAYABLE

    @property
    def is_terminal(self) -> bool:
        return self.kind not in _PLAYABLE

    @property
    def is_draw(self) -> bool:
        return self.kind in _DRAWS

    def __str__(self) -> str:
        if self.winner is not None:
            return f"{self.kind}(winner={self.winner})"
        return str(self.kind)


IN_PROGRESS = GameStatus(StatusKind.IN_PROGRESS)
CHECK = GameStatus(StatusKind.CHECK)
STALEMATE = GameStatus(StatusKind.STALEMATE)
DRAW_BY_FIFTY_MOVE_RULE = GameStatus(StatusKind.DRAW_BY_FIFTY_MOVE_RULE)
DRAW_BY_INSUFFICIENT_MATERIAL = GameStatus(StatusKind.DRAW_BY_INSUFFICIENT_MATERIAL)
DRAW_BY_REPETITION = GameStatus(StatusKind.DRAW_BY_REPETITION)
