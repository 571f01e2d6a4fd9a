"""Read-only consumers of the rules engine: move analysis and evaluation."""

from chesslaw.analysis.evaluator import EvalConfig, Evaluator, piece_square_value
from chesslaw.analysis.models import MoveAnalysis, MoveCategory
from chesslaw.analysis.service import (
    PIECE_VALUES,
    analyze_all_moves,
    analyze_move,
    categorize_move,
    piece_value,
)

__all__ = [
    "EvalConfig",
    "Evaluator",
    "MoveAnalysis",
    "MoveCategory",
    "PIECE_VALUES",
    "analyze_all_moves",
    "analyze_move",
    "categorize_move",
    "piece_square_value",
    "piece_value",
]
