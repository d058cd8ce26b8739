"""Board composition analysis for Lexichain."""

from .models import DetailedBoardAnalysis
from .composition import (
    analyze_board_composition,
    create_board_analysis_for_benchmarks,
    favorable_connection_ratio,
    normalize_board,
)
from .letters import LETTER_VALUES, VOWELS, COMMON_LETTERS

__all__ = [
    "DetailedBoardAnalysis",
    "analyze_board_composition",
    "create_board_analysis_for_benchmarks",
    "favorable_connection_ratio",
    "normalize_board",
    "LETTER_VALUES",
    "VOWELS",
    "COMMON_LETTERS",
]
