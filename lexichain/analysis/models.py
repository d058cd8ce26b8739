"""Data models for board analysis."""

from ..benchmarks.models import BoardAnalysis


class DetailedBoardAnalysis(BoardAnalysis):
    """Board analysis plus the composition statistics it was derived from."""
    grid_size: int = 0
    total_letters: int = 0
    unique_letters: int = 0
    vowel_ratio: float = 0.0
    common_letter_ratio: float = 0.0
    difficulty_score: float = 0.0  # 0-100, higher is harder
