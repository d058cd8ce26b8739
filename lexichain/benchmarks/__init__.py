"""Board difficulty benchmarks for Lexichain."""

from .models import (
    Rating,
    AchievementLevel,
    RATING_RANK,
    BoardWordStats,
    BoardAnalysis,
    Benchmarks,
    TierProgress,
)
from .config import (
    Bounds,
    TierBases,
    BenchmarkCalibration,
    DEFAULT_CALIBRATION,
    load_calibration,
)
from .calculator import (
    compute_basic_benchmarks,
    compute_enhanced_benchmarks,
    compute_benchmarks,
    richness_ratio,
    richness_scale,
    grid_scale,
)
from .grading import achievement_level, tier_progress

__all__ = [
    # Models
    "Rating",
    "AchievementLevel",
    "RATING_RANK",
    "BoardWordStats",
    "BoardAnalysis",
    "Benchmarks",
    "TierProgress",
    # Calibration
    "Bounds",
    "TierBases",
    "BenchmarkCalibration",
    "DEFAULT_CALIBRATION",
    "load_calibration",
    # Calculation
    "compute_basic_benchmarks",
    "compute_enhanced_benchmarks",
    "compute_benchmarks",
    "richness_ratio",
    "richness_scale",
    "grid_scale",
    # Grading
    "achievement_level",
    "tier_progress",
]
