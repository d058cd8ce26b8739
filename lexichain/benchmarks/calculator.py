"""
Benchmark calculation for Lexichain boards.

Turns word-discoverability facts about a board into bronze/silver/gold/platinum
score thresholds and an Easy/Medium/Hard rating. Two strategies:

1. Basic: word count against the baseline for the grid size
2. Enhanced: additionally weighs letter rarity, word length, tile
   connectivity and the board's achievable score

Both are pure functions and never raise on numeric input; counts,
denominators and analysis values are clamped instead.
"""

import logging
import math
from typing import List, Optional, Sequence

from .config import BenchmarkCalibration, DEFAULT_CALIBRATION
from .models import BoardAnalysis, BoardWordStats, Benchmarks, Rating


logger = logging.getLogger(__name__)


def _non_negative(value: float) -> float:
    """Coerce to a finite, non-negative float (NaN and infinities become 0)."""
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    return max(0.0, value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _count(value: float, floor: int) -> int:
    """Round a word count to a whole number no lower than ``floor``."""
    return max(floor, _round_half_up(_non_negative(value)))


def _build_thresholds(bases: Sequence[float], factor: float) -> List[int]:
    """Scale the tier bases and round, keeping every tier positive and above the last."""
    thresholds: List[int] = []
    floor = 1
    for base in bases:
        value = max(floor, _round_half_up(base * factor))
        thresholds.append(value)
        floor = value + 1
    return thresholds


def richness_ratio(word_count: int, min_expected_word_count: int) -> float:
    """Words on the board relative to the baseline for its grid size."""
    return max(1, word_count) / max(1, min_expected_word_count)


def richness_scale(
    word_count: int,
    min_expected_word_count: int,
    calibration: BenchmarkCalibration = DEFAULT_CALIBRATION,
) -> float:
    """Threshold multiplier from word richness; richer boards demand more."""
    richness = calibration.richness
    ratio = richness_ratio(word_count, min_expected_word_count)
    return richness.bounds.clamp(richness.base + richness.slope * (ratio - 1))


def grid_scale(
    min_expected_word_count: int,
    calibration: BenchmarkCalibration = DEFAULT_CALIBRATION,
) -> float:
    """Threshold multiplier for grid size, using the baseline word count as proxy."""
    return calibration.grid_scales.scale_for(max(1, min_expected_word_count))


def _basic_rating(
    word_count: int,
    min_expected_word_count: int,
    calibration: BenchmarkCalibration,
) -> Rating:
    rating = calibration.rating
    if (min_expected_word_count == rating.standard_min_words
            and word_count >= rating.standard_medium_floor):
        return "Medium"
    if word_count >= rating.easy_ratio * min_expected_word_count:
        return "Easy"
    if word_count >= rating.medium_ratio * min_expected_word_count:
        return "Medium"
    return "Hard"


def _complexity_rating(complexity: float, calibration: BenchmarkCalibration) -> Rating:
    rating = calibration.rating
    if complexity >= rating.complexity_easy:
        return "Easy"
    if complexity >= rating.complexity_medium:
        return "Medium"
    return "Hard"


def compute_basic_benchmarks(
    word_count: int,
    min_expected_word_count: int,
    calibration: BenchmarkCalibration = DEFAULT_CALIBRATION,
) -> Benchmarks:
    """
    Compute benchmarks from the word count alone.

    Args:
        word_count: Number of valid words on the board
        min_expected_word_count: Baseline word count for this grid size
        calibration: Constants to use (defaults to production calibration)

    Returns:
        Benchmarks with strictly increasing thresholds
    """
    word_count = _count(word_count, 0)
    min_expected_word_count = _count(min_expected_word_count, 1)

    scale = richness_scale(word_count, min_expected_word_count, calibration)
    size_scale = grid_scale(min_expected_word_count, calibration)
    bronze, silver, gold, platinum = _build_thresholds(
        calibration.tiers.as_tuple(), scale * size_scale
    )
    rating = _basic_rating(word_count, min_expected_word_count, calibration)

    logger.debug(
        f"Basic benchmarks: words={word_count} min_expected={min_expected_word_count} "
        f"richness_scale={scale:.3f} grid_scale={size_scale} rating={rating}"
    )

    return Benchmarks(
        bronze=bronze,
        silver=silver,
        gold=gold,
        platinum=platinum,
        rating=rating,
        word_count=word_count,
    )


def compute_enhanced_benchmarks(
    word_count: int,
    min_expected_word_count: int,
    analysis: BoardAnalysis,
    calibration: BenchmarkCalibration = DEFAULT_CALIBRATION,
) -> Benchmarks:
    """
    Compute benchmarks tuned to the board's composition.

    Each modifier compares the board to a typical one and is clamped, so no
    single pathological statistic can push thresholds to extremes. With
    every modifier at 1.0 and the score potential at its anchor this reduces
    to the base tiers times the grid scale.

    Args:
        word_count: Number of valid words on the board
        min_expected_word_count: Baseline word count for this grid size
        analysis: Composition facts about the board
        calibration: Constants to use (defaults to production calibration)

    Returns:
        Benchmarks with strictly increasing thresholds
    """
    word_count = _count(word_count, 0)
    min_expected_word_count = _count(min_expected_word_count, 1)
    modifiers = calibration.modifiers

    size_scale = grid_scale(min_expected_word_count, calibration)

    rarity_modifier = modifiers.rarity_bounds.clamp(
        _non_negative(analysis.rarity_score_potential) / modifiers.rarity_anchor
    )
    length_modifier = modifiers.length_bounds.clamp(
        _non_negative(analysis.avg_word_length) / modifiers.length_baseline
    )
    connectivity_modifier = modifiers.connectivity_bounds.clamp(
        _non_negative(analysis.connectivity_score)
    )
    board_difficulty_scale = rarity_modifier * length_modifier * connectivity_modifier

    potential_scale = modifiers.potential_bounds.clamp(
        _non_negative(analysis.max_score_potential) / modifiers.potential_anchor
    )

    bronze, silver, gold, platinum = _build_thresholds(
        calibration.tiers.as_tuple(),
        board_difficulty_scale * size_scale * potential_scale,
    )

    complexity = (rarity_modifier + length_modifier + connectivity_modifier) / 3
    rating = _complexity_rating(complexity, calibration)

    logger.debug(
        f"Enhanced benchmarks: words={word_count} rarity={rarity_modifier:.3f} "
        f"length={length_modifier:.3f} connectivity={connectivity_modifier:.3f} "
        f"potential={potential_scale:.3f} grid_scale={size_scale} "
        f"complexity={complexity:.3f} rating={rating}"
    )

    return Benchmarks(
        bronze=bronze,
        silver=silver,
        gold=gold,
        platinum=platinum,
        rating=rating,
        word_count=word_count,
    )


def compute_benchmarks(
    stats: BoardWordStats,
    analysis: Optional[BoardAnalysis] = None,
    calibration: BenchmarkCalibration = DEFAULT_CALIBRATION,
) -> Benchmarks:
    """Use the enhanced strategy when an analysis is available, the basic one otherwise."""
    if analysis is None:
        return compute_basic_benchmarks(
            stats.word_count, stats.min_expected_word_count, calibration
        )
    return compute_enhanced_benchmarks(
        stats.word_count, stats.min_expected_word_count, analysis, calibration
    )
