"""
Test suite for benchmark calculation.

Covers:
- Basic strategy thresholds and ratings (including the standard-grid special case)
- Enhanced strategy modifiers, clamps and ratings
- Ordering, monotonicity and determinism properties
- Defensive handling of malformed input
"""

import random

import pytest
from pydantic import ValidationError

from lexichain.benchmarks import (
    RATING_RANK,
    BoardAnalysis,
    BoardWordStats,
    compute_basic_benchmarks,
    compute_benchmarks,
    compute_enhanced_benchmarks,
    grid_scale,
    richness_ratio,
    richness_scale,
)


def neutral_analysis(**overrides) -> BoardAnalysis:
    """Analysis whose modifiers all come out at exactly 1.0."""
    values = dict(
        rarity_score_potential=1000,
        avg_word_length=5.5,
        connectivity_score=1.0,
        letter_distribution={"A": 2, "B": 1},
        max_score_potential=8000,
    )
    values.update(overrides)
    return BoardAnalysis(**values)


def tiers(benchmarks):
    return (benchmarks.bronze, benchmarks.silver, benchmarks.gold, benchmarks.platinum)


class TestScaleHelpers:
    """Test the intermediate scale computations."""

    def test_richness_ratio(self):
        """Ratio of words to baseline."""
        assert richness_ratio(24, 12) == 2.0

    def test_richness_ratio_clamps_zero_words(self):
        """Zero words still give a well-defined ratio."""
        assert richness_ratio(0, 12) == pytest.approx(1 / 12)

    def test_richness_ratio_clamps_zero_baseline(self):
        """A zero baseline is treated as 1."""
        assert richness_ratio(5, 0) == 5.0

    def test_richness_scale_neutral_at_double_baseline(self):
        """Twice the baseline words gives scale 1.0."""
        assert richness_scale(24, 12) == pytest.approx(1.0)

    def test_richness_scale_floor(self):
        """Sparse boards bottom out at 0.7."""
        assert richness_scale(0, 12) == 0.7

    def test_richness_scale_ceiling(self):
        """Rich boards top out at 1.5."""
        assert richness_scale(1000, 12) == 1.5

    @pytest.mark.parametrize("min_expected,expected", [
        (1, 1.0),
        (12, 1.0),
        (13, 1.4),
        (20, 1.4),
        (21, 2.0),
        (100, 2.0),
    ])
    def test_grid_scale_breakpoints(self, min_expected, expected):
        """Grid scale steps up at 12 and 20 baseline words."""
        assert grid_scale(min_expected) == expected


class TestBasicBenchmarks:
    """Test cases for the word-count strategy."""

    def test_baseline_board(self):
        """A board at the baseline gets 0.8x thresholds."""
        result = compute_basic_benchmarks(12, 12)
        assert tiers(result) == (800, 1920, 3600, 6400)
        assert result.rating == "Medium"
        assert result.word_count == 12

    def test_neutral_richness(self):
        """Double the baseline gives the base tiers exactly."""
        result = compute_basic_benchmarks(24, 12)
        assert tiers(result) == (1000, 2400, 4500, 8000)

    def test_standard_grid_forces_medium(self):
        """The standard 12-word grid is Medium even when the ratio says Easy."""
        result = compute_basic_benchmarks(24, 12)
        assert result.rating == "Medium"

    def test_standard_grid_below_floor_is_hard(self):
        """Fewer than 10 words on the standard grid falls through to the ratio rule."""
        assert compute_basic_benchmarks(9, 12).rating == "Hard"

    def test_zero_words(self):
        """An empty board still gets positive increasing thresholds."""
        result = compute_basic_benchmarks(0, 12)
        assert tiers(result) == (700, 1680, 3150, 5600)
        assert result.rating == "Hard"

    def test_medium_grid_easy(self):
        """A medium grid with double the baseline is Easy and scaled 1.4x."""
        result = compute_basic_benchmarks(40, 20)
        assert tiers(result) == (1400, 3360, 6300, 11200)
        assert result.rating == "Easy"

    def test_medium_rating_from_ratio(self):
        """At least 1.2x the baseline off the standard grid is Medium."""
        assert compute_basic_benchmarks(24, 20).rating == "Medium"
        assert compute_basic_benchmarks(23, 20).rating == "Hard"

    def test_large_grid_scale(self):
        """Large grids double the thresholds."""
        result = compute_basic_benchmarks(60, 30)
        assert tiers(result) == (2000, 4800, 9000, 16000)

    def test_rich_board_ceiling(self):
        """Very rich boards cap at 1.5x."""
        result = compute_basic_benchmarks(1000, 12)
        assert tiers(result) == (1500, 3600, 6750, 12000)

    def test_zero_baseline_is_clamped(self):
        """A zero baseline is treated as 1 instead of dividing by zero."""
        result = compute_basic_benchmarks(5, 0)
        assert tiers(result) == (1500, 3600, 6750, 12000)
        assert result.rating == "Easy"

    def test_negative_word_count_is_clamped(self):
        """Negative word counts behave like zero."""
        result = compute_basic_benchmarks(-5, 12)
        assert tiers(result) == tiers(compute_basic_benchmarks(0, 12))
        assert result.word_count == 0

    @pytest.mark.parametrize("word_count", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_word_count(self, word_count):
        """Non-finite word counts behave like zero."""
        result = compute_basic_benchmarks(word_count, 12)
        assert tiers(result) == (700, 1680, 3150, 5600)
        assert result.rating == "Hard"
        assert result.word_count == 0

    def test_non_finite_baseline(self):
        """A non-finite baseline is treated as 1."""
        result = compute_basic_benchmarks(10, float("inf"))
        assert tiers(result) == tiers(compute_basic_benchmarks(10, 1))
        assert result.rating == "Easy"

    def test_fractional_counts_are_rounded(self):
        """Fractional counts round to the nearest whole word."""
        assert compute_basic_benchmarks(11.6, 12.2) == compute_basic_benchmarks(12, 12)


class TestEnhancedBenchmarks:
    """Test cases for the board-composition strategy."""

    def test_neutral_analysis_matches_basic(self):
        """With neutral modifiers the enhanced table equals the basic one at neutral richness."""
        enhanced = compute_enhanced_benchmarks(24, 12, neutral_analysis())
        basic = compute_basic_benchmarks(24, 12)
        assert tiers(enhanced) == tiers(basic) == (1000, 2400, 4500, 8000)

    def test_neutral_analysis_scales_with_grid(self):
        """Both strategies apply the same grid scale."""
        enhanced = compute_enhanced_benchmarks(40, 20, neutral_analysis())
        basic = compute_basic_benchmarks(40, 20)
        assert tiers(enhanced) == tiers(basic) == (1400, 3360, 6300, 11200)

    def test_neutral_analysis_is_medium(self):
        """Complexity of 1.0 is Medium."""
        assert compute_enhanced_benchmarks(24, 12, neutral_analysis()).rating == "Medium"

    def test_all_modifiers_at_floor(self):
        """An empty analysis clamps every modifier to its floor."""
        result = compute_enhanced_benchmarks(10, 12, BoardAnalysis())
        assert tiers(result) == (252, 605, 1134, 2016)
        assert result.rating == "Hard"

    def test_all_modifiers_at_ceiling(self):
        """Huge values clamp every modifier to its ceiling."""
        analysis = BoardAnalysis(
            rarity_score_potential=1_000_000,
            avg_word_length=100,
            connectivity_score=100,
            max_score_potential=1_000_000,
        )
        result = compute_enhanced_benchmarks(10, 12, analysis)
        assert tiers(result) == (5460, 13104, 24570, 43680)
        assert result.rating == "Easy"

    def test_rare_letters_raise_thresholds(self):
        """A rarer board demands more points."""
        plain = compute_enhanced_benchmarks(20, 12, neutral_analysis())
        rare = compute_enhanced_benchmarks(20, 12, neutral_analysis(rarity_score_potential=1300))
        assert rare.bronze > plain.bronze
        assert rare.platinum > plain.platinum

    def test_potential_anchors_thresholds(self):
        """Half the anchor potential scales thresholds to 0.6x (its floor)."""
        result = compute_enhanced_benchmarks(20, 12, neutral_analysis(max_score_potential=4000))
        assert tiers(result) == (600, 1440, 2700, 4800)

    def test_easy_rating(self):
        """High composite complexity is Easy."""
        analysis = neutral_analysis(
            rarity_score_potential=1400, avg_word_length=7.0, connectivity_score=1.3
        )
        assert compute_enhanced_benchmarks(20, 12, analysis).rating == "Easy"

    def test_hard_rating(self):
        """Low composite complexity is Hard."""
        analysis = neutral_analysis(
            rarity_score_potential=750, avg_word_length=4.5, connectivity_score=0.8
        )
        assert compute_enhanced_benchmarks(20, 12, analysis).rating == "Hard"

    def test_word_count_echoed(self):
        """Word count is carried through unchanged."""
        assert compute_enhanced_benchmarks(17, 12, neutral_analysis()).word_count == 17

    def test_extreme_inputs_stay_bounded(self):
        """Pathological analyses stay within the composite clamp range."""
        analysis = BoardAnalysis(
            rarity_score_potential=1_000_000,
            avg_word_length=0.01,
            connectivity_score=100,
            max_score_potential=8000,
        )
        result = compute_enhanced_benchmarks(20, 12, analysis)
        # 1.5 * 0.8 * 1.4
        assert tiers(result) == (1680, 4032, 7560, 13440)

        low = 0.7 * 0.8 * 0.75 * 0.6
        high = 1.5 * 1.3 * 1.4 * 2.0
        for base, value in zip((1000, 2400, 4500, 8000), tiers(result)):
            assert base * low <= value <= base * high

    def test_non_finite_inputs(self):
        """NaN and infinities are treated as zero."""
        analysis = BoardAnalysis(
            rarity_score_potential=float("nan"),
            avg_word_length=float("inf"),
            connectivity_score=float("-inf"),
            max_score_potential=float("nan"),
        )
        result = compute_enhanced_benchmarks(10, 12, analysis)
        assert tiers(result) == tiers(compute_enhanced_benchmarks(10, 12, BoardAnalysis()))

    def test_non_finite_counts(self):
        """Non-finite word counts and baselines do not raise."""
        result = compute_enhanced_benchmarks(float("nan"), float("inf"), BoardAnalysis())
        assert tiers(result) == (252, 605, 1134, 2016)
        assert result.word_count == 0

    def test_negative_inputs(self):
        """Negative analysis values are treated as zero."""
        analysis = BoardAnalysis(
            rarity_score_potential=-50,
            avg_word_length=-1,
            connectivity_score=-3,
            max_score_potential=-100,
        )
        result = compute_enhanced_benchmarks(10, 12, analysis)
        assert tiers(result) == (252, 605, 1134, 2016)


class TestDispatch:
    """Test strategy selection from word stats."""

    def test_without_analysis_uses_basic(self):
        """No analysis means the word-count strategy."""
        stats = BoardWordStats(word_count=12, min_expected_word_count=12)
        assert compute_benchmarks(stats) == compute_basic_benchmarks(12, 12)

    def test_with_analysis_uses_enhanced(self):
        """An analysis switches to the board-composition strategy."""
        stats = BoardWordStats(word_count=12, min_expected_word_count=12)
        analysis = neutral_analysis(max_score_potential=12000)
        assert compute_benchmarks(stats, analysis) == compute_enhanced_benchmarks(12, 12, analysis)


class TestProperties:
    """Invariants that must hold across the input domain."""

    @pytest.mark.parametrize("min_expected", [1, 6, 12, 16, 20, 30])
    def test_monotonic_in_word_count(self, min_expected):
        """More words never lowers a threshold or makes the rating harder."""
        previous = compute_basic_benchmarks(0, min_expected)
        for word_count in range(1, 120):
            current = compute_basic_benchmarks(word_count, min_expected)
            for before, after in zip(tiers(previous), tiers(current)):
                assert after >= before
            assert RATING_RANK[current.rating] >= RATING_RANK[previous.rating]
            previous = current

    def test_basic_ordering(self):
        """0 < bronze < silver < gold < platinum for the basic strategy."""
        for min_expected in range(-2, 40):
            for word_count in range(0, 100, 3):
                b = compute_basic_benchmarks(word_count, min_expected)
                assert 0 < b.bronze < b.silver < b.gold < b.platinum

    def test_enhanced_ordering(self):
        """0 < bronze < silver < gold < platinum for random analyses."""
        rng = random.Random(42)
        for _ in range(500):
            analysis = BoardAnalysis(
                rarity_score_potential=rng.uniform(-100, 5000),
                avg_word_length=rng.uniform(0, 12),
                connectivity_score=rng.uniform(0, 3),
                max_score_potential=rng.uniform(0, 50000),
            )
            b = compute_enhanced_benchmarks(rng.randint(0, 80), rng.randint(0, 40), analysis)
            assert 0 < b.bronze < b.silver < b.gold < b.platinum

    def test_deterministic(self):
        """Identical inputs give identical output."""
        analysis = neutral_analysis(rarity_score_potential=1234.5, connectivity_score=0.93)
        first = compute_enhanced_benchmarks(31, 20, analysis)
        second = compute_enhanced_benchmarks(31, 20, analysis)
        assert first.model_dump_json() == second.model_dump_json()
        assert compute_basic_benchmarks(31, 20) == compute_basic_benchmarks(31, 20)

    def test_benchmarks_are_immutable(self):
        """Benchmarks cannot be changed after creation."""
        result = compute_basic_benchmarks(12, 12)
        with pytest.raises(ValidationError):
            result.bronze = 1
