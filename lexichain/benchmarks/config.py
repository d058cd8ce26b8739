"""
Calibration for the benchmark calculator.

Every constant the benchmark formulas use lives here, so a recalibration
is a YAML edit rather than a code change. Defaults reproduce the
production calibration for the quadratic word-scoring system.
"""

import logging
from pathlib import Path
from typing import Any, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


logger = logging.getLogger(__name__)


class _CalibrationModel(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)


class Bounds(_CalibrationModel):
    """Inclusive [low, high] range a modifier is clamped into."""
    low: float
    high: float

    @model_validator(mode='after')
    def _check_order(self) -> "Bounds":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self

    def clamp(self, value: float) -> float:
        return min(self.high, max(self.low, value))


class TierBases(_CalibrationModel):
    """Base score for each tier on a small grid with a neutral board."""
    bronze: float = Field(default=1000, gt=0)
    silver: float = Field(default=2400, gt=0)
    gold: float = Field(default=4500, gt=0)
    platinum: float = Field(default=8000, gt=0)

    @model_validator(mode='after')
    def _check_increasing(self) -> "TierBases":
        values = self.as_tuple()
        if any(lo >= hi for lo, hi in zip(values, values[1:])):
            raise ValueError(f"tier bases must be strictly increasing, got {values}")
        return self

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.bronze, self.silver, self.gold, self.platinum)


class RichnessCalibration(_CalibrationModel):
    """Linear richness scale: base + slope * (ratio - 1), clamped."""
    base: float = 0.8
    slope: float = Field(default=0.2, ge=0)
    bounds: Bounds = Bounds(low=0.7, high=1.5)


class GridScaleStep(_CalibrationModel):
    max_min_words: int = Field(..., ge=1)
    scale: float = Field(..., gt=0)


class GridScaleCalibration(_CalibrationModel):
    """
    Grid-size multipliers keyed on the minimum expected word count.

    The first step whose ``max_min_words`` is at least the board's minimum
    expected word count wins; larger boards get ``fallback``.
    """
    steps: Tuple[GridScaleStep, ...] = (
        GridScaleStep(max_min_words=12, scale=1.0),
        GridScaleStep(max_min_words=20, scale=1.4),
    )
    fallback: float = Field(default=2.0, gt=0)

    @model_validator(mode='after')
    def _check_steps(self) -> "GridScaleCalibration":
        limits = [step.max_min_words for step in self.steps]
        if any(lo >= hi for lo, hi in zip(limits, limits[1:])):
            raise ValueError(f"grid scale steps must have increasing max_min_words, got {limits}")
        scales = [step.scale for step in self.steps] + [self.fallback]
        if any(lo > hi for lo, hi in zip(scales, scales[1:])):
            raise ValueError(f"grid scales must not decrease with grid size, got {scales}")
        return self

    def scale_for(self, min_expected_word_count: int) -> float:
        for step in self.steps:
            if min_expected_word_count <= step.max_min_words:
                return step.scale
        return self.fallback


class RatingCalibration(_CalibrationModel):
    """Thresholds for the Easy/Medium/Hard label."""
    # Standard 4x4 grid: rated Medium once it has a handful of words
    standard_min_words: int = 12
    standard_medium_floor: int = 10
    easy_ratio: float = 2.0
    medium_ratio: float = 1.2
    complexity_easy: float = 1.2
    complexity_medium: float = 0.95

    @model_validator(mode='after')
    def _check_order(self) -> "RatingCalibration":
        if self.medium_ratio > self.easy_ratio:
            raise ValueError("medium_ratio must not exceed easy_ratio")
        if self.complexity_medium > self.complexity_easy:
            raise ValueError("complexity_medium must not exceed complexity_easy")
        return self


class ModifierCalibration(_CalibrationModel):
    """
    Anchors and clamps for the board-specific modifiers.

    Units:
        rarity_anchor: rarity score potential of a typical board
        length_baseline: typical average word length, in letters
        potential_anchor: maximum achievable score of a typical board
    """
    rarity_anchor: float = Field(default=1000, gt=0)
    rarity_bounds: Bounds = Bounds(low=0.7, high=1.5)
    length_baseline: float = Field(default=5.5, gt=0)
    length_bounds: Bounds = Bounds(low=0.8, high=1.3)
    connectivity_bounds: Bounds = Bounds(low=0.75, high=1.4)
    potential_anchor: float = Field(default=8000, gt=0)
    potential_bounds: Bounds = Bounds(low=0.6, high=2.0)


class AnalysisCalibration(_CalibrationModel):
    """Constants for board composition analysis."""
    # Favorable-neighbour ratio of a typical board; maps it to connectivity 1.0
    connectivity_baseline: float = Field(default=0.5, gt=0)
    # Rarity potential is reported as if the board had this many tiles
    reference_tiles: int = Field(default=16, ge=1)
    word_formation_multiplier: float = Field(default=250, gt=0)
    max_avg_word_length: float = Field(default=8.0, gt=0)
    # (grid size, baseline word count) pairs, smallest grid first; YAML gives a mapping
    min_expected_words: Tuple[Tuple[int, int], ...] = ((4, 12), (5, 20), (6, 30))

    @field_validator('min_expected_words', mode='before')
    @classmethod
    def _pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return tuple(sorted(value.items()))
        return value

    def min_expected_for_grid(self, grid_size: int) -> int:
        """Baseline word count for a grid, using the closest smaller known size."""
        if not self.min_expected_words:
            return 1
        known = sorted(self.min_expected_words)
        smaller = [pair for pair in known if pair[0] <= grid_size]
        _, words = smaller[-1] if smaller else known[0]
        return max(1, words)


class BenchmarkCalibration(_CalibrationModel):
    """All tunable constants for benchmark calculation and board analysis."""
    tiers: TierBases = TierBases()
    richness: RichnessCalibration = RichnessCalibration()
    grid_scales: GridScaleCalibration = GridScaleCalibration()
    rating: RatingCalibration = RatingCalibration()
    modifiers: ModifierCalibration = ModifierCalibration()
    analysis: AnalysisCalibration = AnalysisCalibration()


DEFAULT_CALIBRATION = BenchmarkCalibration()


def load_calibration(config_path: str | Path) -> BenchmarkCalibration:
    """Load a calibration from a YAML file. Missing keys keep their defaults."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Calibration file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    calibration = BenchmarkCalibration.model_validate(data)
    logger.debug(f"Loaded calibration from {path}")
    return calibration
