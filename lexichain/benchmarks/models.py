"""Data models for board benchmarks."""

from typing import Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


# Type aliases
Rating = Literal["Easy", "Medium", "Hard"]
AchievementLevel = Literal["None", "Bronze", "Silver", "Gold", "Platinum"]

# Hard < Medium < Easy
RATING_RANK: Dict[str, int] = {"Hard": 0, "Medium": 1, "Easy": 2}


class BoardWordStats(BaseModel):
    """Word-count facts about a generated board."""
    word_count: int = 0
    min_expected_word_count: int = 1


class BoardAnalysis(BaseModel):
    """
    Composition facts about a generated board.

    Values are not range-checked here; the calculator clamps them.
    """
    rarity_score_potential: float = 0.0
    avg_word_length: float = 0.0
    connectivity_score: float = 0.0
    letter_distribution: Dict[str, int] = Field(default_factory=dict)  # Informational only
    max_score_potential: float = 0.0


class Benchmarks(BaseModel):
    """Score thresholds and difficulty label for a single board."""
    model_config = ConfigDict(frozen=True)

    bronze: int
    silver: int
    gold: int
    platinum: int
    rating: Rating
    word_count: int

    def thresholds(self) -> Dict[str, int]:
        """Tier name to threshold, lowest tier first."""
        return {
            "Bronze": self.bronze,
            "Silver": self.silver,
            "Gold": self.gold,
            "Platinum": self.platinum,
        }


class TierProgress(BaseModel):
    """Where a score sits within a benchmark table."""
    score: int
    level: AchievementLevel
    next_level: Optional[AchievementLevel] = None
    points_to_next: int = 0
