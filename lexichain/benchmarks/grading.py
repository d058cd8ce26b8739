"""Grade a final score against a board's benchmarks."""

from .models import AchievementLevel, Benchmarks, TierProgress


def achievement_level(score: int, benchmarks: Benchmarks) -> AchievementLevel:
    """Return the highest tier the score reaches, or "None" below bronze."""
    level: AchievementLevel = "None"
    for name, threshold in benchmarks.thresholds().items():
        if score < threshold:
            break
        level = name
    return level


def tier_progress(score: int, benchmarks: Benchmarks) -> TierProgress:
    """Current tier plus the points still needed for the next one."""
    level = achievement_level(score, benchmarks)
    for name, threshold in benchmarks.thresholds().items():
        if score < threshold:
            return TierProgress(
                score=score,
                level=level,
                next_level=name,
                points_to_next=threshold - score,
            )
    return TierProgress(score=score, level=level)
