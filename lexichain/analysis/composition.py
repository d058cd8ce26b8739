"""
Board composition analysis.

Derives the facts the enhanced benchmark calculator consumes from the raw
letter grid:
1. Letter distribution, vowel and common-letter ratios
2. Connectivity (how often 8-way neighbours form promising pairs)
3. Rarity and maximum score potential
4. Estimated average word length
5. A 0-100 difficulty score
"""

import logging
from collections import Counter
from typing import Dict, List, Sequence, Tuple

from ..benchmarks.config import BenchmarkCalibration, DEFAULT_CALIBRATION
from ..benchmarks.models import BoardAnalysis
from .letters import COMMON_LETTERS, VOWELS, is_common_pair, letter_value, rarity_weight
from .models import DetailedBoardAnalysis


logger = logging.getLogger(__name__)


DIRECTIONS: List[Tuple[int, int]] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

BASE_WORD_LENGTH = 3.5
COMMON_PAIR_BONUS = 0.5
IDEAL_VOWEL_RATIO = 0.4
IDEAL_COMMON_RATIO = 0.6


def normalize_board(board: Sequence[Sequence[str]]) -> List[List[str]]:
    """Uppercase every tile and check the grid is square."""
    grid = [[tile.upper() for tile in row] for row in board]
    size = len(grid)
    for i, row in enumerate(grid):
        if len(row) != size:
            raise ValueError(
                f"Board must be square: row {i} has {len(row)} tiles, expected {size}"
            )
    return grid


def neighbours(grid: List[List[str]], row: int, col: int) -> List[str]:
    """Tiles adjacent to (row, col), diagonals included."""
    size = len(grid)
    result = []
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < size and 0 <= c < size:
            result.append(grid[r][c])
    return result


def favorable_connection_ratio(grid: List[List[str]]) -> float:
    """
    Share of neighbour pairs that help form words.

    A vowel next to a consonant counts 1, a common bigram adds 0.5 on top,
    so the ratio can exceed 1.0 on very friendly boards.
    """
    total = 0
    favorable = 0.0

    for row, tiles in enumerate(grid):
        for col, tile in enumerate(tiles):
            for other in neighbours(grid, row, col):
                total += 1
                if (tile in VOWELS) != (other in VOWELS):
                    favorable += 1
                if is_common_pair(tile, other):
                    favorable += COMMON_PAIR_BONUS

    return favorable / total if total else 0.0


def mean_rarity_weight(letter_counts: Dict[str, int], total_letters: int) -> float:
    """Average rarity weight per tile."""
    if not total_letters:
        return 0.0
    return sum(
        count / total_letters * rarity_weight(letter)
        for letter, count in letter_counts.items()
    )


def estimate_average_word_length(
    grid_size: int,
    unique_letters: int,
    calibration: BenchmarkCalibration = DEFAULT_CALIBRATION,
) -> float:
    """More distinct letters and bigger grids support longer words."""
    total = grid_size * grid_size
    if not total:
        return 0.0
    uniqueness_bonus = unique_letters / total * 2
    size_bonus = (grid_size - 4) * 0.3 if grid_size > 4 else 0.0
    return min(BASE_WORD_LENGTH + uniqueness_bonus + size_bonus,
               calibration.analysis.max_avg_word_length)


def estimate_max_score_potential(
    grid_size: int,
    letter_counts: Dict[str, int],
    calibration: BenchmarkCalibration = DEFAULT_CALIBRATION,
) -> int:
    """Letter values times a word-formation multiplier, scaled up for bigger grids."""
    multiplier = calibration.analysis.word_formation_multiplier
    potential = sum(
        count * letter_value(letter) * multiplier
        for letter, count in letter_counts.items()
    )

    if grid_size <= 4:
        grid_multiplier = 1.0
    elif grid_size <= 6:
        grid_multiplier = 1.5
    else:
        grid_multiplier = 2.0

    return round(potential * grid_multiplier)


def difficulty_score(
    vowel_ratio: float,
    common_letter_ratio: float,
    unique_letters: int,
    total_letters: int,
    connectivity_percent: float,
    mean_rarity: float,
) -> float:
    """Composite difficulty from 0 (easy) to 100 (hard)."""
    if not total_letters:
        return 0.0
    vowel_penalty = abs(vowel_ratio - IDEAL_VOWEL_RATIO) * 100
    common_penalty = abs(common_letter_ratio - IDEAL_COMMON_RATIO) * 50
    diversity_bonus = unique_letters / total_letters * 100
    connectivity_penalty = 100 - connectivity_percent
    rarity_penalty = mean_rarity / 10

    total = vowel_penalty + common_penalty + connectivity_penalty + rarity_penalty - diversity_bonus
    return max(0.0, min(100.0, total))


def analyze_board_composition(
    board: Sequence[Sequence[str]],
    calibration: BenchmarkCalibration = DEFAULT_CALIBRATION,
) -> DetailedBoardAnalysis:
    """
    Analyze the letter composition of a square board.

    Args:
        board: Rows of tiles; a row may be a string or a list of tiles
        calibration: Analysis constants (defaults to production calibration)

    Returns:
        DetailedBoardAnalysis; an empty board yields all zeros

    Raises:
        ValueError: If the board is not square
    """
    grid = normalize_board(board)
    grid_size = len(grid)
    total_letters = grid_size * grid_size

    if not total_letters:
        return DetailedBoardAnalysis()

    letter_counts: Dict[str, int] = dict(Counter(tile for row in grid for tile in row))
    unique_letters = len(letter_counts)

    vowel_count = sum(count for letter, count in letter_counts.items() if letter in VOWELS)
    common_count = sum(count for letter, count in letter_counts.items() if letter in COMMON_LETTERS)
    vowel_ratio = vowel_count / total_letters
    common_letter_ratio = common_count / total_letters

    connection_ratio = favorable_connection_ratio(grid)
    connectivity_score = connection_ratio / calibration.analysis.connectivity_baseline

    mean_rarity = mean_rarity_weight(letter_counts, total_letters)
    rarity_score_potential = mean_rarity * calibration.analysis.reference_tiles

    avg_word_length = estimate_average_word_length(grid_size, unique_letters, calibration)
    max_score_potential = estimate_max_score_potential(grid_size, letter_counts, calibration)

    score = difficulty_score(
        vowel_ratio=vowel_ratio,
        common_letter_ratio=common_letter_ratio,
        unique_letters=unique_letters,
        total_letters=total_letters,
        connectivity_percent=connection_ratio * 100,
        mean_rarity=mean_rarity,
    )

    logger.debug(
        f"Analyzed {grid_size}x{grid_size} board: connectivity={connectivity_score:.3f} "
        f"rarity={rarity_score_potential:.1f} max_potential={max_score_potential} "
        f"difficulty={score:.1f}"
    )

    return DetailedBoardAnalysis(
        grid_size=grid_size,
        total_letters=total_letters,
        unique_letters=unique_letters,
        vowel_ratio=vowel_ratio,
        common_letter_ratio=common_letter_ratio,
        connectivity_score=connectivity_score,
        rarity_score_potential=rarity_score_potential,
        avg_word_length=avg_word_length,
        max_score_potential=max_score_potential,
        letter_distribution=letter_counts,
        difficulty_score=score,
    )


def create_board_analysis_for_benchmarks(analysis: DetailedBoardAnalysis) -> BoardAnalysis:
    """Keep only the fields the benchmark calculator reads."""
    return BoardAnalysis(
        rarity_score_potential=analysis.rarity_score_potential,
        avg_word_length=analysis.avg_word_length,
        connectivity_score=analysis.connectivity_score,
        letter_distribution=dict(analysis.letter_distribution),
        max_score_potential=analysis.max_score_potential,
    )
