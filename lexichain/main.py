"""
Command-line entry point for computing Lexichain board benchmarks.

Usage:
    python -m lexichain.main board.yaml
    python -m lexichain.main board.yaml --calibration calibration.yaml --score 3200
    python -m lexichain.main board.yaml --output results/board.json --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .analysis import analyze_board_composition, create_board_analysis_for_benchmarks
from .benchmarks import (
    BenchmarkCalibration,
    BoardWordStats,
    DEFAULT_CALIBRATION,
    compute_benchmarks,
    load_calibration,
    tier_progress,
)


logger = logging.getLogger(__name__)


class BoardConfig(BaseModel):
    """A board description read from YAML."""
    model_config = ConfigDict(extra='forbid')

    word_count: int = Field(..., ge=0)
    min_expected_word_count: Optional[int] = Field(None, ge=1)
    grid: Optional[List[str]] = None


def load_board(board_path: str) -> BoardConfig:
    """Load a board description from a YAML file."""
    path = Path(board_path)

    if not path.exists():
        raise FileNotFoundError(f"Board file not found: {board_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return BoardConfig.model_validate(data)


def evaluate_board(
    board: BoardConfig,
    calibration: BenchmarkCalibration = DEFAULT_CALIBRATION,
    score: Optional[int] = None,
) -> dict:
    """Compute benchmarks for a board description, plus a grade when a score is given."""
    analysis = None
    if board.grid:
        detailed = analyze_board_composition(board.grid, calibration)
        analysis = create_board_analysis_for_benchmarks(detailed)
        logger.info(
            f"Analyzed {detailed.grid_size}x{detailed.grid_size} grid "
            f"(difficulty score {detailed.difficulty_score:.1f})"
        )

    min_expected = board.min_expected_word_count
    if min_expected is None:
        grid_size = len(board.grid) if board.grid else 4
        min_expected = calibration.analysis.min_expected_for_grid(grid_size)
        logger.info(f"Using baseline of {min_expected} words for a {grid_size}x{grid_size} grid")

    stats = BoardWordStats(word_count=board.word_count, min_expected_word_count=min_expected)
    benchmarks = compute_benchmarks(stats, analysis, calibration)

    result = {
        "strategy": "enhanced" if analysis is not None else "basic",
        "benchmarks": benchmarks.model_dump(),
    }
    if score is not None:
        result["achievement"] = tier_progress(score, benchmarks).model_dump()
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute score benchmarks for a Lexichain board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example board.yaml:
  word_count: 18
  min_expected_word_count: 12
  grid:
    - CATS
    - ROPE
    - LIND
    - MEAT
        """
    )
    parser.add_argument(
        "board",
        help="Path to YAML board description"
    )
    parser.add_argument(
        "--calibration", "-c",
        help="Path to YAML calibration overrides"
    )
    parser.add_argument(
        "--score", "-s",
        type=int,
        help="Grade this final score against the benchmarks"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON (default: print to stdout)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        board = load_board(args.board)
    except Exception as e:
        print(f"Error loading board: {e}", file=sys.stderr)
        return 1

    calibration = DEFAULT_CALIBRATION
    if args.calibration:
        try:
            calibration = load_calibration(args.calibration)
        except Exception as e:
            print(f"Error loading calibration: {e}", file=sys.stderr)
            return 1

    try:
        result = evaluate_board(board, calibration, score=args.score)
    except ValueError as e:
        print(f"Error analyzing board: {e}", file=sys.stderr)
        return 1

    output = json.dumps(result, indent=2)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output + "\n")
        logger.info(f"Results saved to: {output_path}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
