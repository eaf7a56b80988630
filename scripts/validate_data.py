#!/usr/bin/env python3
"""
Validate the movie dataset and print graph and separation statistics.

Usage:
    python scripts/validate_data.py
    python scripts/validate_data.py --source "Streep, Meryl"
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from six_degrees.config import (  # noqa: E402 - must be after sys.path modification
    DEFAULT_SOURCE_ACTOR,
    LOG_LEVEL,
    MOVIE_DATA_PATH,
    get_missing_data_files,
)
from six_degrees.errors import SixDegreesError  # noqa: E402

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(message)s",
)


def check_data_file_exists(path: Path) -> bool:
    """Check that the dataset exists."""
    print("\n=== Checking Data File ===\n")

    exists = path.exists()
    size_mb = path.stat().st_size / (1024 * 1024) if exists else 0
    status = f"✓ {path.name}: {size_mb:,.1f} MB" if exists else f"✗ {path.name}: NOT FOUND"
    print(status)
    return exists


def load_and_report(path: Path, source: str) -> bool:
    """Build the game and print its statistics."""
    print("\n=== Building Graph ===\n")

    from six_degrees.game import BaconGame

    start_time = time.time()
    try:
        game = BaconGame.from_file(path, source=source)
    except SixDegreesError as e:
        print(f"✗ {e.message}")
        return False
    print(f"\nBuild time: {time.time() - start_time:.1f} seconds")

    print("\n=== Statistics ===\n")
    stats = game.stats()
    histogram = stats.pop("histogram")
    for key, value in stats.items():
        if isinstance(value, float):
            print(f"  {key}: {value:.2f}")
        elif isinstance(value, int):
            print(f"  {key}: {value:,}")
        else:
            print(f"  {key}: {value}")

    print("\n=== Degrees of Separation ===\n")
    for degree, count in enumerate(histogram):
        print(f"  {degree}: {count:,}")

    if game.graph.collisions:
        print("\n=== Merged Names ===\n")
        for existing, spelling in game.graph.collisions[:20]:
            print(f"  '{spelling}' -> '{existing}'")

    return game.has_source


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate the movie dataset")
    parser.add_argument("--data", type=Path, default=MOVIE_DATA_PATH)
    parser.add_argument("--source", type=str, default=DEFAULT_SOURCE_ACTOR)
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    if not check_data_file_exists(args.data):
        if args.data == MOVIE_DATA_PATH:
            print(f"\nMissing data files: {', '.join(get_missing_data_files())}")
        print("\nDataset missing. Set MOVIE_DATA_PATH or pass --data.")
        return 1

    if not load_and_report(args.data, args.source):
        print(f"\n✗ Source actor '{args.source}' not found")
        return 1

    print("\n✓ Dataset OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
