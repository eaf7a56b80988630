#!/usr/bin/env python3
"""
Kevin Bacon CLI - Find how many steps any actor is from Kevin Bacon.

Usage:
    python scripts/play.py
    python scripts/play.py --data data/moviedata.txt
    python scripts/play.py --source "Streep, Meryl" --verbose

Type an actor name at the "? " prompt, exactly as it appears in the
dataset ("Last, First (I)"). Apostrophes and quotes are ignored.
Type "quit" to exit.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from six_degrees.config import (  # noqa: E402 - must be after sys.path modification
    DEFAULT_SOURCE_ACTOR,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    MOVIE_DATA_PATH,
    PROMPT,
    QUIT_COMMAND,
)
from six_degrees.data import load_graph  # noqa: E402
from six_degrees.errors import SixDegreesError  # noqa: E402
from six_degrees.game import BaconGame  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Play the Kevin Bacon game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--data",
        type=Path,
        default=MOVIE_DATA_PATH,
        help=f"Tagged actor/movie dataset (default: {MOVIE_DATA_PATH})",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=DEFAULT_SOURCE_ACTOR,
        help=f"Actor to measure from (default: {DEFAULT_SOURCE_ACTOR})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def run_prompt_loop(game: BaconGame) -> None:
    """Answer queries from stdin until 'quit' or end of input."""
    while True:
        try:
            actor_name = input(PROMPT)
        except EOFError:
            print()
            return

        if actor_name.strip().lower() == QUIT_COMMAND:
            return

        print(game.describe(actor_name))


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    print("Wait for graph and path to be built.")
    try:
        graph = load_graph(args.data)
    except OSError as e:
        print(f"Could not read the file: {args.data} ({e})", file=sys.stderr)
        return 1
    except SixDegreesError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print("Graph has been built successfully.")

    game = BaconGame(graph, source=args.source)
    if not game.has_source:
        print(f"Warning: '{args.source}' is not in the dataset", file=sys.stderr)

    print("Path has been built successfully.")

    try:
        run_prompt_loop(game)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130  # Standard exit code for Ctrl+C

    return 0


if __name__ == "__main__":
    sys.exit(main())
