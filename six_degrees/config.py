"""
Configuration constants for the Six Degrees project.

All paths, settings, and tunable parameters are defined here.
Anything deployment-specific can be overridden from the environment.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of six_degrees/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains the tagged movie dataset)
DATA_DIR = PROJECT_ROOT / "data"

# Actor/movie dataset, one tagged record per line
MOVIE_DATA_PATH = Path(os.environ.get("MOVIE_DATA_PATH", DATA_DIR / "moviedata.txt"))

# Text encoding of the dataset file
MOVIE_DATA_ENCODING = os.environ.get("MOVIE_DATA_ENCODING", "utf-8")

# =============================================================================
# Dataset Format
# =============================================================================

# Line prefixes on ingest, also used as token markers on rendered paths
ACTOR_TAG = "<a>"
MOVIE_TAG = "<t>"

# Characters dropped from actor names before lookup
NAME_STRIP_CHARS = "'\""

# =============================================================================
# Game Configuration
# =============================================================================

# Actor every query is measured against
DEFAULT_SOURCE_ACTOR = os.environ.get("SOURCE_ACTOR", "Bacon, Kevin (I)")

# Interactive loop
QUIT_COMMAND = "quit"
PROMPT = "? "

# =============================================================================
# Web Configuration
# =============================================================================

FLASK_HOST = os.environ.get("FLASK_HOST", "127.0.0.1")
FLASK_PORT = int(os.environ.get("FLASK_PORT", "5000"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "movie_data": MOVIE_DATA_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
