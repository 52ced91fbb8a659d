"""Convenience script for running the front page scraper locally."""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the src directory is on the Python path so the hackscraper package can be imported
SRC_PATH = Path(__file__).resolve().parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from hackscraper.cli import main  # noqa: E402  (import after path setup)


if __name__ == "__main__":
    sys.exit(main())
