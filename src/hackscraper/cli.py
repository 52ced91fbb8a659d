"""Command line entry point: one scrape of the configured front page."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from hackscraper.config import ScraperConfig
from hackscraper.errors import ScraperError
from hackscraper.pipeline import run


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration, run the pipeline once and return an exit code."""

    parser = argparse.ArgumentParser(description="Print the stories on a news front page")
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Optional path to a JSON configuration file",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        config = ScraperConfig.from_file(args.config)
        logging.info("Scraping %s", config.url)
        run(config)
    except ScraperError as exc:
        logging.error("Scrape aborted: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
