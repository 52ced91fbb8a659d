"""hackscraper package exposing configuration, models and the scraping pipeline."""

from __future__ import annotations

from .config import ScraperConfig  # noqa: F401
from .models import ExtractedRecord, PageSource, RawDocument  # noqa: F401
from .pipeline import run, scrape  # noqa: F401

__all__ = ["ExtractedRecord", "PageSource", "RawDocument", "ScraperConfig", "run", "scrape"]
