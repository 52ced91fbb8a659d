"""End-to-end scraping run: fetch, parse, extract, then render once."""

from __future__ import annotations

import logging
from typing import List, TextIO

import requests

from hackscraper.config import ScrapeMode, ScraperConfig
from hackscraper.models import ExtractedRecord
from hackscraper.services.extractor import extract, extract_links
from hackscraper.services.fetcher import fetch
from hackscraper.services.parser import DocumentTree, parse
from hackscraper.services.renderer import emit, render, render_links

__all__ = ["load_tree", "run", "scrape"]

logger = logging.getLogger(__name__)


def load_tree(config: ScraperConfig, *, session: requests.Session | None = None) -> DocumentTree:
    """Fetch and parse the configured page."""

    raw = fetch(
        config.source,
        session=session,
        timeout=config.timeout,
        user_agent=config.user_agent,
    )
    return parse(raw)


def scrape(
    config: ScraperConfig, *, session: requests.Session | None = None
) -> List[ExtractedRecord]:
    """Return every story on the configured page, in page order.

    The extractor is drained before returning so that an extraction failure
    surfaces before anything is rendered.
    """

    tree = load_tree(config, session=session)
    records = list(extract(tree, layout=config.layout, strict=config.strict))
    logger.info("Extracted %d stories from %s", len(records), tree.url)
    return records


def run(
    config: ScraperConfig | None = None,
    *,
    session: requests.Session | None = None,
    stream: TextIO | None = None,
) -> str:
    """Perform one complete run and return what was written to ``stream``."""

    config = config or ScraperConfig()

    if config.mode is ScrapeMode.LINKS:
        tree = load_tree(config, session=session)
        urls = list(extract_links(tree))
        logger.info("Found %d links on %s", len(urls), tree.url)
        return emit(render_links(urls), stream)

    records = scrape(config, session=session)
    return render(records, style=config.output, color=config.color, stream=stream)
