"""Pipeline stages: fetch, parse, select, extract and render."""

from __future__ import annotations

from .extractor import extract, extract_links  # noqa: F401
from .fetcher import fetch  # noqa: F401
from .parser import DocumentTree, parse  # noqa: F401
from .renderer import render, render_lines, render_links, render_table  # noqa: F401

__all__ = [
    "DocumentTree",
    "extract",
    "extract_links",
    "fetch",
    "parse",
    "render",
    "render_lines",
    "render_links",
    "render_table",
]
