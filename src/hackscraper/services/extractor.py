"""Locate story entries in a parsed front page and turn them into records."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, Optional

from bs4 import Tag

from hackscraper.config import ExtractorLayout
from hackscraper.errors import ExtractError, MissingFieldError, MissingHrefError
from hackscraper.models import ExtractedRecord
from hackscraper.services.parser import DocumentTree
from hackscraper.services.selectors import ClassQuery, CssQuery, Query, TagQuery

__all__ = [
    "LOGIN_TITLE",
    "extract",
    "extract_links",
]

logger = logging.getLogger(__name__)

#: The navigation "login" link shares the positional selector with stories.
LOGIN_TITLE = "login"

ITEM_QUERY = ClassQuery("athing")
RANK_QUERY = ClassQuery("rank")
TITLE_LINK_QUERY = ClassQuery("title").descendant("a")
POSITIONAL_QUERY = CssQuery("td:nth-child(3) > span > a")
STORYLINK_QUERY = CssQuery("a.storylink")
ANCHOR_QUERY = TagQuery("a")

_Builder = Callable[[int, Tag], Optional[ExtractedRecord]]


def _record_from_anchor(index: int, anchor: Tag, rank: Optional[str] = None) -> Optional[ExtractedRecord]:
    """Build a record from a title anchor, or ``None`` for the login link."""

    title = anchor.get_text().strip()
    href = anchor.get("href")
    if href is None:
        raise MissingHrefError(index, title)
    if title == LOGIN_TITLE:
        logger.debug("Skipping navigation login link at item #%d", index)
        return None
    if not title:
        raise MissingFieldError(index, "title")
    if not href.strip():
        raise MissingHrefError(index, title)
    return ExtractedRecord(rank=rank, title=title, url=href)


def _build_item(index: int, node: Tag) -> Optional[ExtractedRecord]:
    rank_node = RANK_QUERY.first(node)
    if rank_node is None:
        raise MissingFieldError(index, "rank")
    rank = rank_node.get_text().strip()

    anchor = TITLE_LINK_QUERY.first(node)
    if anchor is None:
        raise MissingFieldError(index, "title")
    return _record_from_anchor(index, anchor, rank)


def _build_anchor(index: int, node: Tag) -> Optional[ExtractedRecord]:
    return _record_from_anchor(index, node)


def _item_candidates(tree: DocumentTree) -> Iterator[Tag]:
    return tree.find(ITEM_QUERY)


def _positional_candidates(tree: DocumentTree) -> Iterator[Tag]:
    anchors = list(tree.find(POSITIONAL_QUERY))
    if not anchors:
        logger.info("No positional matches on %s, falling back to %r", tree.url, STORYLINK_QUERY)
        return tree.find(STORYLINK_QUERY)
    return iter(anchors)


def _storylink_candidates(tree: DocumentTree) -> Iterator[Tag]:
    return tree.find(STORYLINK_QUERY)


_LAYOUTS: Dict[ExtractorLayout, tuple[Callable[[DocumentTree], Iterator[Tag]], _Builder]] = {
    ExtractorLayout.ITEM: (_item_candidates, _build_item),
    ExtractorLayout.POSITIONAL: (_positional_candidates, _build_anchor),
    ExtractorLayout.STORYLINK: (_storylink_candidates, _build_anchor),
}


def extract(
    tree: DocumentTree,
    *,
    layout: ExtractorLayout | str = ExtractorLayout.ITEM,
    strict: bool = True,
) -> Iterator[ExtractedRecord]:
    """Yield one :class:`ExtractedRecord` per story in document order.

    With ``strict`` (the default) the first candidate missing a required field
    raises :class:`~hackscraper.errors.ExtractError`. Otherwise the candidate
    is logged and skipped. The navigation login link is always dropped.
    """

    candidates, build = _LAYOUTS[ExtractorLayout(layout)]
    for index, node in enumerate(candidates(tree)):
        try:
            record = build(index, node)
        except ExtractError as exc:
            if strict:
                raise
            logger.warning("Skipping story: %s", exc)
            continue
        if record is not None:
            yield record


def extract_links(tree: DocumentTree, query: Query = ANCHOR_QUERY) -> Iterator[str]:
    """Yield the ``href`` of every anchor in document order."""

    for anchor in tree.find(query):
        href = anchor.get("href")
        if href is not None:
            yield href
