"""Turn a :class:`~hackscraper.models.RawDocument` into a queryable tree."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from bs4 import BeautifulSoup, FeatureNotFound, Tag

from hackscraper.errors import ParseError
from hackscraper.models import RawDocument
from hackscraper.services.selectors import Query

__all__ = ["DocumentTree", "parse"]

logger = logging.getLogger(__name__)


class DocumentTree:
    """Read-only wrapper around a parsed HTML document."""

    def __init__(self, root: BeautifulSoup, url: str = "") -> None:
        self._root = root
        self.url = url

    @property
    def root(self) -> Tag:
        return self._root

    def find(self, query: Query) -> Iterator[Tag]:
        """Yield every element matching ``query`` in document order."""

        return query.select(self._root)

    def first(self, query: Query) -> Optional[Tag]:
        return query.first(self._root)


def parse(doc: RawDocument, *, features: str = "lxml") -> DocumentTree:
    """Parse ``doc`` with a permissive HTML parser.

    Malformed markup is repaired by the parser; :class:`ParseError` is only
    raised for an empty body or when the parser backend itself fails.
    """

    if not doc.html.strip():
        raise ParseError(f"Empty document received from {doc.url}")

    try:
        soup = BeautifulSoup(doc.html, features)
    except FeatureNotFound as exc:
        raise ParseError(f"HTML parser {features!r} is not available") from exc
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Could not parse document from {doc.url}: {exc}") from exc

    logger.debug("Parsed %s with %s", doc.url, features)
    return DocumentTree(soup, url=doc.url)
