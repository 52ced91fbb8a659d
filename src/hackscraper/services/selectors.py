"""Structural predicates evaluated against a parsed document.

Each query walks a :class:`bs4.Tag` and yields matching elements in document
order. Queries only depend on the ``Tag`` navigation API, so the extractor
never needs to know which concrete predicate it is running.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional

import soupsieve
from bs4 import Tag

__all__ = ["ClassQuery", "CssQuery", "DescendantQuery", "Query", "TagQuery"]


class Query(ABC):
    """A reusable predicate over the descendants of a node."""

    @abstractmethod
    def select(self, node: Tag) -> Iterator[Tag]:
        """Yield every descendant of ``node`` matching this query."""

    def first(self, node: Tag) -> Optional[Tag]:
        """Return the first match below ``node`` or ``None``."""

        return next(iter(self.select(node)), None)

    def descendant(self, tag: str) -> "DescendantQuery":
        """Return a query for ``tag`` elements nested below matches of ``self``."""

        return DescendantQuery(self, tag)


class ClassQuery(Query):
    """Elements carrying the CSS class ``name``."""

    def __init__(self, name: str) -> None:
        self.name = name

    def select(self, node: Tag) -> Iterator[Tag]:
        yield from node.find_all(class_=self.name)

    def __repr__(self) -> str:
        return f"ClassQuery({self.name!r})"


class TagQuery(Query):
    """Elements with tag name ``name``."""

    def __init__(self, name: str) -> None:
        self.name = name

    def select(self, node: Tag) -> Iterator[Tag]:
        yield from node.find_all(self.name)

    def __repr__(self) -> str:
        return f"TagQuery({self.name!r})"


class DescendantQuery(Query):
    """``tag`` elements found below any element matched by ``ancestor``."""

    def __init__(self, ancestor: Query, tag: str) -> None:
        self.ancestor = ancestor
        self.tag = tag

    def select(self, node: Tag) -> Iterator[Tag]:
        # Nested ancestors would otherwise report the same element twice.
        seen: set[int] = set()
        for parent in self.ancestor.select(node):
            for match in parent.find_all(self.tag):
                if id(match) in seen:
                    continue
                seen.add(id(match))
                yield match

    def __repr__(self) -> str:
        return f"DescendantQuery({self.ancestor!r}, {self.tag!r})"


class CssQuery(Query):
    """Arbitrary CSS selector, including positional predicates.

    The selector is compiled eagerly so that a typo fails at construction time
    with a :class:`ValueError` instead of in the middle of a run.
    """

    def __init__(self, selector: str) -> None:
        self.selector = selector
        try:
            self._compiled = soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as exc:
            raise ValueError(f"Invalid CSS selector {selector!r}: {exc}") from exc

    def select(self, node: Tag) -> Iterator[Tag]:
        yield from self._compiled.iselect(node)

    def __repr__(self) -> str:
        return f"CssQuery({self.selector!r})"
