"""Exception hierarchy raised by the scraping pipeline."""

from __future__ import annotations

__all__ = [
    "ScraperError",
    "ConfigError",
    "FetchError",
    "TransportError",
    "BadStatusError",
    "ParseError",
    "ExtractError",
    "MissingFieldError",
    "MissingHrefError",
]


class ScraperError(Exception):
    """Base class for every fatal pipeline failure."""


class ConfigError(ScraperError):
    """The scraper configuration could not be loaded or validated."""


class FetchError(ScraperError):
    """The page could not be retrieved."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    """Connection level failure reported by the HTTP client."""

    def __init__(self, url: str, details: str) -> None:
        super().__init__(url, f"Failed to fetch {url}: {details}")
        self.details = details


class BadStatusError(FetchError):
    """The server answered with a non-success status code."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(url, f"Unexpected HTTP status {status_code} from {url}")
        self.status_code = status_code


class ParseError(ScraperError):
    """The HTML document could not be turned into a tree."""


class ExtractError(ScraperError):
    """A structural query that was expected to match found nothing."""

    def __init__(self, index: int, message: str) -> None:
        super().__init__(f"Item #{index}: {message}")
        self.index = index


class MissingFieldError(ExtractError):
    """A required node (rank or title) is missing from an item."""

    def __init__(self, index: int, field: str) -> None:
        super().__init__(index, f"missing {field} node")
        self.field = field


class MissingHrefError(ExtractError):
    """The title anchor of an item carries no ``href`` attribute."""

    def __init__(self, index: int, title: str) -> None:
        super().__init__(index, f"anchor {title!r} has no href attribute")
        self.title = title
