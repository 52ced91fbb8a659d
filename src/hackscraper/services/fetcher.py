"""Single-request page retrieval."""

from __future__ import annotations

import logging
from typing import Tuple

import requests
from pydantic import ValidationError

from hackscraper.config import DEFAULT_USER_AGENT
from hackscraper.errors import BadStatusError, FetchError, TransportError
from hackscraper.models import PageSource, RawDocument

__all__ = ["DEFAULT_TIMEOUT", "fetch"]

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Tuple[float, float] = (10, 60)


def _coerce_source(source: PageSource | str) -> PageSource:
    if isinstance(source, PageSource):
        return source
    try:
        return PageSource(url=source)
    except ValidationError as exc:
        raise FetchError(str(source), f"Invalid URL {source!r}") from exc


def fetch(
    source: PageSource | str,
    *,
    session: requests.Session | None = None,
    timeout: Tuple[float, float] = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> RawDocument:
    """Issue one GET for ``source`` and return the body of a 2xx response.

    No retries are attempted. Connection failures raise
    :class:`~hackscraper.errors.TransportError`; any status outside the 2xx
    range raises :class:`~hackscraper.errors.BadStatusError`.
    """

    url = str(_coerce_source(source))
    owns_session = session is None
    http = session if session is not None else requests.Session()

    logger.debug("GET %s", url)
    try:
        response = http.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(url, str(exc)) from exc
    finally:
        if owns_session:
            http.close()

    if not 200 <= response.status_code < 300:
        raise BadStatusError(url, response.status_code)

    html = response.text
    logger.info("Fetched %s (status %d, %d characters)", url, response.status_code, len(html))
    return RawDocument(url=url, html=html, status_code=response.status_code)
