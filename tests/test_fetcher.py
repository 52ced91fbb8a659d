from __future__ import annotations

from types import SimpleNamespace

import pytest
import requests

from conftest import DummyResponse
from hackscraper.errors import BadStatusError, FetchError, TransportError
from hackscraper.models import PageSource
from hackscraper.services import fetcher
from hackscraper.services.fetcher import fetch

URL = "https://news.ycombinator.com/"


def test_fetch_returns_raw_document(make_session) -> None:
    session = make_session({URL: DummyResponse("<html>ok</html>")})

    raw = fetch(PageSource(url=URL), session=session)

    assert raw.url == URL
    assert raw.status_code == 200
    assert raw.html == "<html>ok</html>"
    assert session.calls == [URL]


def test_fetch_accepts_plain_url_string(make_session) -> None:
    session = make_session({URL: DummyResponse("<html></html>")})

    assert fetch(URL, session=session).url == URL


def test_fetch_sends_user_agent_and_timeout() -> None:
    captured = {}

    def fake_get(url, headers, timeout):
        captured.update(url=url, headers=headers, timeout=timeout)
        return DummyResponse("<html></html>")

    fetch(URL, session=SimpleNamespace(get=fake_get), timeout=(1, 2), user_agent="agent/1.0")

    assert captured == {"url": URL, "headers": {"User-Agent": "agent/1.0"}, "timeout": (1, 2)}


@pytest.mark.parametrize("status", [301, 404, 500, 503])
def test_fetch_rejects_non_success_status(make_session, status: int) -> None:
    session = make_session({URL: DummyResponse("nope", status_code=status)})

    with pytest.raises(BadStatusError) as excinfo:
        fetch(URL, session=session)

    assert excinfo.value.status_code == status
    assert excinfo.value.url == URL


def test_fetch_wraps_transport_errors() -> None:
    def fake_get(url, headers, timeout):
        raise requests.ConnectionError("connection refused")

    with pytest.raises(TransportError) as excinfo:
        fetch(URL, session=SimpleNamespace(get=fake_get))

    assert "connection refused" in excinfo.value.details
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_fetch_rejects_malformed_url() -> None:
    def fail_get(*args, **kwargs):
        raise AssertionError("Should not issue a request")

    with pytest.raises(FetchError):
        fetch("not a url", session=SimpleNamespace(get=fail_get))


def test_fetch_closes_session_it_created(monkeypatch) -> None:
    closed = []
    session = SimpleNamespace(
        get=lambda url, headers, timeout: DummyResponse("<html></html>"),
        close=lambda: closed.append(True),
    )
    monkeypatch.setattr(fetcher.requests, "Session", lambda: session)

    fetch(URL)

    assert closed == [True]


def test_fetch_closes_session_after_transport_error(monkeypatch) -> None:
    closed = []

    def fake_get(url, headers, timeout):
        raise requests.Timeout("read timed out")

    session = SimpleNamespace(get=fake_get, close=lambda: closed.append(True))
    monkeypatch.setattr(fetcher.requests, "Session", lambda: session)

    with pytest.raises(TransportError):
        fetch(URL)

    assert closed == [True]
