from __future__ import annotations

from types import SimpleNamespace
from typing import Callable

import pytest

HEADER_ROW = """
<tr id="header">
    <td><a href="https://news.ycombinator.com"><img src="y18.svg"></a></td>
    <td><span class="pagetop"><b class="hnname"><a href="news">Hacker News</a></b></span></td>
    <td style="text-align:right"><span class="pagetop"><a href="login?goto=news">login</a></span></td>
</tr>
"""


def story_row(rank: str | None, title: str, href: str | None) -> str:
    """Return one ``tr.athing`` row shaped like the Hacker News front page."""

    rank_html = f'<span class="rank">{rank}</span>' if rank is not None else ""
    href_attr = f' href="{href}"' if href is not None else ""
    return f"""
<tr class="athing submission">
    <td align="right" valign="top" class="title">{rank_html}</td>
    <td valign="top" class="votelinks"><a id="up" href="vote?how=up"></a></td>
    <td class="title"><span class="titleline"><a{href_attr}>{title}</a><span class="sitebit comhead"> (<a href="from?site=example.com"><span class="sitestr">example.com</span></a>)</span></span></td>
</tr>
<tr><td colspan="2"></td><td class="subtext"><span class="score">10 points</span></td></tr>
"""


def front_page(*rows: str, header: bool = True) -> str:
    body = (HEADER_ROW if header else "") + "".join(rows)
    return f"<html><head><title>Hacker News</title></head><body><table>{body}</table></body></html>"


class DummyResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code


@pytest.fixture
def make_session() -> Callable[..., SimpleNamespace]:
    """Build a fake ``requests.Session`` that serves ``responses`` by URL."""

    def factory(responses: dict[str, DummyResponse]) -> SimpleNamespace:
        calls: list[str] = []

        def fake_get(url, headers=None, timeout=None):
            calls.append(url)
            return responses[url]

        return SimpleNamespace(get=fake_get, close=lambda: None, calls=calls)

    return factory
