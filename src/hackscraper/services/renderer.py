"""Format extracted records for the terminal.

All renderers are pure: they build the complete output string first and
:func:`render` writes it with a single call, so a run either prints every
record or nothing at all.
"""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from prettytable import PrettyTable

from hackscraper.config import OutputStyle
from hackscraper.models import ExtractedRecord

__all__ = ["emit", "render", "render_lines", "render_links", "render_table"]

_RESET = "\033[0m"
_TITLE_STYLE = "\033[1;30;43m"  # bold black on yellow
_LINK_STYLE = "\033[33m"  # yellow


def _style(text: str, code: str, enabled: bool) -> str:
    return f"{code}{text}{_RESET}" if enabled else text


def render_lines(records: Iterable[ExtractedRecord]) -> str:
    """Return one ``| rank | title`` block followed by the URL per record."""

    blocks = []
    for record in records:
        if record.rank is not None:
            heading = f" | {record.rank} | {record.title}"
        else:
            heading = f" | {record.title}"
        blocks.append(f"\n{heading}\n\n{record.url}\n\n")
    return "".join(blocks)


def render_table(records: Iterable[ExtractedRecord], *, color: bool = True) -> str:
    """Return a header-less table with a title row and a link row per record."""

    table = PrettyTable()
    table.field_names = ["story"]
    table.header = False
    table.align = "l"
    count = 0
    for record in records:
        table.add_row([_style(record.title, _TITLE_STYLE, color)])
        table.add_row([_style(record.url, _LINK_STYLE, color)])
        count += 1
    if not count:
        return ""
    return table.get_string() + "\n"


def render_links(urls: Iterable[str]) -> str:
    return "".join(f"{url}\n" for url in urls)


def emit(output: str, stream: TextIO | None = None) -> str:
    """Write the fully built ``output`` in one call and return it."""

    out = stream if stream is not None else sys.stdout
    out.write(output)
    out.flush()
    return output


def render(
    records: Iterable[ExtractedRecord],
    *,
    style: OutputStyle | str = OutputStyle.LINES,
    color: bool = True,
    stream: TextIO | None = None,
) -> str:
    """Render ``records`` in ``style`` and write the result to ``stream``."""

    style = OutputStyle(style)
    if style is OutputStyle.TABLE:
        output = render_table(records, color=color)
    else:
        output = render_lines(records)

    return emit(output, stream)
