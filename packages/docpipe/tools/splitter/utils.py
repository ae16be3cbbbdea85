"""Page range parsing for :mod:`docpipe.tools.splitter`."""

from __future__ import annotations

import re
from typing import Iterator

from ...core.model import PageIndexSet

_TOKEN = re.compile(r"^(\d+)(?:\s*-\s*(\d+))?$")

# Longer digit runs are past any real page count and too long for int().
_MAX_DIGITS = 9


def _page_numbers(token: str, page_count: int) -> Iterator[int]:
    match = _TOKEN.match(token)
    if match is None:
        return
    first = match.group(1)
    last = match.group(2) if match.group(2) is not None else first
    if len(first) > _MAX_DIGITS:
        return
    start = int(first)
    end = page_count if len(last) > _MAX_DIGITS else min(int(last), page_count)
    # Reversed ranges such as "5-2" are ignored, as are starts past the end.
    if start > end:
        return
    yield from range(start, end + 1)


def parse_page_range(expression: str | None, page_count: int) -> PageIndexSet:
    """Parse a page range expression such as ``"1, 3-5, 8"``.

    Parsing is lenient: malformed tokens, reversed ranges and empty segments
    are skipped, and page numbers outside ``1..page_count`` are dropped.
    The result is always in ascending document order regardless of the
    order in which pages were requested.

    Args:
        expression: Comma separated 1-based page numbers and ``N-M`` ranges.
        page_count: Number of pages in the source document.

    Returns:
        A :class:`PageIndexSet` of zero-based indices. It may be empty; the
        caller decides whether that is an error.
    """

    if not expression or page_count <= 0:
        return PageIndexSet()

    selected: set[int] = set()
    for raw_token in expression.split(","):
        token = raw_token.strip()
        if not token:
            continue
        for number in _page_numbers(token, page_count):
            if number >= 1:
                selected.add(number - 1)

    return PageIndexSet(tuple(sorted(selected)))


def build_output_filename(base_name: str, suffix: str, extension: str = "pdf") -> str:
    """Construct a filename for an operation output."""

    safe_base = base_name.replace(" ", "_") or "document"
    return f"{safe_base}_{suffix}.{extension}"


__all__ = ["parse_page_range", "build_output_filename"]
