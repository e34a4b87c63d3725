"""Parsing of the prefixed-line diff format.

Each line looks like ``+12 text``, ``-12 text`` or `` 12 text``: a category marker,
a line-number token made of padding and digits (possibly empty), one separating
space, then the content. Anything else (hunk headers, ellipsis rows, blank lines)
is not a diff line and is passed through as raw text.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

from diffrender.constant import TAB_ESCAPE, TAB_REPLACEMENT

_DIFF_LINE_RE = re.compile(r"([+\-\s])(\s*\d*)\s([^\r\n\u2028\u2029]*)", re.ASCII)


class LineCategory(str, Enum):
    """Category of a parsed diff line."""

    CONTEXT = "context"
    REMOVED = "removed"
    ADDED = "added"

    @property
    def sign(self) -> str:
        return _SIGNS[self]


_SIGNS = {
    LineCategory.CONTEXT: " ",
    LineCategory.REMOVED: "-",
    LineCategory.ADDED: "+",
}


class DiffLine(NamedTuple):
    """One parsed diff line.

    ``line_number`` is the raw token between the marker and the separating space,
    kept verbatim (including any padding) and never interpreted as an integer.
    """

    category: LineCategory
    line_number: str
    content: str


def parse_diff_line(line: str) -> DiffLine | None:
    """Parse a single line, returning ``None`` when it is not a diff line."""
    match = _DIFF_LINE_RE.fullmatch(line)
    if match is None:
        return None
    marker, line_number, content = match.groups()
    if marker == "+":
        category = LineCategory.ADDED
    elif marker == "-":
        category = LineCategory.REMOVED
    else:
        category = LineCategory.CONTEXT
    return DiffLine(category, line_number, content)


def replace_tabs(text: str) -> str:
    """Replace the literal ``\\t`` escape sequence with spaces.

    Only the two-character escape is replaced; real tab characters are kept.
    """
    return text.replace(TAB_ESCAPE, TAB_REPLACEMENT)
