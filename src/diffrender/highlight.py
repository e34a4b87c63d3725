"""Word-level highlighting of a single-line modification."""

from __future__ import annotations

from typing import NamedTuple

from rich.text import Text

from diffrender.theme import DiffTheme
from diffrender.worddiff import PartKind, WordDiffer, diff_words


class IntraLineDiff(NamedTuple):
    removed_line: Text
    added_line: Text


def render_intra_line(
    old: str,
    new: str,
    *,
    theme: DiffTheme,
    word_diff: WordDiffer = diff_words,
) -> IntraLineDiff:
    """Render a removed and an added line with their changed words inverted.

    The leading whitespace of the first removed part and of the first added part
    is kept out of the inversion, so a pure indentation change is not shown as a
    changed word. This applies once per side for the whole walk; later changed
    parts are inverted in full.

    The plain text of the returned lines is always exactly ``old`` and ``new``.
    """
    removed_line = Text()
    added_line = Text()
    first_removed = True
    first_added = True

    for part in word_diff(old, new):
        if part.kind is PartKind.REMOVED:
            value = part.text
            if first_removed:
                value = _move_leading_whitespace(value, removed_line)
                first_removed = False
            removed_line.append_text(theme.inverse(value))
        elif part.kind is PartKind.ADDED:
            value = part.text
            if first_added:
                value = _move_leading_whitespace(value, added_line)
                first_added = False
            added_line.append_text(theme.inverse(value))
        else:
            removed_line.append(part.text)
            added_line.append(part.text)

    return IntraLineDiff(removed_line, added_line)


def _move_leading_whitespace(value: str, line: Text) -> str:
    """Append the leading whitespace of ``value`` to ``line`` and return the rest."""
    stripped = value.lstrip()
    line.append(value[: len(value) - len(stripped)])
    return stripped
