"""Word-level comparison of two single lines."""

from __future__ import annotations

import difflib
import re
from collections.abc import Callable, Sequence
from enum import Enum
from typing import NamedTuple

_TOKEN_RE = re.compile(r"\w+|\s+|[^\w\s]")


class PartKind(str, Enum):
    UNCHANGED = "unchanged"
    REMOVED = "removed"
    ADDED = "added"


class WordDiffPart(NamedTuple):
    """One segment of a word diff.

    Joining the ``UNCHANGED`` and ``REMOVED`` parts gives back the old text,
    joining the ``UNCHANGED`` and ``ADDED`` parts gives back the new text.
    """

    kind: PartKind
    text: str


WordDiffer = Callable[[str, str], Sequence[WordDiffPart]]


def tokenize(text: str) -> list[str]:
    """Split text into words, whitespace runs and single punctuation characters.

    Example: ``"foo(a,  b)"`` -> ``["foo", "(", "a", ",", "  ", "b", ")"]``
    """
    return _TOKEN_RE.findall(text)


def diff_words(old: str, new: str) -> list[WordDiffPart]:
    """Compare two lines token by token.

    Replaced spans yield the removed part before the added part, and adjacent
    parts of the same kind are merged.
    """
    old_tokens = tokenize(old)
    new_tokens = tokenize(new)
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)

    parts: list[WordDiffPart] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append(parts, PartKind.UNCHANGED, "".join(old_tokens[i1:i2]))
            continue
        if tag in ("replace", "delete"):
            _append(parts, PartKind.REMOVED, "".join(old_tokens[i1:i2]))
        if tag in ("replace", "insert"):
            _append(parts, PartKind.ADDED, "".join(new_tokens[j1:j2]))
    return parts


def _append(parts: list[WordDiffPart], kind: PartKind, text: str) -> None:
    if not text:
        return
    if parts and parts[-1].kind is kind:
        parts[-1] = WordDiffPart(kind, parts[-1].text + text)
    else:
        parts.append(WordDiffPart(kind, text))
