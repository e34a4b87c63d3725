"""Grouping of parsed diff lines into blocks, and the per-block rendering policy."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from diffrender.parser import DiffLine, LineCategory, parse_diff_line


@dataclass(frozen=True, slots=True)
class RawBlock:
    """A line that is not part of the diff format."""

    text: str


@dataclass(frozen=True, slots=True)
class ContextBlock:
    line: DiffLine


@dataclass(frozen=True, slots=True)
class AddedBlock:
    """Added lines with no removed lines right before them."""

    added: tuple[DiffLine, ...]


@dataclass(frozen=True, slots=True)
class ChangeBlock:
    """A run of removed lines and the run of added lines directly following it.

    ``added`` may be empty when the removed run is followed by anything else.
    """

    removed: tuple[DiffLine, ...]
    added: tuple[DiffLine, ...]


Block = RawBlock | ContextBlock | AddedBlock | ChangeBlock


class RenderMode(str, Enum):
    """How a rendered line is styled.

    Category color, syntax highlighting and change inversion never apply to the
    same span: each line gets exactly one of these modes.
    """

    PLAIN = "plain"
    """Raw text in the context color."""
    SYNTAX = "syntax"
    """Category-colored prefix, syntax-highlighted content."""
    INTRA_LINE = "intra_line"
    """Whole line in the category color with changed words inverted."""


def group_lines(lines: Sequence[str]) -> Iterator[Block]:
    """Partition diff lines into blocks in a single forward pass."""
    parsed = [parse_diff_line(line) for line in lines]
    i = 0
    while i < len(parsed):
        current = parsed[i]
        if current is None:
            yield RawBlock(lines[i])
            i += 1
        elif current.category is LineCategory.CONTEXT:
            yield ContextBlock(current)
            i += 1
        elif current.category is LineCategory.REMOVED:
            removed, i = _collect_run(parsed, i, LineCategory.REMOVED)
            added, i = _collect_run(parsed, i, LineCategory.ADDED)
            yield ChangeBlock(removed, added)
        else:
            added, i = _collect_run(parsed, i, LineCategory.ADDED)
            yield AddedBlock(added)


def _collect_run(
    parsed: Sequence[DiffLine | None], start: int, category: LineCategory
) -> tuple[tuple[DiffLine, ...], int]:
    run: list[DiffLine] = []
    end = start
    while end < len(parsed):
        line = parsed[end]
        if line is None or line.category is not category:
            break
        run.append(line)
        end += 1
    return tuple(run), end


def choose_mode(block: ChangeBlock) -> RenderMode:
    """Pick intra-line highlighting only for a single-line modification.

    The decision looks at run lengths only: a 2:2 block is shown as a block
    replacement even when the lines obviously correspond pairwise.
    """
    if len(block.removed) == 1 and len(block.added) == 1:
        return RenderMode.INTRA_LINE
    return RenderMode.SYNTAX
