from __future__ import annotations

import pytest

from diffrender.grouping import (
    AddedBlock,
    ChangeBlock,
    ContextBlock,
    RawBlock,
    RenderMode,
    choose_mode,
    group_lines,
)
from diffrender.parser import DiffLine, parse_diff_line


def _p(line: str) -> DiffLine:
    parsed = parse_diff_line(line)
    assert parsed is not None
    return parsed


def test_single_line_modification_between_context():
    blocks = list(group_lines([" 1 a", "-2 b", "+2 c", " 3 d"]))
    assert blocks == [
        ContextBlock(_p(" 1 a")),
        ChangeBlock((_p("-2 b"),), (_p("+2 c"),)),
        ContextBlock(_p(" 3 d")),
    ]


def test_removed_run_collects_following_added_run():
    blocks = list(group_lines(["-1 a", "-2 b", "+1 c"]))
    assert blocks == [ChangeBlock((_p("-1 a"), _p("-2 b")), (_p("+1 c"),))]


def test_removed_run_without_added_lines():
    blocks = list(group_lines(["-1 a", " 2 b"]))
    assert blocks == [ChangeBlock((_p("-1 a"),), ()), ContextBlock(_p(" 2 b"))]


def test_added_run_without_removed_lines():
    blocks = list(group_lines(["+1 a", "+2 b", "-3 c", "+3 d"]))
    assert blocks == [
        AddedBlock((_p("+1 a"), _p("+2 b"))),
        ChangeBlock((_p("-3 c"),), (_p("+3 d"),)),
    ]


def test_removed_after_added_starts_a_new_block():
    blocks = list(group_lines(["-1 a", "+1 b", "+2 c", "-3 d"]))
    assert blocks == [
        ChangeBlock((_p("-1 a"),), (_p("+1 b"), _p("+2 c"))),
        ChangeBlock((_p("-3 d"),), ()),
    ]


def test_raw_line_breaks_runs():
    blocks = list(group_lines(["-1 a", "...", "+1 b"]))
    assert blocks == [
        ChangeBlock((_p("-1 a"),), ()),
        RawBlock("..."),
        AddedBlock((_p("+1 b"),)),
    ]


def test_every_line_is_consumed_once():
    lines = ["@@ hunk @@", " 1 a", "-2 b", "-3 c", "+2 d", "+3 e", "+4 f", " 5 g", ""]
    count = 0
    for block in group_lines(lines):
        match block:
            case RawBlock() | ContextBlock():
                count += 1
            case AddedBlock(added=added):
                count += len(added)
            case ChangeBlock(removed=removed, added=added):
                count += len(removed) + len(added)
    assert count == len(lines)


def test_empty_input():
    assert list(group_lines([])) == []


@pytest.mark.parametrize(
    ("removed", "added", "mode"),
    [
        (1, 1, RenderMode.INTRA_LINE),
        (1, 0, RenderMode.SYNTAX),
        (2, 1, RenderMode.SYNTAX),
        (1, 2, RenderMode.SYNTAX),
        (2, 2, RenderMode.SYNTAX),
        (3, 3, RenderMode.SYNTAX),
    ],
)
def test_choose_mode_counts_lines_only(removed: int, added: int, mode: RenderMode):
    block = ChangeBlock(
        tuple(_p(f"-{i} same") for i in range(removed)),
        tuple(_p(f"+{i} same") for i in range(added)),
    )
    assert choose_mode(block) is mode
