"""Tests for the split-view render model.

Covers:
- One row per entry with gaps for added/removed lines
- Per-side 1-based line numbering
- Inline segments for modified lines spell out each side
- first_change_index and DiffSummary counts
- JSON shape
"""

from __future__ import annotations

import pytest

from variant_diff.algorithm.pairing import compose_line_diff
from variant_diff.render import (
    DiffSummary,
    Segment,
    SegmentKind,
    build_split_view,
    inline_segments,
    summarize,
)
from variant_diff.result import LineDiffEntry, LineKind

ENTRIES = [
    LineDiffEntry.equal("a"),
    LineDiffEntry.remove("b"),
    LineDiffEntry.add("c"),
    LineDiffEntry.modify("bar", "baz"),
    LineDiffEntry.equal("d"),
]


class TestAlignment:
    def test_one_row_per_entry(self) -> None:
        view = build_split_view(ENTRIES)
        assert len(view.rows) == len(ENTRIES)
        assert [row.kind for row in view.rows] == [e.kind for e in ENTRIES]

    def test_gaps(self) -> None:
        view = build_split_view(ENTRIES)
        remove_row, add_row = view.rows[1], view.rows[2]
        assert remove_row.left is not None and remove_row.right is None
        assert add_row.left is None and add_row.right is not None

    def test_line_numbers_per_side(self) -> None:
        view = build_split_view(ENTRIES)
        left = [row.left.number if row.left else None for row in view.rows]
        right = [row.right.number if row.right else None for row in view.rows]
        assert left == [1, 2, None, 3, 4]
        assert right == [1, None, 2, 3, 4]

    @pytest.mark.parametrize(
        ("base", "variant"),
        [
            ("foo\nbar\n", "foo\nbaz\nqux\n"),
            ("", "a\nb\n"),
            ("a\nb\nc\n", "c\nb\na\n"),
        ],
    )
    def test_cells_spell_each_side(self, base: str, variant: str) -> None:
        view = build_split_view(compose_line_diff(base, variant))
        left = [row.left.text for row in view.rows if row.left is not None]
        right = [row.right.text for row in view.rows if row.right is not None]
        assert "\n".join(left) == base.rstrip("\n")
        assert "\n".join(right) == variant.rstrip("\n")


class TestSegments:
    def test_whole_line_segments(self) -> None:
        view = build_split_view(ENTRIES)
        assert view.rows[0].left.segments == (Segment("a", SegmentKind.EQUAL),)
        assert view.rows[1].left.segments == (Segment("b", SegmentKind.DELETE),)
        assert view.rows[2].right.segments == (Segment("c", SegmentKind.INSERT),)

    def test_modify_inline_segments(self) -> None:
        row = build_split_view(ENTRIES).rows[3]
        assert row.left.segments == (
            Segment("ba", SegmentKind.EQUAL),
            Segment("r", SegmentKind.DELETE),
        )
        assert row.right.segments == (
            Segment("ba", SegmentKind.EQUAL),
            Segment("z", SegmentKind.INSERT),
        )

    def test_empty_line_has_no_segments(self) -> None:
        view = build_split_view([LineDiffEntry.equal("")])
        assert view.rows[0].left.segments == ()
        assert view.rows[0].left.text == ""

    @pytest.mark.parametrize("cleanup", [True, False])
    def test_inline_segments_rebuild_both_lines(self, cleanup: bool) -> None:
        base = "for (int i = 0; i < n; i++) {"
        variant = "for (long j = 1; j <= n; j += 2) {"
        left, right = inline_segments(base, variant, cleanup=cleanup)
        assert "".join(s.text for s in left) == base
        assert "".join(s.text for s in right) == variant
        assert all(s.kind != SegmentKind.INSERT for s in left)
        assert all(s.kind != SegmentKind.DELETE for s in right)


class TestSummary:
    def test_counts(self) -> None:
        assert summarize(ENTRIES) == DiffSummary(added=1, removed=1, modified=1)

    def test_no_changes(self) -> None:
        summary = summarize([LineDiffEntry.equal("a")])
        assert summary.has_changes is False

    def test_first_change_index(self) -> None:
        assert build_split_view(ENTRIES).first_change_index == 1

    def test_first_change_index_none_when_unchanged(self) -> None:
        view = build_split_view([LineDiffEntry.equal("a"), LineDiffEntry.equal("b")])
        assert view.first_change_index is None

    def test_empty_diff(self) -> None:
        view = build_split_view([])
        assert view.rows == ()
        assert view.first_change_index is None
        assert view.summary == DiffSummary(0, 0, 0)


class TestToDict:
    def test_shape(self) -> None:
        view = build_split_view([LineDiffEntry.remove("x"), LineDiffEntry.equal("y")])
        assert view.to_dict() == {
            "rows": [
                {
                    "type": "remove",
                    "left": {
                        "number": 1,
                        "segments": [{"text": "x", "type": "delete"}],
                    },
                    "right": None,
                },
                {
                    "type": "equal",
                    "left": {"number": 2, "segments": [{"text": "y", "type": "equal"}]},
                    "right": {
                        "number": 1,
                        "segments": [{"text": "y", "type": "equal"}],
                    },
                },
            ],
            "firstChangeIndex": 0,
            "summary": {
                "added": 0,
                "removed": 1,
                "modified": 0,
                "hasChanges": True,
            },
        }

    def test_row_kind_is_line_kind(self) -> None:
        view = build_split_view([LineDiffEntry.add("x")])
        assert view.rows[0].kind is LineKind.ADD
