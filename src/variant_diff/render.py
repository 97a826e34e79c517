"""Split-view render model for a line diff.

Turns a list of ``LineDiffEntry`` into rows a side-by-side viewer can draw
without further logic: one row per entry, a left (base) cell and a right
(variant) cell, line numbers per side, and character segments marking what
changed inside modified lines.  No toolkit is assumed; ``to_dict()`` gives a
JSON shape for web front-ends.

Row rules:
- equal:  both cells, one EQUAL segment each.
- remove: left cell only (one DELETE segment); the right cell is a gap.
- add:    right cell only (one INSERT segment); the left cell is a gap.
- modify: both cells; segments come from a character diff of the pair with
          semantic cleanup, DELETE pieces on the left, INSERT on the right.

Gaps keep both columns the same height, so scrolling them together stays
aligned.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from variant_diff.algorithm.myers import DiffOp, diff_chars
from variant_diff.result import LineDiffEntry, LineKind

__all__ = [
    "DiffSummary",
    "RenderedLine",
    "Segment",
    "SegmentKind",
    "SplitRow",
    "SplitView",
    "build_split_view",
    "inline_segments",
    "summarize",
]


class SegmentKind(StrEnum):
    EQUAL = auto()
    DELETE = auto()
    INSERT = auto()


@dataclass(frozen=True, slots=True)
class Segment:
    text: str
    kind: SegmentKind

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "type": str(self.kind)}


@dataclass(frozen=True, slots=True)
class RenderedLine:
    """One side of a row: its 1-based line number and highlighted pieces."""

    number: int
    segments: tuple[Segment, ...]

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "segments": [segment.to_dict() for segment in self.segments],
        }


@dataclass(frozen=True, slots=True)
class SplitRow:
    """A row of the split view.  ``None`` marks an alignment gap."""

    kind: LineKind
    left: RenderedLine | None
    right: RenderedLine | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": str(self.kind),
            "left": self.left.to_dict() if self.left is not None else None,
            "right": self.right.to_dict() if self.right is not None else None,
        }


@dataclass(frozen=True, slots=True)
class DiffSummary:
    """Counts of changed entries, as shown in a viewer header (+a -r ~m)."""

    added: int
    removed: int
    modified: int

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.modified)

    def to_dict(self) -> dict[str, Any]:
        return {
            "added": self.added,
            "removed": self.removed,
            "modified": self.modified,
            "hasChanges": self.has_changes,
        }


@dataclass(frozen=True, slots=True)
class SplitView:
    """Render model for a whole file.

    Attributes:
        rows: One row per diff entry, in order.
        first_change_index: Index of the first non-equal row (where a viewer
            scrolls to on open), or None when nothing changed.
        summary: Added/removed/modified counts.
    """

    rows: tuple[SplitRow, ...]
    first_change_index: int | None
    summary: DiffSummary

    def to_dict(self) -> dict[str, Any]:
        return {
            "rows": [row.to_dict() for row in self.rows],
            "firstChangeIndex": self.first_change_index,
            "summary": self.summary.to_dict(),
        }


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def inline_segments(
    base: str, variant: str, cleanup: bool = True
) -> tuple[tuple[Segment, ...], tuple[Segment, ...]]:
    """Character-level highlight of a modified line.

    Returns:
        ``(left, right)``: left holds EQUAL and DELETE pieces (spelling
        ``base``), right holds EQUAL and INSERT pieces (spelling ``variant``).
    """
    left: list[Segment] = []
    right: list[Segment] = []
    for run in diff_chars(base, variant, cleanup=cleanup):
        text = str(run.items)
        if run.op == DiffOp.DELETE:
            left.append(Segment(text, SegmentKind.DELETE))
        elif run.op == DiffOp.INSERT:
            right.append(Segment(text, SegmentKind.INSERT))
        else:
            left.append(Segment(text, SegmentKind.EQUAL))
            right.append(Segment(text, SegmentKind.EQUAL))
    return tuple(left), tuple(right)


def summarize(entries: Sequence[LineDiffEntry]) -> DiffSummary:
    """Count add, remove and modify entries."""
    added = removed = modified = 0
    for entry in entries:
        if entry.kind == LineKind.ADD:
            added += 1
        elif entry.kind == LineKind.REMOVE:
            removed += 1
        elif entry.kind == LineKind.MODIFY:
            modified += 1
    return DiffSummary(added=added, removed=removed, modified=modified)


def build_split_view(
    entries: Sequence[LineDiffEntry], cleanup: bool = True
) -> SplitView:
    """Build the split-view render model for ``entries``.

    Args:
        entries: A line diff, as returned by ``compose_line_diff``.
        cleanup: Apply semantic cleanup to inline segments of modified lines.
    """
    rows: list[SplitRow] = []
    left_no = 0
    right_no = 0
    first_change: int | None = None

    for idx, entry in enumerate(entries):
        left: RenderedLine | None = None
        right: RenderedLine | None = None

        if entry.kind == LineKind.MODIFY:
            left_segments, right_segments = inline_segments(
                entry.base or "", entry.variant or "", cleanup=cleanup
            )
        else:
            left_segments = _whole(entry.base, SegmentKind.DELETE, entry.kind)
            right_segments = _whole(entry.variant, SegmentKind.INSERT, entry.kind)

        if entry.base is not None:
            left_no += 1
            left = RenderedLine(left_no, left_segments)
        if entry.variant is not None:
            right_no += 1
            right = RenderedLine(right_no, right_segments)

        if first_change is None and entry.kind != LineKind.EQUAL:
            first_change = idx
        rows.append(SplitRow(entry.kind, left, right))

    return SplitView(
        rows=tuple(rows),
        first_change_index=first_change,
        summary=summarize(entries),
    )


def _whole(
    text: str | None, changed: SegmentKind, kind: LineKind
) -> tuple[Segment, ...]:
    if not text:
        return ()
    return (Segment(text, SegmentKind.EQUAL if kind == LineKind.EQUAL else changed),)
