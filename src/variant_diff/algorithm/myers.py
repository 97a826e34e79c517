"""Myers shortest-edit-script diff over arbitrary token sequences.

The same differ runs at two granularities:

- **lines**: tokens are whole lines (``split_lines``), used by the line diff
  composer.
- **characters**: tokens are the characters of a string, used by content
  similarity and by inline highlighting of modified lines.

The search is the linear-space "middle snake" bisection from Myers (1986),
with common prefix/suffix trimming and the substring shortcut.  There is no
time budget, so for identical inputs the output is always identical.

Runs are normalised before they are returned: consecutive EQUAL runs are
merged, and every maximal edit region is emitted as one DELETE run followed by
one INSERT run.  Downstream pairing relies on that delete-then-insert order.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from diff_match_patch import diff_match_patch

__all__ = [
    "DiffOp",
    "DiffRun",
    "diff_chars",
    "diff_lines",
    "diff_sequences",
    "split_lines",
]


class DiffOp(IntEnum):
    """Edit operation of a run.

    Values match diff-match-patch's ``DIFF_DELETE`` / ``DIFF_EQUAL`` /
    ``DIFF_INSERT`` constants so character runs can be handed to its cleanup
    routines unchanged.
    """

    DELETE = -1
    EQUAL = 0
    INSERT = 1


@dataclass(frozen=True, slots=True)
class DiffRun:
    """A maximal run of tokens sharing one operation.

    Attributes:
        op:    The edit operation.
        items: The tokens of the run.  A ``str`` for character diffs, a
               ``tuple`` of lines for line diffs.
    """

    op: DiffOp
    items: Sequence[Any]

    def __len__(self) -> int:
        return len(self.items)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``"\\n"`` without a trailing empty artifact.

    ``"a\\nb\\n"`` and ``"a\\nb"`` both give ``["a", "b"]``; ``""`` gives ``[]``.
    Only one trailing empty element is dropped, so ``"a\\n\\n"`` keeps its
    blank last line: ``["a", ""]``.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def diff_sequences(a: Sequence[Any], b: Sequence[Any]) -> list[DiffRun]:
    """Compute a shortest edit script turning ``a`` into ``b``.

    Args:
        a: First token sequence (``str``, ``list`` or ``tuple``).
        b: Second token sequence, of the same kind as ``a``.

    Returns:
        Normalised runs.  EQUAL + DELETE items concatenated give ``a``;
        EQUAL + INSERT items concatenated give ``b``.
    """
    raw = _diff_main(a, 0, len(a), b, 0, len(b))
    return _normalize(raw, joiner=_joiner_for(a))


def diff_lines(a_text: str, b_text: str) -> list[DiffRun]:
    """Line-granularity diff of two text blobs (see ``split_lines``)."""
    return diff_sequences(tuple(split_lines(a_text)), tuple(split_lines(b_text)))


def diff_chars(a: str, b: str, cleanup: bool = False) -> list[DiffRun]:
    """Character-granularity diff of two strings.

    Args:
        a:       First string.
        b:       Second string.
        cleanup: When True, apply diff-match-patch's semantic cleanup, which
                 folds short coincidental EQUAL runs that sit between edits
                 into the surrounding edits.  The result still reconstructs
                 both inputs but is no longer minimal.  Leave False when the
                 runs are used for scoring.

    Returns:
        Runs whose ``items`` are ``str`` slices.
    """
    runs = diff_sequences(a, b)
    if not cleanup or len(runs) < 2:
        return runs

    diffs: list[tuple[int, str]] = [(int(run.op), str(run.items)) for run in runs]
    diff_match_patch().diff_cleanupSemantic(diffs)
    cleaned = [DiffRun(DiffOp(op), text) for op, text in diffs if text]
    return _normalize(cleaned, joiner=_joiner_for(a))


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------


def _joiner_for(seq: Sequence[Any]) -> Any:
    if isinstance(seq, str):
        return "".join
    return lambda parts: tuple(item for part in parts for item in part)


def _normalize(runs: list[DiffRun], joiner: Any) -> list[DiffRun]:
    """Merge adjacent runs; order each edit region as DELETE then INSERT."""
    out: list[DiffRun] = []
    equal_parts: list[Sequence[Any]] = []
    delete_parts: list[Sequence[Any]] = []
    insert_parts: list[Sequence[Any]] = []

    def flush_edits() -> None:
        if delete_parts:
            out.append(DiffRun(DiffOp.DELETE, joiner(delete_parts)))
            delete_parts.clear()
        if insert_parts:
            out.append(DiffRun(DiffOp.INSERT, joiner(insert_parts)))
            insert_parts.clear()

    def flush_equal() -> None:
        if equal_parts:
            out.append(DiffRun(DiffOp.EQUAL, joiner(equal_parts)))
            equal_parts.clear()

    for run in runs:
        if not run.items:
            continue
        if run.op == DiffOp.EQUAL:
            flush_edits()
            equal_parts.append(run.items)
        else:
            flush_equal()
            if run.op == DiffOp.DELETE:
                delete_parts.append(run.items)
            else:
                insert_parts.append(run.items)

    flush_equal()
    flush_edits()
    return out


# ---------------------------------------------------------------------------
# Myers core (offset based, no slicing until runs are emitted)
# ---------------------------------------------------------------------------


def _diff_main(
    a: Sequence[Any], a_off: int, a_len: int, b: Sequence[Any], b_off: int, b_len: int
) -> list[DiffRun]:
    if a_len == 0:
        return [DiffRun(DiffOp.INSERT, b[b_off : b_off + b_len])] if b_len else []
    if b_len == 0:
        return [DiffRun(DiffOp.DELETE, a[a_off : a_off + a_len])]

    prefix = _common_prefix(a, a_off, a_len, b, b_off, b_len)
    if prefix == a_len == b_len:
        return [DiffRun(DiffOp.EQUAL, a[a_off : a_off + a_len])]
    head = a[a_off : a_off + prefix]
    a_off += prefix
    b_off += prefix
    a_len -= prefix
    b_len -= prefix

    suffix = _common_suffix(a, a_off, a_len, b, b_off, b_len)
    tail = a[a_off + a_len - suffix : a_off + a_len]
    a_len -= suffix
    b_len -= suffix

    runs = _diff_compute(a, a_off, a_len, b, b_off, b_len)
    if head:
        runs.insert(0, DiffRun(DiffOp.EQUAL, head))
    if tail:
        runs.append(DiffRun(DiffOp.EQUAL, tail))
    return runs


def _diff_compute(
    a: Sequence[Any], a_off: int, a_len: int, b: Sequence[Any], b_off: int, b_len: int
) -> list[DiffRun]:
    """Diff two sub-sequences that share no common prefix or suffix."""
    if a_len == 0:
        return [DiffRun(DiffOp.INSERT, b[b_off : b_off + b_len])]
    if b_len == 0:
        return [DiffRun(DiffOp.DELETE, a[a_off : a_off + a_len])]

    if a_len > b_len:
        long_seq, long_off, long_len = a, a_off, a_len
        short_seq, short_off, short_len = b, b_off, b_len
        op = DiffOp.DELETE
    else:
        long_seq, long_off, long_len = b, b_off, b_len
        short_seq, short_off, short_len = a, a_off, a_len
        op = DiffOp.INSERT

    # Shorter sequence inside the longer one: the edit script is one-sided.
    at = _find(long_seq, long_off, long_len, short_seq, short_off, short_len)
    if at != -1:
        runs = []
        if at > 0:
            runs.append(DiffRun(op, long_seq[long_off : long_off + at]))
        runs.append(DiffRun(DiffOp.EQUAL, short_seq[short_off : short_off + short_len]))
        if at + short_len < long_len:
            runs.append(
                DiffRun(op, long_seq[long_off + at + short_len : long_off + long_len])
            )
        return runs

    if short_len == 1:
        # A single token absent from the other side.
        return [
            DiffRun(DiffOp.DELETE, a[a_off : a_off + a_len]),
            DiffRun(DiffOp.INSERT, b[b_off : b_off + b_len]),
        ]

    return _diff_bisect(a, a_off, a_len, b, b_off, b_len)


def _diff_bisect(
    a: Sequence[Any], a_off: int, a_len: int, b: Sequence[Any], b_off: int, b_len: int
) -> list[DiffRun]:
    """Find the middle snake and split the problem in two."""
    max_d = (a_len + b_len + 1) // 2
    v_offset = max_d
    v_len = 2 * max_d
    v1 = [-1] * v_len
    v2 = [-1] * v_len
    v1[v_offset + 1] = 0
    v2[v_offset + 1] = 0
    delta = a_len - b_len
    # With an odd delta the forward path detects the overlap, else the reverse.
    front = delta % 2 != 0
    # Diagonals whose paths have left the edit grid are skipped.
    k1start = k1end = k2start = k2end = 0

    for d in range(max_d):
        for k1 in range(-d + k1start, d + 1 - k1end, 2):
            k1_offset = v_offset + k1
            if k1 == -d or (k1 != d and v1[k1_offset - 1] < v1[k1_offset + 1]):
                x1 = v1[k1_offset + 1]
            else:
                x1 = v1[k1_offset - 1] + 1
            y1 = x1 - k1
            while x1 < a_len and y1 < b_len and a[a_off + x1] == b[b_off + y1]:
                x1 += 1
                y1 += 1
            v1[k1_offset] = x1
            if x1 > a_len:
                k1end += 2
            elif y1 > b_len:
                k1start += 2
            elif front:
                k2_offset = v_offset + delta - k1
                if 0 <= k2_offset < v_len and v2[k2_offset] != -1:
                    x2 = a_len - v2[k2_offset]
                    if x1 >= x2:
                        return _bisect_split(a, a_off, a_len, b, b_off, b_len, x1, y1)

        for k2 in range(-d + k2start, d + 1 - k2end, 2):
            k2_offset = v_offset + k2
            if k2 == -d or (k2 != d and v2[k2_offset - 1] < v2[k2_offset + 1]):
                x2 = v2[k2_offset + 1]
            else:
                x2 = v2[k2_offset - 1] + 1
            y2 = x2 - k2
            while (
                x2 < a_len
                and y2 < b_len
                and a[a_off + a_len - x2 - 1] == b[b_off + b_len - y2 - 1]
            ):
                x2 += 1
                y2 += 1
            v2[k2_offset] = x2
            if x2 > a_len:
                k2end += 2
            elif y2 > b_len:
                k2start += 2
            elif not front:
                k1_offset = v_offset + delta - k2
                if 0 <= k1_offset < v_len and v1[k1_offset] != -1:
                    x1 = v1[k1_offset]
                    y1 = v_offset + x1 - k1_offset
                    if x1 >= a_len - x2:
                        return _bisect_split(a, a_off, a_len, b, b_off, b_len, x1, y1)

    # No common token at all.
    return [
        DiffRun(DiffOp.DELETE, a[a_off : a_off + a_len]),
        DiffRun(DiffOp.INSERT, b[b_off : b_off + b_len]),
    ]


def _bisect_split(
    a: Sequence[Any],
    a_off: int,
    a_len: int,
    b: Sequence[Any],
    b_off: int,
    b_len: int,
    x: int,
    y: int,
) -> list[DiffRun]:
    runs = _diff_main(a, a_off, x, b, b_off, y)
    runs.extend(_diff_main(a, a_off + x, a_len - x, b, b_off + y, b_len - y))
    return runs


def _common_prefix(
    a: Sequence[Any], a_off: int, a_len: int, b: Sequence[Any], b_off: int, b_len: int
) -> int:
    n = min(a_len, b_len)
    for i in range(n):
        if a[a_off + i] != b[b_off + i]:
            return i
    return n


def _common_suffix(
    a: Sequence[Any], a_off: int, a_len: int, b: Sequence[Any], b_off: int, b_len: int
) -> int:
    n = min(a_len, b_len)
    for i in range(1, n + 1):
        if a[a_off + a_len - i] != b[b_off + b_len - i]:
            return i - 1
    return n


def _find(
    long_seq: Sequence[Any],
    long_off: int,
    long_len: int,
    short_seq: Sequence[Any],
    short_off: int,
    short_len: int,
) -> int:
    """Offset of ``short`` inside ``long`` (both as windows), or -1."""
    if isinstance(long_seq, str):
        needle = short_seq[short_off : short_off + short_len]
        found = long_seq.find(needle, long_off, long_off + long_len)
        return found - long_off if found != -1 else -1

    for i in range(long_len - short_len + 1):
        for j in range(short_len):
            if long_seq[long_off + i + j] != short_seq[short_off + j]:
                break
        else:
            return i
    return -1
