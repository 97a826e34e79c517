"""Similarity metrics: line-level edit ratio and file-level matched ratio.

Two metrics coexist on purpose and must not be unified:

- ``string_similarity`` (float in [0, 1]) is a Levenshtein ratio used only to
  decide whether a removed line and an added line are "the same line,
  changed".  Empty strings never match anything, not even each other.
- ``content_similarity`` (int percentage 0..100) counts characters in EQUAL
  runs of a character diff and divides by the *longer* blob's length.  It
  scores whole files for rename suggestions.
"""

from __future__ import annotations

from variant_diff.algorithm.myers import DiffOp, diff_chars

__all__ = ["content_similarity", "levenshtein_distance", "string_similarity"]


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein (edit) distance between two strings.

    Unit cost for insertion, deletion and substitution; transpositions are
    not special.  The DP table is ``(len(b) + 1) x (len(a) + 1)``, kept as
    two rolling rows of width ``len(a) + 1``.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character edits turning ``a`` into ``b``.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    prev_row = list(range(len(a) + 1))
    for i, ch_b in enumerate(b, start=1):
        curr_row = [i] + [0] * len(a)
        for j, ch_a in enumerate(a, start=1):
            if ch_a == ch_b:
                curr_row[j] = prev_row[j - 1]
            else:
                curr_row[j] = min(prev_row[j - 1], curr_row[j - 1], prev_row[j]) + 1
        prev_row = curr_row

    return prev_row[len(a)]


def string_similarity(a: str, b: str) -> float:
    """Normalised edit similarity of two single lines.

    Defined as::

        (max(len(a), len(b)) - levenshtein(a, b)) / max(len(a), len(b))

    which equals ``1 - levenshtein / max_len``.  Written this way the ratio is
    exact for small integers, so ``1/5`` compares equal to ``0.2``.

    Returns:
        Float in [0.0, 1.0].  ``0.0`` when either string is empty, including
        when both are.
    """
    if not a or not b:
        return 0.0
    longer = max(len(a), len(b))
    return (longer - levenshtein_distance(a, b)) / longer


def content_similarity(a: str, b: str) -> int:
    """Percentage of matched characters between two text blobs.

    ``matched`` is the total length of EQUAL runs in a raw (uncleaned)
    character diff.  The score is ``100 * matched / max(len(a), len(b))``
    rounded half up, then kept inside [1, 99] for blobs that differ but share
    something, so that 100 means byte-identical and 0 means nothing shared.

    Returns:
        Integer in [0, 100].  ``""`` vs ``""`` is 100; ``""`` vs non-empty is 0.
    """
    if a == b:
        return 100
    if not a or not b:
        return 0

    matched = sum(len(run) for run in diff_chars(a, b) if run.op == DiffOp.EQUAL)
    if matched == 0:
        return 0

    longest = max(len(a), len(b))
    score = (200 * matched + longest) // (2 * longest)
    return min(max(score, 1), 99)
