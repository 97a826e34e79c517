"""LineDiffComposer: line diff with removed/added lines paired into Modify.

Pipeline:

1. ``diff_lines`` produces EQUAL / DELETE / INSERT runs over whole lines.
2. Runs expand into one entry per line (EQUAL -> equal, DELETE -> remove,
   INSERT -> add), order preserved.
3. A single left-to-right scan looks for a block of removes immediately
   followed by a block of adds and pairs them greedily:

   - each remove, in order, takes the unused add with the highest
     ``string_similarity``, if that similarity is strictly above the
     threshold (the first add wins ties);
   - a pair becomes one modify entry at the remove's position;
   - adds nobody took follow the block in their original order.

The pairing is greedy, not an optimal assignment: an earlier remove may take
the add a later remove matches better.  That order dependence is part of the
observable output.
"""

from __future__ import annotations

from variant_diff.algorithm.config import DEFAULT_MODIFY_THRESHOLD
from variant_diff.algorithm.myers import DiffOp, diff_lines
from variant_diff.algorithm.similarity import string_similarity
from variant_diff.result import LineDiffEntry, LineKind

__all__ = ["LineDiffComposer", "compose_line_diff"]


class LineDiffComposer:
    """Builds the structured line diff between a base and a variant text.

    Example::

        from variant_diff.algorithm.pairing import LineDiffComposer

        composer = LineDiffComposer()
        entries = composer.compose("foo\\nbar\\n", "foo\\nbaz\\n")
        # [equal("foo"), modify("bar" -> "baz")]
    """

    def __init__(self, threshold: float = DEFAULT_MODIFY_THRESHOLD) -> None:
        """
        Args:
            threshold: Similarity a remove/add pair must strictly exceed to
                be merged into a modify entry.
        """
        self._threshold = threshold

    def compose(self, base: str, variant: str) -> list[LineDiffEntry]:
        """Return the ordered entries for ``base`` -> ``variant``.

        Empty vs empty gives no entries; empty vs non-empty gives only adds
        (or only removes).
        """
        return self._pair_blocks(self._expand(base, variant))

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    @staticmethod
    def _expand(base: str, variant: str) -> list[LineDiffEntry]:
        entries: list[LineDiffEntry] = []
        for run in diff_lines(base, variant):
            if run.op == DiffOp.EQUAL:
                entries.extend(LineDiffEntry.equal(line) for line in run.items)
            elif run.op == DiffOp.DELETE:
                entries.extend(LineDiffEntry.remove(line) for line in run.items)
            else:
                entries.extend(LineDiffEntry.add(line) for line in run.items)
        return entries

    def _pair_blocks(self, entries: list[LineDiffEntry]) -> list[LineDiffEntry]:
        processed: list[LineDiffEntry] = []
        i = 0
        n = len(entries)

        while i < n:
            if entries[i].kind != LineKind.REMOVE:
                processed.append(entries[i])
                i += 1
                continue

            j = i
            while j < n and entries[j].kind == LineKind.REMOVE:
                j += 1
            removes = entries[i:j]

            k = j
            while k < n and entries[k].kind == LineKind.ADD:
                k += 1
            adds = entries[j:k]

            if adds:
                processed.extend(self._pair(removes, adds))
            else:
                processed.extend(removes)
            i = k

        return processed

    def _pair(
        self, removes: list[LineDiffEntry], adds: list[LineDiffEntry]
    ) -> list[LineDiffEntry]:
        out: list[LineDiffEntry] = []
        used: set[int] = set()

        for removed in removes:
            best_idx = -1
            best_sim = 0.0
            for idx, added in enumerate(adds):
                if idx in used:
                    continue
                sim = string_similarity(removed.base or "", added.variant or "")
                if sim > self._threshold and (best_idx == -1 or sim > best_sim):
                    best_idx = idx
                    best_sim = sim

            if best_idx == -1:
                out.append(removed)
                continue
            used.add(best_idx)
            out.append(
                LineDiffEntry.modify(removed.base or "", adds[best_idx].variant or "")
            )

        out.extend(added for idx, added in enumerate(adds) if idx not in used)
        return out


def compose_line_diff(
    base: str, variant: str, threshold: float = DEFAULT_MODIFY_THRESHOLD
) -> list[LineDiffEntry]:
    """Functional shortcut for ``LineDiffComposer(threshold).compose(...)``."""
    return LineDiffComposer(threshold).compose(base, variant)
