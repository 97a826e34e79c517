"""algorithm subpackage: the diff and similarity engine.

Pure functions and small classes with no I/O and no logging:

- ``myers``: shortest-edit-script diff over lines or characters.
- ``similarity``: line-level edit ratio and file-level matched ratio.
- ``pairing``: line diff with remove/add pairs merged into modify entries.
- ``config``: validated, immutable parameters.

Example::

    from variant_diff.algorithm import compose_line_diff, content_similarity

    entries = compose_line_diff("foo\\nbar\\n", "foo\\nbaz\\n")
    score = content_similarity("class A {}", "class B {}")
"""

from __future__ import annotations

from variant_diff.algorithm.config import DiffConfig, SuggestionConfig
from variant_diff.algorithm.myers import (
    DiffOp,
    DiffRun,
    diff_chars,
    diff_lines,
    diff_sequences,
    split_lines,
)
from variant_diff.algorithm.pairing import LineDiffComposer, compose_line_diff
from variant_diff.algorithm.similarity import (
    content_similarity,
    levenshtein_distance,
    string_similarity,
)

__all__ = [
    "DiffConfig",
    "DiffOp",
    "DiffRun",
    "LineDiffComposer",
    "SuggestionConfig",
    "compose_line_diff",
    "content_similarity",
    "diff_chars",
    "diff_lines",
    "diff_sequences",
    "levenshtein_distance",
    "split_lines",
    "string_similarity",
]
