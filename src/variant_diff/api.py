"""Public API functions for variant-diff.

Thin functional entry points over the engine classes.  Each call creates a
fresh LineDiffComposer, MappingSuggester or VariantComparator, so no state
(including the similarity cache) is shared between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from variant_diff.algorithm import similarity as _similarity
from variant_diff.algorithm.config import (
    DEFAULT_SUGGESTION_THRESHOLD,
    DiffConfig,
    SuggestionConfig,
)
from variant_diff.algorithm.pairing import LineDiffComposer
from variant_diff.comparator import VariantComparator
from variant_diff.render import SplitView
from variant_diff.render import build_split_view as _build_split_view
from variant_diff.result import FileComparison, LineDiffEntry, MappingSuggestion
from variant_diff.suggester import MappingSuggester
from variant_diff.tree.mappings import FileMapping

__all__ = [
    "build_split_view",
    "compare_trees",
    "compute_line_diff",
    "content_similarity",
    "string_similarity",
    "suggest_mappings",
]


def compute_line_diff(
    base: str,
    variant: str,
    config: DiffConfig | None = None,
) -> list[LineDiffEntry]:
    """Return the line diff of ``base`` -> ``variant``.

    Removed lines directly followed by added lines are paired into modify
    entries when their string similarity is strictly above
    ``config.modify_threshold`` (0.2 by default).

    Args:
        base:    Base text.
        variant: Variant text.
        config:  Diff parameters.  Defaults to ``DiffConfig()`` when None.

    Returns:
        Ordered entries.  Joining the base side of equal/remove/modify entries
        with "\\n" gives back ``base`` (minus one trailing newline); likewise
        for the variant side.
    """
    config = config if config is not None else DiffConfig()
    return LineDiffComposer(config.modify_threshold).compose(base, variant)


def string_similarity(a: str, b: str) -> float:
    """Return ``1 - levenshtein(a, b) / max(len(a), len(b))``.

    Returns:
        A float in [0.0, 1.0]; 1.0 for identical non-empty strings, 0.0 when
        either string is empty.
    """
    return _similarity.string_similarity(a, b)


def content_similarity(a: str, b: str) -> int:
    """Return the matched-character percentage of ``a`` and ``b``.

    Returns:
        An int in [0, 100]; 100 only for identical contents, 0 only when the
        two share no character.
    """
    return _similarity.content_similarity(a, b)


def suggest_mappings(
    base_tree: Mapping[str, str],
    variant_tree: Mapping[str, str],
    variant_label: str,
    threshold: int = DEFAULT_SUGGESTION_THRESHOLD,
) -> list[MappingSuggestion]:
    """Suggest renames between two file trees.

    Only paths present in one tree and not the other are candidates.  Pairs
    with ``content_similarity >= threshold`` are returned, ordered by
    similarity descending.

    Args:
        base_tree:     Path -> content of the base variant.
        variant_tree:  Path -> content of the compared variant.
        variant_label: Label recorded on every suggestion.
        threshold:     Minimum similarity percentage.  Defaults to 50.

    Raises:
        ValueError: If ``threshold`` is not an int in [0, 100].
    """
    suggester = MappingSuggester(config=SuggestionConfig(threshold=threshold))
    return suggester.suggest(base_tree, variant_tree, variant_label)


def compare_trees(
    base_tree: Mapping[str, str],
    variants: Sequence[tuple[str, Mapping[str, str] | None]],
    mappings: Iterable[FileMapping] = (),
    config: DiffConfig | None = None,
) -> list[FileComparison]:
    """Compare a base tree with several variant trees, file by file.

    See ``VariantComparator.compare_trees``.
    """
    return VariantComparator(config=config).compare_trees(base_tree, variants, mappings)


def build_split_view(
    entries: Sequence[LineDiffEntry],
    cleanup: bool = True,
) -> SplitView:
    """Build the side-by-side render model for a line diff.

    See ``variant_diff.render.build_split_view``.
    """
    return _build_split_view(entries, cleanup=cleanup)
