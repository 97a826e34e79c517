"""MappingSuggester: propose "same file, renamed" pairs between two trees.

Only true renames are considered.  A variant path that also exists in the base
tree is assumed to be correctly paired already, and so is a base path that
also exists in the variant tree.  Every remaining (base, variant) pair is
scored with a ContentScorer and kept when ``similarity >= threshold``.

Architecture:
- Candidates are collected in tree iteration order: base paths (rows) and
  variant paths (columns).
- Scores fill a ``(B, V)`` integer numpy matrix; ``np.argwhere`` walks it in
  row-major order, which is the generation order (base outer, variant inner).
- A stable ``argsort`` on the negated scores orders suggestions by similarity
  descending while equal scores keep generation order.
- No per-file deduplication: one variant file may be suggested for several
  base files and vice versa.  Picking one is left to whoever accepts it.

Cost is ``B * V`` content comparisons, each quadratic in the worst case.  Run
it on explicit request, not on every edit.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

import numpy as np

from variant_diff.algorithm.config import SuggestionConfig
from variant_diff.cache import SimilarityCache
from variant_diff.logging_config import get_logger
from variant_diff.protocols import CharacterScorer
from variant_diff.result import MappingSuggestion

if TYPE_CHECKING:
    from variant_diff.protocols import ContentScorer

__all__ = ["MappingSuggester"]

logger = get_logger(__name__)


class MappingSuggester:
    """Suggests file mappings between a base tree and variant trees.

    Scores are cached per instance, so reusing one suggester across several
    variants scores each distinct (base content, variant content) pair once.

    Example::

        from variant_diff.suggester import MappingSuggester

        suggester = MappingSuggester()
        suggestions = suggester.suggest(
            {"src/Main.java": "class Main {}"},
            {"src/App.java": "class App {}"},
            variant_label="Variant 2",
        )
    """

    def __init__(
        self,
        config: SuggestionConfig | None = None,
        scorer: ContentScorer | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the suggester.

        Args:
            config: Suggestion parameters.  Defaults to ``SuggestionConfig()``
                (threshold 50).
            scorer: A ContentScorer-conformant object.  Defaults to
                ``CharacterScorer()`` (matched-character percentage).
            max_cache_size: Maximum number of content pairs held in the
                per-instance LRU cache.
        """
        self._config = config if config is not None else SuggestionConfig()
        raw_scorer: Any = scorer if scorer is not None else CharacterScorer()
        self._scorer = SimilarityCache(raw_scorer, max_size=max_cache_size)

    @property
    def threshold(self) -> int:
        return self._config.threshold

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def suggest(
        self,
        base_tree: Mapping[str, str],
        variant_tree: Mapping[str, str],
        variant_label: str,
    ) -> list[MappingSuggestion]:
        """Suggest renames from ``base_tree`` paths to ``variant_tree`` paths.

        Args:
            base_tree:     Path -> content of the base variant.
            variant_tree:  Path -> content of the compared variant.
            variant_label: Label recorded on every suggestion.

        Returns:
            Suggestions ordered by similarity descending; ties keep generation
            order (base-file outer loop, variant-file inner loop).
        """
        generated = self._generate(base_tree, variant_tree, variant_label)
        return self._rank(generated)

    def suggest_all(
        self,
        base_tree: Mapping[str, str],
        variant_trees: Iterable[tuple[str, Mapping[str, str]]],
    ) -> list[MappingSuggestion]:
        """Suggest renames for several variants at once.

        Args:
            base_tree:     Path -> content of the base variant.
            variant_trees: ``(label, tree)`` pairs, in variant order.

        Returns:
            All variants' suggestions in one list, ordered by similarity
            descending; ties keep variant order, then generation order.
        """
        generated: list[MappingSuggestion] = []
        for label, tree in variant_trees:
            generated.extend(self._generate(base_tree, tree, label))
        return self._rank(generated)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _generate(
        self,
        base_tree: Mapping[str, str],
        variant_tree: Mapping[str, str],
        variant_label: str,
    ) -> list[MappingSuggestion]:
        base_files = [path for path in base_tree if path not in variant_tree]
        variant_files = [path for path in variant_tree if path not in base_tree]

        if not base_files or not variant_files:
            logger.debug(
                "no rename candidates",
                variant=variant_label,
                base_candidates=len(base_files),
                variant_candidates=len(variant_files),
            )
            return []

        scores = np.zeros((len(base_files), len(variant_files)), dtype=np.int64)
        for i, base_file in enumerate(base_files):
            base_content = base_tree[base_file]
            for j, variant_file in enumerate(variant_files):
                scores[i, j] = self._scorer.score(
                    base_content, variant_tree[variant_file]
                )

        kept = np.argwhere(scores >= self._config.threshold)
        suggestions = [
            MappingSuggestion(
                base_file=base_files[i],
                variant_file=variant_files[j],
                variant_label=variant_label,
                similarity=int(scores[i, j]),
            )
            for i, j in kept.tolist()
        ]

        logger.info(
            "scored rename candidates",
            variant=variant_label,
            pairs=int(scores.size),
            kept=len(suggestions),
            threshold=self._config.threshold,
            cache_hits=self._scorer.hits,
        )
        return suggestions

    @staticmethod
    def _rank(suggestions: list[MappingSuggestion]) -> list[MappingSuggestion]:
        if len(suggestions) < 2:
            return suggestions
        similarities = np.array([s.similarity for s in suggestions], dtype=np.int64)
        order = np.argsort(-similarities, kind="stable")
        return [suggestions[k] for k in order.tolist()]
