"""SimilarityCache: LRU-backed caching proxy for any ContentScorer.

Suggesting mappings for several variants against the same base compares the
same base files over and over, and exam variants often share identical files.
Wrapping the scorer in a cache keyed by the content pair means each distinct
pair is scored once.  LRU eviction is silent when ``max_size`` is exceeded.

Each ``SimilarityCache`` owns its ``LRUCache``; two instances never share
entries.  Caching is a cost detail only: results are identical with or
without it.

Example::

    from variant_diff.cache import SimilarityCache
    from variant_diff.protocols import CharacterScorer

    cache = SimilarityCache(CharacterScorer(), max_size=512)
    cache.score("class A {}", "class B {}")  # computed
    cache.score("class A {}", "class B {}")  # served from memory
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from variant_diff.protocols import ContentScorer

__all__ = ["SimilarityCache"]


class SimilarityCache:
    """LRU-backed caching proxy around a ContentScorer.

    Satisfies the ``ContentScorer`` Protocol structurally.

    Args:
        scorer: Any object with a ``score(a: str, b: str) -> int`` method.
        max_size: Maximum number of content pairs to remember.  Defaults to
            512.  The least-recently-used pair is dropped when exceeded.
    """

    def __init__(self, scorer: ContentScorer, max_size: int = 512) -> None:
        self._scorer: Any = scorer
        self._cache: LRUCache[tuple[str, str], int] = LRUCache(maxsize=max_size)
        self.hits = 0
        self.misses = 0

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def score(self, a: str, b: str) -> int:
        """Return the wrapped scorer's score for ``(a, b)``, cached.

        The key is ordered: ``(a, b)`` and ``(b, a)`` are separate entries,
        since a custom scorer need not be symmetric.
        """
        key = (a, b)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        value = int(self._scorer.score(a, b))
        self._cache[key] = value
        return value
