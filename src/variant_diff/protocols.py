"""ContentScorer Protocol: the extension point for whole-file scoring.

Any object with a conformant ``score`` method can stand in for the default
content similarity when suggesting file mappings; no inheritance needed.

Example::

    from variant_diff.protocols import ContentScorer

    class LengthScorer:
        def score(self, a: str, b: str) -> int:
            longest = max(len(a), len(b)) or 1
            return 100 * min(len(a), len(b)) // longest

    assert isinstance(LengthScorer(), ContentScorer)  # structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from variant_diff.algorithm.similarity import content_similarity

__all__ = ["CharacterScorer", "ContentScorer"]


@runtime_checkable
class ContentScorer(Protocol):
    """Structural protocol for whole-file similarity scorers.

    ``score`` must be deterministic and return an integer in [0, 100], with
    100 reserved for identical inputs.
    """

    def score(self, a: str, b: str) -> int: ...


class CharacterScorer:
    """Default scorer: matched-character percentage (``content_similarity``)."""

    def score(self, a: str, b: str) -> int:
        return content_similarity(a, b)
