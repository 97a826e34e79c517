"""DiffConfig and SuggestionConfig: immutable engine parameters.

Both are frozen dataclasses validated in ``__post_init__``.  Invalid values
raise ``ValueError`` here, at the boundary, so the engine functions that
receive a config never have to.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_MODIFY_THRESHOLD",
    "DEFAULT_SUGGESTION_THRESHOLD",
    "DiffConfig",
    "SuggestionConfig",
]

DEFAULT_MODIFY_THRESHOLD: float = 0.2
DEFAULT_SUGGESTION_THRESHOLD: int = 50


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for line diffs.

    Attributes:
        modify_threshold: A removed/added line pair becomes a Modify entry only
            when its string similarity is strictly greater than this value.
            Must be in [0, 1].  Defaults to 0.2.
        semantic_cleanup: When True, inline character segments of modified
            lines are post-processed for readability.  Scoring never uses the
            cleaned runs.  Defaults to True.
    """

    modify_threshold: float = DEFAULT_MODIFY_THRESHOLD
    semantic_cleanup: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.modify_threshold <= 1.0:
            msg = f"modify_threshold must be in [0, 1], got {self.modify_threshold}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class SuggestionConfig:
    """Immutable configuration for file-rename suggestions.

    Attributes:
        threshold: Minimum content similarity (percentage) for a pair to be
            suggested; the comparison is ``similarity >= threshold``.  Must be
            an integer in [0, 100].  Defaults to 50.
    """

    threshold: int = DEFAULT_SUGGESTION_THRESHOLD

    def __post_init__(self) -> None:
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            msg = f"threshold must be an int, got {type(self.threshold).__name__}"
            raise ValueError(msg)
        if not 0 <= self.threshold <= 100:
            msg = f"threshold must be in [0, 100], got {self.threshold}"
            raise ValueError(msg)
