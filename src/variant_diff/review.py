"""Review progress: per-file review marks and the statistics built on them.

A reviewer marks each differing file of a variant as ``correct`` or
``needs-attention``; ``unchecked`` is the absence of a mark.  Marks are keyed
by ``"<exercise>:<path>"`` together with the variant label and the compare
type, so one list of marks can hold several exercises.

Architecture:
- update_review() is a pure upsert/remove over an immutable tuple of marks.
  Setting a mark to UNCHECKED removes it.  A legacy mark stored under the
  bare path (no exercise prefix) is dropped on any update of that file.
- review_stats() counts, per compare type and per variant, how many files
  differ from the base (the review total) and how many of them carry each
  mark.  Repository totals come from VariantComparator.count_differences
  after the variant's file mappings are applied; the problem statement
  counts as one file per variant when it differs.
- Overall totals are sums of the per-variant totals.  Marks for labels that
  are not compared variants still count towards the overall figures.

Storing the marks is the caller's job; nothing here touches the disk.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from variant_diff.comparator import VariantComparator
from variant_diff.tree.mappings import FileMapping, apply_mappings

__all__ = [
    "REPOSITORY_TYPES",
    "CompareType",
    "ExerciseStats",
    "FileReview",
    "ReviewCounts",
    "ReviewStatus",
    "VariantSources",
    "review_key",
    "review_stats",
    "update_review",
]


class ReviewStatus(StrEnum):
    """Review mark of one file in one variant."""

    UNCHECKED = "unchecked"
    CORRECT = "correct"
    NEEDS_ATTENTION = "needs-attention"


class CompareType(StrEnum):
    """What is being compared: the statement or one of the repositories."""

    PROBLEM = "problem"
    TEST = "test"
    SOLUTION = "solution"
    TEMPLATE = "template"


REPOSITORY_TYPES: tuple[CompareType, ...] = (
    CompareType.TEST,
    CompareType.SOLUTION,
    CompareType.TEMPLATE,
)


def review_key(exercise_name: str, file_path: str) -> str:
    """Return the stored key of ``file_path`` within ``exercise_name``."""
    return f"{exercise_name}:{file_path}"


@dataclass(frozen=True, slots=True)
class FileReview:
    """A stored review mark.

    Attributes:
        file_path:     ``review_key(exercise, path)``.
        variant_label: Variant the mark applies to.
        compare_type:  Statement or repository the file belongs to.
        status:        CORRECT or NEEDS_ATTENTION.

    Raises:
        ValueError: If ``status`` is UNCHECKED; unchecked files carry no mark.
    """

    file_path: str
    variant_label: str
    compare_type: CompareType
    status: ReviewStatus

    def __post_init__(self) -> None:
        if self.status == ReviewStatus.UNCHECKED:
            msg = "an unchecked file has no stored review"
            raise ValueError(msg)

    def matches(
        self, file_path: str, variant_label: str, compare_type: CompareType
    ) -> bool:
        return (
            self.file_path == file_path
            and self.variant_label == variant_label
            and self.compare_type == compare_type
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FileReview:
        return cls(
            file_path=data["filePath"],
            variant_label=data["variantLabel"],
            compare_type=CompareType(data["compareType"]),
            status=ReviewStatus(data["status"]),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "filePath": self.file_path,
            "variantLabel": self.variant_label,
            "compareType": str(self.compare_type),
            "status": str(self.status),
        }


def update_review(
    reviews: Iterable[FileReview],
    exercise_name: str,
    file_path: str,
    variant_label: str,
    compare_type: CompareType,
    status: ReviewStatus,
) -> tuple[FileReview, ...]:
    """Return ``reviews`` with the mark for one file set to ``status``.

    An existing mark is replaced in place, a new one is appended, and
    UNCHECKED removes the mark.  The input is never mutated.
    """
    key = review_key(exercise_name, file_path)
    updated: list[FileReview] = []
    replaced = False
    for review in reviews:
        is_legacy = ":" not in review.file_path and review.matches(
            file_path, variant_label, compare_type
        )
        if is_legacy:
            continue
        if review.matches(key, variant_label, compare_type):
            if status != ReviewStatus.UNCHECKED and not replaced:
                updated.append(FileReview(key, variant_label, compare_type, status))
            replaced = True
            continue
        updated.append(review)

    if status != ReviewStatus.UNCHECKED and not replaced:
        updated.append(FileReview(key, variant_label, compare_type, status))
    return tuple(updated)


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class VariantSources:
    """Everything compared for one variant.

    Attributes:
        label:        Variant label.
        markdown:     Problem statement; None reads as "".
        repositories: File tree per repository type.  A missing key or None
                      means the repository is not on disk.
    """

    label: str
    markdown: str | None = None
    repositories: Mapping[CompareType, Mapping[str, str] | None] = field(
        default_factory=dict
    )


@dataclass(frozen=True, slots=True)
class ReviewCounts:
    """Marks against the number of differing files they cover."""

    correct: int = 0
    needs_attention: int = 0
    total: int = 0

    @property
    def unchecked(self) -> int:
        return max(self.total - self.correct - self.needs_attention, 0)

    def to_dict(self) -> dict[str, int]:
        return {
            "correct": self.correct,
            "needsAttention": self.needs_attention,
            "total": self.total,
        }


@dataclass(frozen=True, slots=True)
class ExerciseStats:
    """Review progress of one exercise."""

    exercise_name: str
    variants: tuple[str, ...]
    by_compare_type: Mapping[CompareType, ReviewCounts]
    by_variant: Mapping[str, Mapping[CompareType, ReviewCounts]]
    total_reviewed: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "exerciseName": self.exercise_name,
            "variants": list(self.variants),
            "byCompareType": _counts_dict(self.by_compare_type),
            "byVariant": {
                label: _counts_dict(counts)
                for label, counts in self.by_variant.items()
            },
            "totalReviewed": self.total_reviewed,
        }


def review_stats(
    exercise_name: str,
    base: VariantSources,
    variants: Sequence[VariantSources],
    reviews: Iterable[FileReview] = (),
    mappings: Iterable[FileMapping] = (),
    comparator: VariantComparator | None = None,
) -> ExerciseStats:
    """Aggregate review progress for one exercise.

    Args:
        exercise_name: Only marks keyed under this exercise are counted.
        base:          The base variant.
        variants:      The compared variants, in display order.
        reviews:       Stored marks, possibly for several exercises.
        mappings:      Accepted file mappings, applied per variant label.
        comparator:    Supplies ``count_differences``; a default one is
                       created when omitted.

    Returns:
        Counts per compare type and per variant label.
    """
    comparator = comparator if comparator is not None else VariantComparator()
    mapping_list = list(mappings)
    labels = [v.label for v in variants]

    # [correct, needs_attention, total]
    per_variant: dict[str, dict[CompareType, list[int]]] = {
        label: {ct: [0, 0, 0] for ct in CompareType} for label in labels
    }
    overall: dict[CompareType, list[int]] = {ct: [0, 0, 0] for ct in CompareType}

    for ct in REPOSITORY_TYPES:
        base_tree = base.repositories.get(ct)
        if base_tree is None:
            continue
        for variant in variants:
            tree = variant.repositories.get(ct)
            if tree is None:
                continue
            mapped = apply_mappings(tree, mapping_list, variant.label)
            total = comparator.count_differences(base_tree, mapped)
            per_variant[variant.label][ct][2] = total
            overall[ct][2] += total

    base_markdown = base.markdown or ""
    for variant in variants:
        differs = int((variant.markdown or "") != base_markdown)
        per_variant[variant.label][CompareType.PROBLEM][2] = differs
        overall[CompareType.PROBLEM][2] += differs

    prefix = review_key(exercise_name, "")
    exercise_reviews = [r for r in reviews if r.file_path.startswith(prefix)]
    for review in exercise_reviews:
        slot = 0 if review.status == ReviewStatus.CORRECT else 1
        overall[review.compare_type][slot] += 1
        if review.variant_label in per_variant:
            per_variant[review.variant_label][review.compare_type][slot] += 1

    return ExerciseStats(
        exercise_name=exercise_name,
        variants=(base.label, *labels),
        by_compare_type=_freeze(overall),
        by_variant={label: _freeze(per_variant[label]) for label in labels},
        total_reviewed=len(exercise_reviews),
    )


def _freeze(
    counts: Mapping[CompareType, list[int]],
) -> dict[CompareType, ReviewCounts]:
    return {ct: ReviewCounts(*values) for ct, values in counts.items()}


def _counts_dict(counts: Mapping[CompareType, ReviewCounts]) -> dict[str, Any]:
    return {str(ct): c.to_dict() for ct, c in counts.items()}
