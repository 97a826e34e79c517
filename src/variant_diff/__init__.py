"""Variant diff - line diffs and rename suggestions for exam variants."""

from __future__ import annotations

from variant_diff.algorithm.config import DiffConfig, SuggestionConfig
from variant_diff.api import (
    build_split_view,
    compare_trees,
    compute_line_diff,
    content_similarity,
    string_similarity,
    suggest_mappings,
)
from variant_diff.comparator import VariantComparator
from variant_diff.render import SplitView
from variant_diff.result import (
    FileComparison,
    LineDiffEntry,
    LineKind,
    MappingSuggestion,
    VariantComparison,
)
from variant_diff.review import FileReview, ReviewStatus, review_stats, update_review
from variant_diff.suggester import MappingSuggester
from variant_diff.tree import FileMapping, apply_mappings, merge_trees, read_file_tree

__version__: str = "0.1.0"
__all__: list[str] = [
    "DiffConfig",
    "FileComparison",
    "FileMapping",
    "FileReview",
    "LineDiffEntry",
    "LineKind",
    "MappingSuggester",
    "MappingSuggestion",
    "ReviewStatus",
    "SplitView",
    "SuggestionConfig",
    "VariantComparator",
    "VariantComparison",
    "apply_mappings",
    "build_split_view",
    "compare_trees",
    "compute_line_diff",
    "content_similarity",
    "merge_trees",
    "read_file_tree",
    "review_stats",
    "string_similarity",
    "suggest_mappings",
    "update_review",
]
