"""FileMapping and apply_mappings: accepted renames between variant trees.

A mapping says that, for one variant, ``variant_file`` is the counterpart of
the base tree's ``base_file``.  Applying the mappings re-keys the variant tree
so that files compare under their base path.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from variant_diff.result import MappingSuggestion

__all__ = ["FileMapping", "apply_mappings"]


@dataclass(frozen=True, slots=True)
class FileMapping:
    """An accepted association between a base path and a variant path.

    Raises:
        ValueError: If any field is empty.
    """

    base_file: str
    variant_file: str
    variant_label: str

    def __post_init__(self) -> None:
        for name in ("base_file", "variant_file", "variant_label"):
            if not getattr(self, name):
                msg = f"{name} must be a non-empty string"
                raise ValueError(msg)

    @classmethod
    def from_suggestion(cls, suggestion: MappingSuggestion) -> FileMapping:
        """Accept a suggestion as a mapping."""
        return cls(
            base_file=suggestion.base_file,
            variant_file=suggestion.variant_file,
            variant_label=suggestion.variant_label,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FileMapping:
        """Build from the camelCase transport shape."""
        return cls(
            base_file=str(data["baseFile"]),
            variant_file=str(data["variantFile"]),
            variant_label=str(data["variantLabel"]),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "baseFile": self.base_file,
            "variantFile": self.variant_file,
            "variantLabel": self.variant_label,
        }


def apply_mappings(
    tree: Mapping[str, str],
    mappings: Iterable[FileMapping],
    variant_label: str,
) -> dict[str, str]:
    """Re-key ``tree`` so mapped variant files use their base path.

    Only mappings whose ``variant_label`` matches are used.  If several
    mappings name the same variant file, the first one wins.  Unmapped paths
    are kept as they are.  The input is never mutated.
    """
    renames: dict[str, str] = {}
    for mapping in mappings:
        if mapping.variant_label == variant_label:
            renames.setdefault(mapping.variant_file, mapping.base_file)

    mapped: dict[str, str] = {}
    for path, content in tree.items():
        mapped[renames.get(path, path)] = content
    return mapped
