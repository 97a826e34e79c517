"""Result dataclasses returned by the diff engine and the comparator.

All types are frozen and slotted.  Each has a ``to_dict()`` producing plain
JSON-ready values with camelCase keys, which is the transport shape the
hosting application serialises.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "FileComparison",
    "LineDiffEntry",
    "LineKind",
    "MappingSuggestion",
    "VariantComparison",
]


class LineKind(StrEnum):
    """Classification of one line-diff entry.

    - EQUAL  -> "equal"  : line present unchanged on both sides
    - ADD    -> "add"    : line only in the variant
    - REMOVE -> "remove" : line only in the base
    - MODIFY -> "modify" : a removed line paired with a similar added line
    """

    EQUAL = auto()
    ADD = auto()
    REMOVE = auto()
    MODIFY = auto()


@dataclass(frozen=True, slots=True)
class LineDiffEntry:
    """One entry of a line diff.

    Attributes:
        kind:    The entry classification.
        base:    The base-side line; None for ADD.
        variant: The variant-side line; None for REMOVE.

    Raises:
        ValueError: If the sides present do not match ``kind``.
    """

    kind: LineKind
    base: str | None = None
    variant: str | None = None

    def __post_init__(self) -> None:
        needs_base = self.kind != LineKind.ADD
        needs_variant = self.kind != LineKind.REMOVE
        if (self.base is not None) != needs_base or (
            self.variant is not None
        ) != needs_variant:
            msg = (
                f"{self.kind} entry has invalid sides: "
                f"base={self.base!r}, variant={self.variant!r}"
            )
            raise ValueError(msg)

    @classmethod
    def equal(cls, line: str) -> LineDiffEntry:
        return cls(LineKind.EQUAL, base=line, variant=line)

    @classmethod
    def add(cls, line: str) -> LineDiffEntry:
        return cls(LineKind.ADD, variant=line)

    @classmethod
    def remove(cls, line: str) -> LineDiffEntry:
        return cls(LineKind.REMOVE, base=line)

    @classmethod
    def modify(cls, base: str, variant: str) -> LineDiffEntry:
        return cls(LineKind.MODIFY, base=base, variant=variant)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": str(self.kind)}
        if self.base is not None:
            out["base"] = self.base
        if self.variant is not None:
            out["variant"] = self.variant
        return out


@dataclass(frozen=True, slots=True)
class MappingSuggestion:
    """A proposed rename: ``variant_file`` in ``variant_label`` is ``base_file``.

    Attributes:
        base_file:     Path in the base tree that has no same-path counterpart
                       in the variant tree.
        variant_file:  Path in the variant tree that has no same-path
                       counterpart in the base tree.
        variant_label: Label of the variant the variant tree belongs to.
        similarity:    Content similarity percentage in [0, 100].
    """

    base_file: str
    variant_file: str
    variant_label: str
    similarity: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "baseFile": self.base_file,
            "variantFile": self.variant_file,
            "variantLabel": self.variant_label,
            "similarity": self.similarity,
        }


@dataclass(frozen=True, slots=True)
class VariantComparison:
    """How one variant's copy of a file compares to the base copy.

    Attributes:
        variant:        Variant label.
        content:        Variant content ("" when the file is missing).
        line_diff:      Line diff against the base; empty when identical.
        has_difference: True when the contents differ.
        exists:         True when the variant tree contains the path (after
                        file mappings are applied).
    """

    variant: str
    content: str
    line_diff: tuple[LineDiffEntry, ...]
    has_difference: bool
    exists: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "variant": self.variant,
            "content": self.content,
            "lineDiff": [entry.to_dict() for entry in self.line_diff],
            "hasDifference": self.has_difference,
            "exists": self.exists,
        }


@dataclass(frozen=True, slots=True)
class FileComparison:
    """A single path compared across every non-base variant."""

    relative_path: str
    base_content: str
    variants: tuple[VariantComparison, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "relativePath": self.relative_path,
            "baseContent": self.base_content,
            "variants": [v.to_dict() for v in self.variants],
        }
