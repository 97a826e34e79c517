"""VariantComparator: orchestrator that compares a base tree against variants.

This is the wiring layer between the line-diff engine and the hosting
application.  It turns raw file trees into file-centric FileComparison
results: one entry per path that differs somewhere, each holding every
variant's copy and its line diff against the base.

Architecture:
- compare_trees() first re-keys each variant tree with the accepted file
  mappings for that variant's label, so renamed files compare under their
  base path.
- The path set is the union of the base tree and every mapped variant tree.
  A missing file (or a missing variant folder) reads as "".
- A path is kept when at least one variant's content differs from the base
  content.  Identical files produce no entry at all.
- Line diffs are only computed for variants whose content differs; a
  matching variant carries an empty diff.
- Results are sorted by path so output is stable across runs.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from variant_diff.algorithm.config import DiffConfig
from variant_diff.algorithm.pairing import LineDiffComposer
from variant_diff.logging_config import get_logger
from variant_diff.result import FileComparison, LineDiffEntry, VariantComparison
from variant_diff.tree.mappings import FileMapping, apply_mappings

__all__ = ["PROBLEM_STATEMENT_PATH", "VariantComparator"]

logger = get_logger(__name__)

PROBLEM_STATEMENT_PATH = "problem.md"

VariantTree = tuple[str, Mapping[str, str] | None]


class VariantComparator:
    """Compares a base variant's files with every other variant's files.

    Example::

        from variant_diff.comparator import VariantComparator

        cmp = VariantComparator()
        results = cmp.compare_trees(
            {"src/Main.java": "class Main {}\\n"},
            [("Variant 2", {"src/Main.java": "class Main { }\\n"})],
        )
        print(results[0].relative_path)          # "src/Main.java"
        print(results[0].variants[0].line_diff)  # (modify ...,)
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Line-diff parameters.  Defaults to ``DiffConfig()``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._composer = LineDiffComposer(self._config.modify_threshold)

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare_trees(
        self,
        base_tree: Mapping[str, str],
        variants: Sequence[VariantTree],
        mappings: Iterable[FileMapping] = (),
    ) -> list[FileComparison]:
        """Compare ``base_tree`` with each variant tree, file by file.

        Args:
            base_tree: Path -> content of the base variant.
            variants:  ``(label, tree)`` pairs in display order.  A tree of
                       None means the variant has no such repository.
            mappings:  Accepted file mappings; each is applied only to the
                       variant whose label it names.

        Returns:
            One FileComparison per differing path, sorted by path.
        """
        mapping_list = list(mappings)
        mapped: list[VariantTree] = [
            (label, None if tree is None else apply_mappings(tree, mapping_list, label))
            for label, tree in variants
        ]

        all_paths: set[str] = set(base_tree)
        for _, tree in mapped:
            if tree is not None:
                all_paths.update(tree)

        comparisons: list[FileComparison] = []
        for path in sorted(all_paths):
            base_content = base_tree.get(path, "")
            if not any(
                _content_of(tree, path) != base_content for _, tree in mapped
            ):
                continue
            comparisons.append(
                FileComparison(
                    relative_path=path,
                    base_content=base_content,
                    variants=tuple(
                        self._compare_variant(label, tree, path, base_content)
                        for label, tree in mapped
                    ),
                )
            )

        logger.info(
            "compared trees",
            paths=len(all_paths),
            differing=len(comparisons),
            variants=len(mapped),
            mappings=len(mapping_list),
        )
        return comparisons

    def compare_problem_statements(
        self,
        base_markdown: str,
        variants: Sequence[tuple[str, str | None]],
    ) -> FileComparison:
        """Compare the problem statement of every variant with the base.

        Unlike ``compare_trees`` the result is always returned, even when
        every statement matches.  Every variant has a statement, so
        ``exists`` is always True; a missing one reads as "".

        Args:
            base_markdown: The base variant's statement.
            variants:      ``(label, markdown)`` pairs; None is treated as an
                           empty statement.
        """
        return FileComparison(
            relative_path=PROBLEM_STATEMENT_PATH,
            base_content=base_markdown,
            variants=tuple(
                self._compare_content(label, markdown or "", base_markdown)
                for label, markdown in variants
            ),
        )

    def count_differences(
        self,
        base_tree: Mapping[str, str],
        variant_tree: Mapping[str, str],
    ) -> int:
        """Number of paths in either tree whose contents differ."""
        return sum(
            1
            for path in set(base_tree) | set(variant_tree)
            if base_tree.get(path, "") != variant_tree.get(path, "")
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _compare_variant(
        self,
        label: str,
        tree: Mapping[str, str] | None,
        path: str,
        base_content: str,
    ) -> VariantComparison:
        content = tree.get(path) if tree is not None else None
        return self._compare_content(label, content, base_content)

    def _compare_content(
        self, label: str, content: str | None, base_content: str
    ) -> VariantComparison:
        text = content if content is not None else ""
        differs = text != base_content
        line_diff: tuple[LineDiffEntry, ...] = ()
        if differs:
            line_diff = tuple(self._composer.compose(base_content, text))
        return VariantComparison(
            variant=label,
            content=text,
            line_diff=line_diff,
            has_difference=differs,
            exists=content is not None,
        )


def _content_of(tree: Mapping[str, str] | None, path: str) -> str:
    if tree is None:
        return ""
    return tree.get(path, "")
