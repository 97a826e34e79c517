"""Packaging correctness verification for variant-diff.

Tests validate:
- Top-level import works and exposes the documented API
- py.typed marker ships with the package
- Console script target is importable
- Package metadata is correct

These tests inspect the source tree and current installation rather than
building a wheel (faster, more reliable in CI).
"""

from __future__ import annotations

import tomllib
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    def test_import_variant_diff(self) -> None:
        import variant_diff

        assert hasattr(variant_diff, "compute_line_diff")
        assert hasattr(variant_diff, "suggest_mappings")
        assert hasattr(variant_diff, "compare_trees")

    def test_compute_line_diff_basic(self) -> None:
        from variant_diff import LineDiffEntry, compute_line_diff

        assert compute_line_diff("a\n", "a\n") == [LineDiffEntry.equal("a")]

    def test_py_typed_marker_present(self) -> None:
        import variant_diff

        package_dir = Path(variant_diff.__file__).parent
        assert (package_dir / "py.typed").exists()


class TestConsoleScript:
    def test_entry_point_target(self) -> None:
        with (PROJECT_ROOT / "pyproject.toml").open("rb") as fh:
            pyproject = tomllib.load(fh)
        target = pyproject["project"]["scripts"]["variant-diff"]
        module_name, func_name = target.split(":")
        assert module_name == "variant_diff.cli"

        from variant_diff import cli

        assert callable(getattr(cli, func_name))


class TestPackageMetadata:
    def test_version(self) -> None:
        import variant_diff

        assert variant_diff.__version__ == "0.1.0"

    def test_version_matches_pyproject(self) -> None:
        import variant_diff

        with (PROJECT_ROOT / "pyproject.toml").open("rb") as fh:
            pyproject = tomllib.load(fh)
        assert pyproject["project"]["version"] == variant_diff.__version__

    def test_all_exports(self) -> None:
        """__all__ must include the documented public API."""
        import variant_diff

        expected = {
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
        }
        actual = set(variant_diff.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )

    def test_all_names_resolve(self) -> None:
        import variant_diff

        for name in variant_diff.__all__:
            assert getattr(variant_diff, name) is not None
