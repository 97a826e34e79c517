"""Tests for FileMapping and apply_mappings."""

from __future__ import annotations

import pytest

from variant_diff.result import MappingSuggestion
from variant_diff.tree.mappings import FileMapping, apply_mappings


class TestFileMapping:
    def test_from_suggestion(self) -> None:
        suggestion = MappingSuggestion("Main.java", "App.java", "Variant 2", 90)
        assert FileMapping.from_suggestion(suggestion) == FileMapping(
            "Main.java", "App.java", "Variant 2"
        )

    def test_dict_shape(self) -> None:
        mapping = FileMapping("Main.java", "App.java", "Variant 2")
        data = mapping.to_dict()
        assert data == {
            "baseFile": "Main.java",
            "variantFile": "App.java",
            "variantLabel": "Variant 2",
        }
        assert FileMapping.from_dict(data) == mapping

    def test_from_dict_missing_key(self) -> None:
        with pytest.raises(KeyError):
            FileMapping.from_dict({"baseFile": "a", "variantFile": "b"})

    @pytest.mark.parametrize(
        ("base_file", "variant_file", "label"),
        [("", "b", "v"), ("a", "", "v"), ("a", "b", "")],
    )
    def test_empty_fields_rejected(
        self, base_file: str, variant_file: str, label: str
    ) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            FileMapping(base_file, variant_file, label)


class TestApplyMappings:
    def test_rekeys_mapped_file(self) -> None:
        tree = {"App.java": "class A {}", "pom.xml": "<project/>"}
        mapped = apply_mappings(
            tree, [FileMapping("Main.java", "App.java", "v2")], "v2"
        )
        assert mapped == {"Main.java": "class A {}", "pom.xml": "<project/>"}

    def test_other_labels_ignored(self) -> None:
        tree = {"App.java": "class A {}"}
        mapped = apply_mappings(
            tree, [FileMapping("Main.java", "App.java", "v3")], "v2"
        )
        assert mapped == tree

    def test_first_mapping_wins(self) -> None:
        mappings = [
            FileMapping("First.java", "App.java", "v2"),
            FileMapping("Second.java", "App.java", "v2"),
        ]
        assert apply_mappings({"App.java": "x"}, mappings, "v2") == {"First.java": "x"}

    def test_unknown_variant_file_is_a_no_op(self) -> None:
        mappings = [FileMapping("Main.java", "Gone.java", "v2")]
        assert apply_mappings({"App.java": "x"}, mappings, "v2") == {"App.java": "x"}

    def test_input_not_mutated(self) -> None:
        tree = {"App.java": "x"}
        apply_mappings(tree, [FileMapping("Main.java", "App.java", "v2")], "v2")
        assert tree == {"App.java": "x"}

    def test_accepts_generator(self) -> None:
        mappings = (m for m in [FileMapping("Main.java", "App.java", "v2")])
        assert apply_mappings({"App.java": "x"}, mappings, "v2") == {"Main.java": "x"}
