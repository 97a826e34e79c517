"""Tests for levenshtein_distance, string_similarity and content_similarity.

The two similarity metrics normalise differently and are tested separately:
string_similarity treats empty/empty as 0.0, content_similarity as 100.
"""

from __future__ import annotations

import pytest

from variant_diff.algorithm.similarity import (
    content_similarity,
    levenshtein_distance,
    string_similarity,
)

# ---------------------------------------------------------------------------
# levenshtein_distance
# ---------------------------------------------------------------------------


class TestLevenshteinDistance:
    def test_identical(self) -> None:
        assert levenshtein_distance("abc", "abc") == 0

    def test_empty_left(self) -> None:
        assert levenshtein_distance("", "abc") == 3

    def test_empty_right(self) -> None:
        assert levenshtein_distance("abc", "") == 3

    def test_classic_example(self) -> None:
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_transposition_costs_two(self) -> None:
        # No Damerau shortcut: a swap is two substitutions.
        assert levenshtein_distance("ab", "ba") == 2

    @pytest.mark.parametrize(
        ("a", "b"),
        [("flaw", "lawn"), ("gumbo", "gambol"), ("", "x"), ("book", "back")],
    )
    def test_symmetric(self, a: str, b: str) -> None:
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)


# ---------------------------------------------------------------------------
# string_similarity
# ---------------------------------------------------------------------------


class TestStringSimilarity:
    def test_identical_is_one(self) -> None:
        assert string_similarity("return x;", "return x;") == 1.0

    def test_both_empty_is_zero(self) -> None:
        assert string_similarity("", "") == 0.0

    def test_one_empty_is_zero(self) -> None:
        assert string_similarity("", "abc") == 0.0
        assert string_similarity("abc", "") == 0.0

    def test_one_char_changed(self) -> None:
        assert string_similarity("bar", "baz") == pytest.approx(2 / 3)

    def test_exact_one_fifth(self) -> None:
        # Four substitutions over five characters compares equal to 0.2.
        assert string_similarity("abcde", "vwxye") == 0.2

    def test_nothing_shared_is_zero(self) -> None:
        assert string_similarity("abc", "xyz") == 0.0

    def test_uses_longer_length(self) -> None:
        assert string_similarity("abcd", "ab") == pytest.approx(0.5)

    def test_in_unit_range(self) -> None:
        for a, b in [("a", "bcdef"), ("hello", "help"), ("x" * 10, "y")]:
            assert 0.0 <= string_similarity(a, b) <= 1.0


# ---------------------------------------------------------------------------
# content_similarity
# ---------------------------------------------------------------------------


class TestContentSimilarity:
    def test_identical_is_100(self) -> None:
        assert content_similarity("class Main {}", "class Main {}") == 100

    def test_both_empty_is_100(self) -> None:
        assert content_similarity("", "") == 100

    def test_empty_against_text_is_zero(self) -> None:
        assert content_similarity("", "abc") == 0
        assert content_similarity("abc", "") == 0

    def test_nothing_shared_is_zero(self) -> None:
        assert content_similarity("abc", "xyz") == 0

    def test_three_of_four(self) -> None:
        assert content_similarity("abcd", "abce") == 75

    def test_rounds_half_up(self) -> None:
        # 2 of 3 matched: 66.67 -> 67
        assert content_similarity("abc", "abd") == 67
        # 1 of 8 matched: 12.5 -> 13
        assert content_similarity("a" + "x" * 7, "a" + "y" * 7) == 13

    def test_divides_by_longer_blob(self) -> None:
        assert content_similarity("ab", "abcd") == 50

    def test_exactly_49(self) -> None:
        a = "a" * 49 + "b" * 51
        b = "a" * 49 + "c" * 51
        assert content_similarity(a, b) == 49

    def test_nearly_identical_never_reports_100(self) -> None:
        a = "a" * 200
        b = "a" * 199 + "b"
        assert content_similarity(a, b) == 99

    def test_tiny_overlap_never_reports_0(self) -> None:
        assert content_similarity("a" + "x" * 299, "a") == 1

    def test_symmetric(self) -> None:
        a = "public class Main {\n  int x;\n}\n"
        b = "public class App {\n  long x;\n}\n"
        assert content_similarity(a, b) == content_similarity(b, a)

    def test_deterministic(self) -> None:
        a, b = "first draft of a file", "second draft of the file"
        assert content_similarity(a, b) == content_similarity(a, b)
