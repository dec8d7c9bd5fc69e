"""Testes da similaridade fuzzy de titulos."""

from __future__ import annotations

import pytest

from app.services.title_similarity import indel_distance, preprocess, ratio, title_similarity


def test_identical_titles_score_100() -> None:
    assert title_similarity("Math Test", "Math Test") == 100


def test_is_case_insensitive() -> None:
    assert title_similarity("MATH TEST", "math test") == 100


def test_punctuation_is_ignored() -> None:
    assert title_similarity("Math Test!", "math test") == 100


def test_disjoint_strings_score_zero() -> None:
    assert title_similarity("abc", "xyz") == 0


def test_empty_side_scores_zero() -> None:
    assert title_similarity("", "Math Test") == 0
    assert title_similarity("!!!", "Math Test") == 0


def test_is_symmetric() -> None:
    a, b = "Emma - Science Fair", "Science Fair Project"
    assert title_similarity(a, b) == title_similarity(b, a)


def test_preprocess() -> None:
    assert preprocess("  Emma - Math Test! ") == "emma   math test"


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("kitten", "sitting", 5),
        ("abc", "abc", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("abc", "abd", 2),
        ("flaw", "lawn", 2),
    ],
)
def test_indel_distance(a: str, b: str, expected: int) -> None:
    assert indel_distance(a, b) == expected


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        # 17 vs 23 caracteres com prefixo comum: 200 * 17 / 40 = 85.0
        ("Spelling Test Ch3", "Spelling Test Ch3 Retry", 85),
        # 18 vs 24: 200 * 18 / 42 = 85.71 -> 86
        ("Spelling Tests Ch3", "Spelling Tests Ch3 Retry", 86),
        # 9 vs 11: 200 * 9 / 20 = 90.0
        ("Math Test", "Math Test 2", 90),
        # 19 vs 21: 200 * 19 / 40 = 95.0
        ("Science Fair Set Up", "Science Fair Set Up A", 95),
    ],
)
def test_boundary_scores(a: str, b: str, expected: int) -> None:
    assert title_similarity(a, b) == expected


def test_rounds_half_up() -> None:
    # 1 vs 15: 200 / 16 = 12.5 -> 13
    assert title_similarity("a", "abcdefghijklmno") == 13
    assert ratio("a", "ab") == pytest.approx(200 / 3)
    # "ab" vs "abcdefghijklmnopqrstuvwx" (2 vs 24): 400 / 26 = 15.38 -> 15
    assert title_similarity("ab", "abcdefghijklmnopqrstuvwx") == 15
    # 3 vs 5 com prefixo comum: distancia 2 -> 100 * 6 / 8 = 75
    assert title_similarity("abc", "abcde") == 75
