from __future__ import annotations

import math

import pytest

from editmatch import (
    DamerauOSA,
    InvalidThresholdError,
    Levenshtein,
    damerau_osa_similarity,
    levenshtein_similarity,
)
from editmatch.similarity import (
    apply_threshold,
    to_distance_bound,
    to_similarity,
    validate_min_similarity,
)

from reference import build_test_strings, ref_damerau_osa, ref_levenshtein


SIMILARITY_FUNCTIONS = [
    (levenshtein_similarity, ref_levenshtein),
    (damerau_osa_similarity, ref_damerau_osa),
    (Levenshtein().similarity, ref_levenshtein),
    (DamerauOSA().similarity, ref_damerau_osa),
]


def _expected_similarity(reference, a: str, b: str) -> float:
    length = max(len(a), len(b))
    if length == 0:
        return 1.0
    return 1.0 - reference(a, b) / length


@pytest.mark.parametrize(("similarity", "reference"), SIMILARITY_FUNCTIONS)
def test_matches_reference_without_threshold(similarity, reference) -> None:
    strings = build_test_strings(0, 3)
    for s1 in strings:
        for s2 in strings:
            assert similarity(s1, s2) == pytest.approx(_expected_similarity(reference, s1, s2))


@pytest.mark.parametrize(("similarity", "reference"), SIMILARITY_FUNCTIONS)
@pytest.mark.parametrize("threshold", [0.0, 0.25, 0.5, 0.75, 1.0])
def test_threshold_matches_reference(similarity, reference, threshold) -> None:
    strings = build_test_strings(0, 3)
    for s1 in strings:
        for s2 in strings:
            expected = _expected_similarity(reference, s1, s2)
            if expected < threshold:
                expected = -1
            assert similarity(s1, s2, threshold) == pytest.approx(expected), (s1, s2)


@pytest.mark.parametrize(("similarity", "reference"), SIMILARITY_FUNCTIONS)
def test_boundary_rounding(similarity, reference) -> None:
    assert similarity("123456789", "a2345aaaa", 0.5) == -1
    assert similarity("123456789", "a23456aaa", 0.5) == pytest.approx(5 / 9)


@pytest.mark.parametrize(("similarity", "reference"), SIMILARITY_FUNCTIONS)
def test_identity_and_symmetry(similarity, reference) -> None:
    for s in ["", "a", "abc", "hello world"]:
        assert similarity(s, s) == 1.0
        assert similarity(s, s, 1.0) == 1.0
    pairs = [("kitten", "sitting"), ("abc", ""), ("CA", "ABC"), ("teh", "the")]
    for a, b in pairs:
        assert similarity(a, b) == similarity(b, a)
        assert similarity(a, b, 0.4) == similarity(b, a, 0.4)


@pytest.mark.parametrize(("similarity", "reference"), SIMILARITY_FUNCTIONS)
def test_null_semantics(similarity, reference) -> None:
    assert similarity(None, None) == 1.0
    assert similarity(None, "hi") == 0.0
    assert similarity("hi", None) == 0.0
    assert similarity(None, "") == 1.0
    assert similarity(None, "hi", 0.0) == 0.0
    assert similarity(None, "hi", 0.5) == -1
    assert similarity(None, None, 1.0) == 1.0


@pytest.mark.parametrize(("similarity", "reference"), SIMILARITY_FUNCTIONS)
@pytest.mark.parametrize("threshold", [-0.01, 1.01, math.nan, "high"])
def test_rejects_invalid_threshold(similarity, reference, threshold) -> None:
    with pytest.raises(InvalidThresholdError):
        similarity("abc", "abd", threshold)
    with pytest.raises(ValueError):
        similarity(None, None, threshold)


def test_uses_untrimmed_length_of_longer_sequence() -> None:
    assert levenshtein_similarity("abc", "abcdef") == pytest.approx(0.5)
    assert damerau_osa_similarity("abcdef", "abc") == pytest.approx(0.5)
    assert levenshtein_similarity("abc", "abcdef", 0.5) == pytest.approx(0.5)
    assert levenshtein_similarity("abc", "abcdef", 0.6) == -1


def test_transposition_scores_higher_under_osa() -> None:
    assert damerau_osa_similarity("abcd", "abdc") == pytest.approx(0.75)
    assert levenshtein_similarity("abcd", "abdc") == pytest.approx(0.5)


def test_conversion_helpers() -> None:
    assert to_similarity(-1, 10) == -1
    assert to_similarity(0, 0) == 1.0
    assert to_similarity(3, 12) == pytest.approx(0.75)
    assert to_distance_bound(0.5, 9) == 5
    assert to_distance_bound(1.0, 9) == 0
    assert to_distance_bound(0.0, 9) == 9
    assert apply_threshold(0.7, 0.7) == 0.7
    assert apply_threshold(0.69, 0.7) == -1
    assert apply_threshold(0.2, None) == 0.2
    assert validate_min_similarity(1) == 1.0
