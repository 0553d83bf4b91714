from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from editmatch import (
    damerau_osa_distance,
    damerau_osa_similarity,
    levenshtein_distance,
    levenshtein_similarity,
)

from reference import build_test_strings, ref_damerau_osa, ref_levenshtein


STRINGS = build_test_strings(0, 3)


def _check_row(distance, reference, s1: str) -> int:
    mismatches = 0
    for s2 in STRINGS:
        expected = reference(s1, s2)
        if distance(s1, s2) != expected:
            mismatches += 1
        bounded = expected if expected <= 1 else -1
        if distance(s1, s2, 1) != bounded:
            mismatches += 1
    return mismatches


@pytest.mark.parametrize(
    ("distance", "reference"),
    [(levenshtein_distance, ref_levenshtein), (damerau_osa_distance, ref_damerau_osa)],
)
def test_stateless_distance_is_threadsafe(distance, reference) -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda s1: _check_row(distance, reference, s1), STRINGS))
    assert sum(results) == 0


@pytest.mark.parametrize("similarity", [levenshtein_similarity, damerau_osa_similarity])
def test_stateless_similarity_is_threadsafe(similarity) -> None:
    expected = {(s1, s2): similarity(s1, s2, 0.5) for s1 in STRINGS for s2 in STRINGS}

    def _row(s1: str) -> bool:
        return all(similarity(s1, s2, 0.5) == expected[s1, s2] for s2 in STRINGS)

    with ThreadPoolExecutor(max_workers=8) as pool:
        assert all(pool.map(_row, STRINGS))
