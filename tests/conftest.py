from __future__ import annotations

from typing import Callable, Dict, List, Tuple

import pytest

from reference import build_test_strings, ref_damerau_osa, ref_levenshtein


@pytest.fixture(scope="session")
def test_strings() -> List[str]:
    return build_test_strings(0, 4)


def _reference_table(
    strings: List[str], fn: Callable[[str, str], int]
) -> Dict[Tuple[str, str], int]:
    return {(s1, s2): fn(s1, s2) for s1 in strings for s2 in strings}


@pytest.fixture(scope="session")
def levenshtein_reference(test_strings: List[str]) -> Dict[Tuple[str, str], int]:
    return _reference_table(test_strings, ref_levenshtein)


@pytest.fixture(scope="session")
def damerau_osa_reference(test_strings: List[str]) -> Dict[Tuple[str, str], int]:
    return _reference_table(test_strings, ref_damerau_osa)
