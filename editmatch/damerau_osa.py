"""Damerau-Levenshtein distance, optimal string alignment variant.

Adjacent transpositions count as a single edit, but no substring is edited
more than once. This makes the measure cheaper than true Damerau-Levenshtein
and also means it is not a metric: ``"CA"`` to ``"ABC"`` costs 3 here, where
the unrestricted distance is 2.

The kernels extend the Levenshtein rolling row with a second row holding the
diagonal costs of the previous pass, which is exactly the cell two rows and
two columns back that a transposition starts from.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .engine import EditDistanceEngine
from .trimming import SENTINEL


def _damerau_osa(
    a: Sequence[Any],
    b: Sequence[Any],
    len1: int,
    len2: int,
    start: int,
    row: List[int],
    trans_row: List[int],
) -> int:
    row[:len2] = range(1, len2 + 1)
    char1 = a[start]
    current = 0
    for i in range(len1):
        prev_char1 = char1
        char1 = a[start + i]
        char2 = None
        diag = i
        left = i + 1
        trans = 0
        for j in range(len2):
            next_trans = trans_row[j]
            trans_row[j] = diag
            up = row[j]
            prev_char2 = char2
            char2 = b[start + j]
            if char1 == char2:
                current = diag
            else:
                current = diag
                if up < current:
                    current = up
                if left < current:
                    current = left
                current += 1
                if i and j and char1 == prev_char2 and prev_char1 == char2:
                    trans += 1
                    if trans < current:
                        current = trans
            row[j] = left = current
            diag = up
            trans = next_trans
    return current


def _damerau_osa_banded(
    a: Sequence[Any],
    b: Sequence[Any],
    len1: int,
    len2: int,
    start: int,
    max_distance: int,
    row: List[int],
    trans_row: List[int],
) -> int:
    assert len2 > max_distance, "banded kernel requires max_distance < len2"

    outside = max_distance + 1
    row[:max_distance] = range(1, outside)
    for j in range(max_distance, len2):
        row[j] = outside

    len_diff = len2 - len1
    j_start_offset = max_distance - len_diff
    j_start = 0
    j_end = max_distance
    char1 = a[start]
    current = 0
    for i in range(len1):
        prev_char1 = char1
        char1 = a[start + i]
        if i > j_start_offset:
            j_start += 1
        if j_end < len2:
            j_end += 1

        if j_start:
            char2 = b[start + j_start - 1]
            diag = row[j_start - 1]
            left = outside
            trans = trans_row[j_start - 1]
        else:
            char2 = None
            diag = i
            left = i + 1
            trans = 0

        for j in range(j_start, j_end):
            next_trans = trans_row[j]
            trans_row[j] = diag
            up = row[j]
            prev_char2 = char2
            char2 = b[start + j]
            if char1 == char2:
                current = diag
            else:
                current = diag
                if up < current:
                    current = up
                if left < current:
                    current = left
                current += 1
                if i and j and char1 == prev_char2 and prev_char1 == char2:
                    trans += 1
                    if trans < current:
                        current = trans
            row[j] = left = current
            diag = up
            trans = next_trans

        if row[i + len_diff] > max_distance:
            return SENTINEL
    return current if current <= max_distance else SENTINEL


class DamerauOSA(EditDistanceEngine):
    """Optimal string alignment engine reusing two cost rows between calls.

    >>> DamerauOSA().distance("abcdef", "abdcef")
    1
    """

    name = "damerau_osa"
    workspace_rows = 2
    unbounded_kernel = staticmethod(_damerau_osa)
    banded_kernel = staticmethod(_damerau_osa_banded)


def damerau_osa_distance(
    a: Optional[Sequence[Any]],
    b: Optional[Sequence[Any]],
    max_distance: Optional[float] = None,
) -> int:
    """Thread-safe OSA distance; allocates its own rows per call."""

    return DamerauOSA.compute_distance(a, b, max_distance, DamerauOSA.new_workspace())


def damerau_osa_similarity(
    a: Optional[Sequence[Any]],
    b: Optional[Sequence[Any]],
    min_similarity: Optional[float] = None,
) -> float:
    """Thread-safe OSA similarity; allocates its own rows per call."""

    return DamerauOSA.compute_similarity(a, b, min_similarity, DamerauOSA.new_workspace())


__all__ = ["DamerauOSA", "damerau_osa_distance", "damerau_osa_similarity"]
