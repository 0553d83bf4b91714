"""Levenshtein distance with a single rolling cost row.

The kernels follow Sten Hjelmqvist's "fast, memory efficient" formulation:
only one row of the dynamic programming matrix is kept, and the diagonal,
up and left neighbours are carried in locals while the row is overwritten
in place. The banded kernel restricts each row to the cells that can still
produce a result within ``max_distance`` and stops as soon as the diagonal
leading to the final cell exceeds it.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .engine import EditDistanceEngine
from .trimming import SENTINEL


def _levenshtein(
    a: Sequence[Any],
    b: Sequence[Any],
    len1: int,
    len2: int,
    start: int,
    row: List[int],
) -> int:
    row[:len2] = range(1, len2 + 1)
    current = 0
    for i in range(len1):
        char1 = a[start + i]
        diag = i
        left = i + 1
        for j in range(len2):
            up = row[j]
            if b[start + j] == char1:
                current = diag
            else:
                current = diag
                if up < current:
                    current = up
                if left < current:
                    current = left
                current += 1
            row[j] = left = current
            diag = up
    return current


def _levenshtein_banded(
    a: Sequence[Any],
    b: Sequence[Any],
    len1: int,
    len2: int,
    start: int,
    max_distance: int,
    row: List[int],
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
    current = 0
    for i in range(len1):
        char1 = a[start + i]
        # only columns within max_distance of both the leading diagonal and
        # the diagonal through the final cell can still matter
        if i > j_start_offset:
            j_start += 1
        if j_end < len2:
            j_end += 1

        if j_start:
            diag = row[j_start - 1]
            left = outside
        else:
            diag = i
            left = i + 1

        for j in range(j_start, j_end):
            up = row[j]
            if b[start + j] == char1:
                current = diag
            else:
                current = diag
                if up < current:
                    current = up
                if left < current:
                    current = left
                current += 1
            row[j] = left = current
            diag = up

        if row[i + len_diff] > max_distance:
            return SENTINEL
    return current if current <= max_distance else SENTINEL


class Levenshtein(EditDistanceEngine):
    """Levenshtein engine reusing one cost row between calls.

    >>> Levenshtein().distance("kitten", "sitting")
    3
    """

    name = "levenshtein"
    workspace_rows = 1
    unbounded_kernel = staticmethod(_levenshtein)
    banded_kernel = staticmethod(_levenshtein_banded)


def levenshtein_distance(
    a: Optional[Sequence[Any]],
    b: Optional[Sequence[Any]],
    max_distance: Optional[float] = None,
) -> int:
    """Thread-safe Levenshtein distance; allocates its own row per call."""

    return Levenshtein.compute_distance(a, b, max_distance, Levenshtein.new_workspace())


def levenshtein_similarity(
    a: Optional[Sequence[Any]],
    b: Optional[Sequence[Any]],
    min_similarity: Optional[float] = None,
) -> float:
    """Thread-safe Levenshtein similarity; allocates its own row per call."""

    return Levenshtein.compute_similarity(a, b, min_similarity, Levenshtein.new_workspace())


__all__ = ["Levenshtein", "levenshtein_distance", "levenshtein_similarity"]
