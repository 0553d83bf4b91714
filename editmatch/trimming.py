"""Degenerate-input handling and common affix trimming.

Everything here runs before the dynamic programming engines and may
resolve a comparison outright, so the helpers are kept free of any
allocation beyond the returned tuple.
"""

from __future__ import annotations

import math
import operator
from typing import Any, NamedTuple, Optional, Sequence

from .errors import InvalidBoundError


SENTINEL = -1


class TrimmedRegion(NamedTuple):
    """Middle region of two sequences left after dropping shared affixes."""

    len1: int
    len2: int
    start: int


def prefix_suffix_prep(a: Sequence[Any], b: Sequence[Any]) -> TrimmedRegion:
    """Return the region of ``a`` and ``b`` excluding a common suffix and prefix.

    ``a`` must not be longer than ``b``. The shared suffix is stripped first,
    then the shared prefix of what remains. When ``len1`` comes back as zero
    the distance is simply ``len2``.
    """

    len1 = len(a)
    len2 = len(b)
    while len1 and a[len1 - 1] == b[len2 - 1]:
        len1 -= 1
        len2 -= 1

    start = 0
    while start != len1 and a[start] == b[start]:
        start += 1

    return TrimmedRegion(len1 - start, len2 - start, start)


def normalize_bound(max_distance: Optional[float]) -> Optional[int]:
    """Convert a caller supplied bound into an integer or ``None`` (unbounded)."""

    if max_distance is None:
        return None
    if isinstance(max_distance, int):
        return max_distance
    try:
        value = float(max_distance)
    except (TypeError, ValueError) as exc:
        raise InvalidBoundError(f"max_distance must be numeric, got {max_distance!r}") from exc
    if math.isnan(value):
        raise InvalidBoundError("max_distance must not be NaN")
    if math.isinf(value):
        return None if value > 0 else 0
    return math.ceil(value)


def sequences_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Element-wise equality that also holds across sequence types."""

    if a == b:
        return True
    return len(a) == len(b) and all(map(operator.eq, a, b))


def null_distance(
    a: Optional[Sequence[Any]],
    b: Optional[Sequence[Any]],
    max_distance: Optional[int] = None,
) -> int:
    """Distance when at least one of the sequences is ``None``.

    ``None`` behaves like an absent value: two of them are equal, and against
    a real sequence the distance is that sequence's length.
    """

    if a is None and b is None:
        return 0
    length = len(b) if a is None else len(a)  # type: ignore[arg-type]
    if max_distance is None or length <= max_distance:
        return length
    return SENTINEL


def null_similarity(
    a: Optional[Sequence[Any]],
    b: Optional[Sequence[Any]],
    min_similarity: Optional[float] = None,
) -> float:
    """Similarity when at least one of the sequences is ``None``."""

    if a is None and b is None:
        score = 1.0
    else:
        other = b if a is None else a
        score = 0.0 if len(other) else 1.0  # type: ignore[arg-type]
    if min_similarity is not None and score < min_similarity:
        return float(SENTINEL)
    return score


__all__ = [
    "SENTINEL",
    "TrimmedRegion",
    "normalize_bound",
    "null_distance",
    "null_similarity",
    "prefix_suffix_prep",
    "sequences_equal",
]
