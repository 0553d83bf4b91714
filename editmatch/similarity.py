"""Conversions between edit distances and normalized similarity scores."""

from __future__ import annotations

import math
from typing import Optional

from .errors import InvalidThresholdError
from .trimming import SENTINEL


# Tolerance for float error when comparing a converted score to its threshold.
SIMILARITY_EPSILON = 1e-10


def validate_min_similarity(min_similarity: float) -> float:
    """Return ``min_similarity`` as a float or raise if it is outside ``[0, 1]``."""

    try:
        value = float(min_similarity)
    except (TypeError, ValueError) as exc:
        raise InvalidThresholdError(
            f"min_similarity must be a number in [0, 1], got {min_similarity!r}"
        ) from exc
    if math.isnan(value) or value < 0.0 or value > 1.0:
        raise InvalidThresholdError(
            f"min_similarity must be in range 0 to 1.0, got {min_similarity!r}"
        )
    return value


def to_similarity(distance: int, length: int) -> float:
    """Normalize ``distance`` by the longer sequence length; the sentinel passes through."""

    if distance < 0:
        return float(SENTINEL)
    if length == 0:
        return 1.0
    return 1.0 - distance / length


def to_distance_bound(min_similarity: float, length: int) -> int:
    """Largest number of edits that could still meet ``min_similarity``.

    Rounded up so a result sitting exactly on the threshold is never pruned;
    callers re-check the converted score with :func:`meets_threshold`.
    """

    return math.ceil((1.0 - min_similarity) * length)


def meets_threshold(similarity: float, min_similarity: Optional[float]) -> bool:
    if similarity < 0:
        return False
    if min_similarity is None:
        return True
    return similarity >= min_similarity - SIMILARITY_EPSILON


def apply_threshold(similarity: float, min_similarity: Optional[float]) -> float:
    """Return ``similarity`` or the sentinel when it falls below the threshold."""

    return similarity if meets_threshold(similarity, min_similarity) else float(SENTINEL)


__all__ = [
    "SIMILARITY_EPSILON",
    "apply_threshold",
    "meets_threshold",
    "to_distance_bound",
    "to_similarity",
    "validate_min_similarity",
]
