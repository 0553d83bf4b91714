"""Metric registry tying names to engines and stateless entry points."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, NamedTuple, Optional, Sequence, Type

from .damerau_osa import DamerauOSA, damerau_osa_distance, damerau_osa_similarity
from .engine import EditDistanceEngine
from .errors import UnknownMetricError
from .levenshtein import Levenshtein, levenshtein_distance, levenshtein_similarity


DistanceFn = Callable[[Optional[Sequence[Any]], Optional[Sequence[Any]], Optional[float]], int]
SimilarityFn = Callable[
    [Optional[Sequence[Any]], Optional[Sequence[Any]], Optional[float]], float
]


class Metric(str, Enum):
    LEVENSHTEIN = "levenshtein"
    DAMERAU_OSA = "damerau_osa"


class MetricFunctions(NamedTuple):
    """Stateless callables and engine class registered for one metric."""

    metric: Metric
    engine: Type[EditDistanceEngine]
    distance: DistanceFn
    similarity: SimilarityFn


_REGISTRY: Dict[Metric, MetricFunctions] = {
    Metric.LEVENSHTEIN: MetricFunctions(
        Metric.LEVENSHTEIN, Levenshtein, levenshtein_distance, levenshtein_similarity
    ),
    Metric.DAMERAU_OSA: MetricFunctions(
        Metric.DAMERAU_OSA, DamerauOSA, damerau_osa_distance, damerau_osa_similarity
    ),
}

_ALIASES = {
    "lev": Metric.LEVENSHTEIN,
    "osa": Metric.DAMERAU_OSA,
    "damerau": Metric.DAMERAU_OSA,
    "damerauosa": Metric.DAMERAU_OSA,
}


def resolve_metric(metric: Metric | str) -> Metric:
    if isinstance(metric, Metric):
        return metric
    key = str(metric).strip().lower().replace("-", "_")
    try:
        return Metric(key)
    except ValueError:
        pass
    alias = _ALIASES.get(key.replace("_", ""))
    if alias is None:
        known = ", ".join(m.value for m in Metric)
        raise UnknownMetricError(f"Unknown metric {metric!r}; expected one of: {known}")
    return alias


def get_metric(metric: Metric | str) -> MetricFunctions:
    """Return the stateless distance and similarity functions for ``metric``."""

    return _REGISTRY[resolve_metric(metric)]


def create_engine(metric: Metric | str, expected_max_length: int = 0) -> EditDistanceEngine:
    """Build a reusable engine instance for ``metric``."""

    return get_metric(metric).engine(expected_max_length)


def available_metrics() -> list[str]:
    return [m.value for m in Metric]


__all__ = [
    "Metric",
    "MetricFunctions",
    "available_metrics",
    "create_engine",
    "get_metric",
    "resolve_metric",
]
