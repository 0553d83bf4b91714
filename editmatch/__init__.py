"""Fast, allocation-light edit distance and similarity."""

from .damerau_osa import DamerauOSA, damerau_osa_distance, damerau_osa_similarity
from .distance import (
    Metric,
    MetricFunctions,
    available_metrics,
    create_engine,
    get_metric,
)
from .engine import EditDistanceEngine
from .errors import (
    EditMatchError,
    InvalidBoundError,
    InvalidThresholdError,
    UnknownMetricError,
)
from .levenshtein import Levenshtein, levenshtein_distance, levenshtein_similarity
from .trimming import SENTINEL, prefix_suffix_prep
from .workspace import Workspace

__all__ = [
    "SENTINEL",
    "DamerauOSA",
    "EditDistanceEngine",
    "EditMatchError",
    "InvalidBoundError",
    "InvalidThresholdError",
    "Levenshtein",
    "Metric",
    "MetricFunctions",
    "UnknownMetricError",
    "Workspace",
    "available_metrics",
    "create_engine",
    "damerau_osa_distance",
    "damerau_osa_similarity",
    "get_metric",
    "levenshtein_distance",
    "levenshtein_similarity",
    "prefix_suffix_prep",
]
