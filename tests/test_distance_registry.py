from __future__ import annotations

import pytest

from editmatch import (
    DamerauOSA,
    Levenshtein,
    Metric,
    UnknownMetricError,
    available_metrics,
    create_engine,
    damerau_osa_distance,
    get_metric,
    levenshtein_similarity,
)


def test_available_metrics() -> None:
    assert available_metrics() == ["levenshtein", "damerau_osa"]


@pytest.mark.parametrize(
    ("name", "metric"),
    [
        ("levenshtein", Metric.LEVENSHTEIN),
        ("Levenshtein", Metric.LEVENSHTEIN),
        ("lev", Metric.LEVENSHTEIN),
        ("damerau_osa", Metric.DAMERAU_OSA),
        ("damerau-osa", Metric.DAMERAU_OSA),
        ("OSA", Metric.DAMERAU_OSA),
        (Metric.DAMERAU_OSA, Metric.DAMERAU_OSA),
    ],
)
def test_get_metric_resolves_names(name, metric) -> None:
    assert get_metric(name).metric is metric


def test_registered_functions() -> None:
    functions = get_metric("damerau_osa")
    assert functions.distance is damerau_osa_distance
    assert functions.engine is DamerauOSA
    assert get_metric("levenshtein").similarity is levenshtein_similarity


def test_create_engine_returns_fresh_instances() -> None:
    first = create_engine("levenshtein", expected_max_length=16)
    second = create_engine(Metric.LEVENSHTEIN)
    assert isinstance(first, Levenshtein)
    assert first is not second
    assert first.workspace is not second.workspace
    assert first.workspace.capacity == 16


def test_unknown_metric() -> None:
    with pytest.raises(UnknownMetricError):
        get_metric("jaro")
    with pytest.raises(KeyError):
        create_engine("hamming")


def test_engine_repr_mentions_workspace() -> None:
    assert repr(DamerauOSA(4)) == "DamerauOSA(Workspace(rows=2, capacity=4))"
