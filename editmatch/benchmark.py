"""Timing harness for the distance and similarity entry points."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from rapidfuzz.distance import Levenshtein as RapidLevenshtein
from rapidfuzz.distance import OSA as RapidOSA
from tqdm.auto import tqdm

from .config import BenchmarkCase, BenchmarkConfig, coerce_benchmark_config
from .distance import Metric, create_engine, get_metric, resolve_metric


logger = logging.getLogger(__name__)

ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

RESULT_COLUMNS = [
    "metric",
    "case",
    "operation",
    "parameter",
    "path",
    "calls",
    "seconds",
    "nanos_per_op",
]

_RAPIDFUZZ = {
    Metric.LEVENSHTEIN: RapidLevenshtein,
    Metric.DAMERAU_OSA: RapidOSA,
}


def random_strings(
    min_len: int,
    max_len: int,
    count: int,
    alphabet_size: int,
    *,
    seed: Optional[int] = 1,
) -> List[str]:
    """Generate ``count`` reproducible strings with lengths in ``[min_len, max_len]``."""

    alphabet_size = max(1, min(alphabet_size, len(ALPHABET)))
    letters = np.array(list(ALPHABET[:alphabet_size]))
    rng = np.random.default_rng(seed)
    lengths = rng.integers(min_len, max_len + 1, size=count)
    return ["".join(rng.choice(letters, size=int(n))) for n in lengths]


def _next_fraction(diff: float) -> float:
    if diff == 1.0:
        return diff / 2
    if diff == 0.5:
        return diff / 5
    return diff / 10


def bound_sweep(max_len: int) -> List[int]:
    """Maximum distances to time: ``max_len``, then 1/2, 1/10, 1/100... of it, ending at 1."""

    bounds: List[int] = []
    diff = 1.0
    dist = max_len
    while True:
        bounds.append(dist)
        if dist <= 1:
            break
        diff = _next_fraction(diff)
        dist = int(max_len * diff)
        if dist == 0:
            dist = 1
    return bounds


def similarity_sweep(max_len: int) -> List[float]:
    """Minimum similarities matching :func:`bound_sweep` for the same length."""

    thresholds: List[float] = []
    diff = 1.0
    dist = max_len
    while True:
        thresholds.append(1.0 - diff)
        if dist <= 1:
            break
        diff = _next_fraction(diff)
        dist = int(max_len * diff)
        if dist == 0:
            diff = 1.0 / max_len
            dist = int(max_len * diff)
    return thresholds


def split_pairs(strings: Sequence[str]) -> List[Tuple[str, str]]:
    """Pair every string in the first half with every string in the second half."""

    half = len(strings) // 2
    return [(s1, s2) for s1 in strings[:half] for s2 in strings[half:]]


@dataclass(frozen=True)
class BenchmarkTask:
    metric: Metric
    case: BenchmarkCase
    operation: str
    parameter: Optional[float]
    path: str
    target: Callable[[str, str], Any]


def _time_pairs(
    target: Callable[[str, str], Any],
    pairs: Sequence[Tuple[str, str]],
    repetitions: int,
) -> float:
    best = float("inf")
    for _ in range(repetitions):
        started = time.perf_counter()
        for s1, s2 in pairs:
            target(s1, s2)
        best = min(best, time.perf_counter() - started)
    return best


def _bind(fn: Callable[..., Any], parameter: Optional[float]) -> Callable[[str, str], Any]:
    if parameter is None:
        return fn
    return lambda s1, s2: fn(s1, s2, parameter)


def _rapidfuzz_target(
    metric: Metric, operation: str, parameter: Optional[float]
) -> Callable[[str, str], Any]:
    scorer = _RAPIDFUZZ[metric]
    if operation == "distance":
        if parameter is None:
            return scorer.distance
        cutoff = int(parameter)
        return lambda s1, s2: scorer.distance(s1, s2, score_cutoff=cutoff)
    if parameter is None:
        return scorer.normalized_similarity
    return lambda s1, s2: scorer.normalized_similarity(s1, s2, score_cutoff=parameter)


def _iter_operations(
    case: BenchmarkCase, include_similarity: bool
) -> Iterable[Tuple[str, Optional[float]]]:
    yield "distance", None
    for bound in bound_sweep(case.max_len):
        yield "distance", bound
    if not include_similarity:
        return
    yield "similarity", None
    for threshold in similarity_sweep(case.max_len):
        yield "similarity", threshold


def build_tasks(
    config: BenchmarkConfig,
    metrics: Optional[Sequence[Metric | str]] = None,
) -> List[BenchmarkTask]:
    selected = [resolve_metric(m) for m in (metrics or config.metrics)]
    tasks: List[BenchmarkTask] = []
    for metric in selected:
        functions = get_metric(metric)
        for case in config.cases:
            engine = create_engine(metric)
            for operation, parameter in _iter_operations(case, config.include_similarity):
                instance_fn = engine.distance if operation == "distance" else engine.similarity
                tasks.append(
                    BenchmarkTask(
                        metric, case, operation, parameter, "instance",
                        _bind(instance_fn, parameter),
                    )
                )
                if config.include_static:
                    static_fn = (
                        functions.distance if operation == "distance" else functions.similarity
                    )
                    tasks.append(
                        BenchmarkTask(
                            metric, case, operation, parameter, "stateless",
                            _bind(static_fn, parameter),
                        )
                    )
                if config.compare_rapidfuzz:
                    tasks.append(
                        BenchmarkTask(
                            metric, case, operation, parameter, "rapidfuzz",
                            _rapidfuzz_target(metric, operation, parameter),
                        )
                    )
    return tasks


def run_benchmark(
    config: BenchmarkConfig | Mapping[str, Any] | None = None,
    *,
    metrics: Optional[Sequence[Metric | str]] = None,
    progress: bool = True,
) -> pd.DataFrame:
    """Time every configured operation and return one row per measurement."""

    bench_cfg = coerce_benchmark_config(config)
    tasks = build_tasks(bench_cfg, metrics)
    logger.info(
        "Running %d benchmark tasks over %d size cases", len(tasks), len(bench_cfg.cases)
    )

    pairs_by_case: Dict[BenchmarkCase, List[Tuple[str, str]]] = {}
    rows: List[Dict[str, Any]] = []
    progress_bar = tqdm(total=len(tasks), desc="Benchmarking", unit="tasks", disable=not progress)
    try:
        for task in tasks:
            pairs = pairs_by_case.get(task.case)
            if pairs is None:
                case = task.case
                strings = random_strings(
                    case.min_len, case.max_len, case.count, case.alphabet_size, seed=bench_cfg.seed
                )
                pairs = pairs_by_case[case] = split_pairs(strings)

            seconds = _time_pairs(task.target, pairs, bench_cfg.repetitions)
            calls = len(pairs)
            nanos = seconds * 1e9 / calls if calls else 0.0
            rows.append(
                {
                    "metric": task.metric.value,
                    "case": task.case.label,
                    "operation": task.operation,
                    "parameter": task.parameter,
                    "path": task.path,
                    "calls": calls,
                    "seconds": seconds,
                    "nanos_per_op": nanos,
                }
            )
            logger.debug(
                "%s %s %s %s [%s]: %.1f ns/op",
                task.metric.value,
                task.case.label,
                task.operation,
                "" if task.parameter is None else task.parameter,
                task.path,
                nanos,
            )
            progress_bar.update(1)
    finally:
        progress_bar.close()

    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


__all__ = [
    "ALPHABET",
    "BenchmarkTask",
    "RESULT_COLUMNS",
    "bound_sweep",
    "build_tasks",
    "random_strings",
    "run_benchmark",
    "similarity_sweep",
    "split_pairs",
]
