"""Typer commands comparing two strings directly."""

from __future__ import annotations

from typing import Optional

import typer

from editmatch.distance import get_metric
from editmatch.errors import EditMatchError

from .app import app, logger
from .common import MaxDistanceOption, MetricChoice, MetricOption


@app.command("distance")
def distance_command(
    first: str = typer.Argument(..., help="First string."),
    second: str = typer.Argument(..., help="Second string."),
    metric: MetricChoice = MetricOption,
    max_distance: Optional[str] = MaxDistanceOption,
) -> None:
    """Print the edit distance between two strings (or -1 past --max-distance)."""

    functions = get_metric(metric.value)
    result = functions.distance(first, second, max_distance)
    logger.debug("%s(%r, %r, %s) = %d", metric.value, first, second, max_distance, result)
    typer.echo(str(result))


@app.command("similarity")
def similarity_command(
    first: str = typer.Argument(..., help="First string."),
    second: str = typer.Argument(..., help="Second string."),
    metric: MetricChoice = MetricOption,
    min_similarity: Optional[float] = typer.Option(
        None,
        "--min-similarity",
        "-s",
        help="Minimum similarity of interest in [0, 1]; lower scores print -1.",
    ),
) -> None:
    """Print the normalized similarity of two strings."""

    functions = get_metric(metric.value)
    try:
        result = functions.similarity(first, second, min_similarity)
    except EditMatchError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc
    typer.echo("-1" if result < 0 else f"{result:.6f}")
