from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from editmatch.config import AppConfig, load_config
from editmatch.distance import Metric


class MetricChoice(str, Enum):
    LEVENSHTEIN = Metric.LEVENSHTEIN.value
    DAMERAU_OSA = Metric.DAMERAU_OSA.value


def _max_distance_callback(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    text = str(value).strip()
    if not text or text.lower() in {"none", "inf", "unbounded"}:
        return None
    try:
        return int(text)
    except ValueError as exc:
        raise typer.BadParameter("Max distance must be an integer or 'none'.") from exc


MetricOption = typer.Option(
    MetricChoice.LEVENSHTEIN,
    "--metric",
    "-m",
    help="Edit distance measure to use.",
    case_sensitive=False,
    show_default=MetricChoice.LEVENSHTEIN.value,
)

MaxDistanceOption = typer.Option(
    None,
    "--max-distance",
    "-k",
    callback=_max_distance_callback,
    help="Largest distance of interest (integer) or 'none'; larger distances print -1.",
)

OptionalConfigArgument = typer.Argument(
    None,
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
    resolve_path=True,
    path_type=Path,
    help="Optional TOML configuration file for the benchmark.",
)


def load_app_config(config_path: Optional[Path]) -> tuple[AppConfig, Path]:
    """Load ``config_path`` (or defaults) and return it with its base directory."""

    if config_path is None:
        return AppConfig(), Path.cwd()
    config_path = config_path.resolve()
    return load_config(config_path), config_path.parent


__all__ = [
    "MaxDistanceOption",
    "MetricChoice",
    "MetricOption",
    "OptionalConfigArgument",
    "load_app_config",
]
