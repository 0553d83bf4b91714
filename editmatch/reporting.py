from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd


_PATH_ORDER = ["instance", "stateless", "rapidfuzz"]


def _humanize(label: str) -> str:
    return label.replace("_", " ").replace("-", " ").title()


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))  # type: ignore[arg-type]
    except TypeError:
        return False


def _as_parameter(operation: str, value: Any) -> str:
    if _is_missing(value):
        return "–"
    if operation == "distance":
        return f"max {int(value)}"
    return f"min {float(value):.3f}"


def _markdown(df_obj: pd.DataFrame, *, index: bool = False) -> str:
    if df_obj.empty:
        return ""
    return df_obj.to_markdown(index=index, tablefmt="rounded_grid", floatfmt=",.1f")


def _metric_table(df: pd.DataFrame) -> pd.DataFrame:
    frame = df.copy()
    frame["parameter"] = [
        _as_parameter(op, value) for op, value in zip(frame["operation"], frame["parameter"])
    ]
    table = frame.pivot_table(
        index=["case", "operation", "parameter"],
        columns="path",
        values="nanos_per_op",
        aggfunc="min",
        sort=False,
    )
    ordered = [path for path in _PATH_ORDER if path in table.columns]
    table = table[ordered]
    table.columns = [f"{_humanize(path)} (ns/op)" for path in ordered]
    return table.reset_index()


def format_benchmark(df: pd.DataFrame | None) -> str:
    """Render benchmark results as one Markdown table per metric."""

    if df is None or df.empty:
        return ""

    sections: list[str] = ["## Benchmark Results", ""]
    for metric, group in df.groupby("metric", sort=False):
        sections.extend([f"### {_humanize(str(metric))}", _markdown(_metric_table(group)), ""])
    return "\n".join(sections).rstrip() + "\n"


def report_benchmark(
    df: pd.DataFrame | None,
    *,
    output_path: Path | None = None,
) -> str:
    """Print the benchmark report and optionally persist it as Markdown."""

    report = format_benchmark(df)
    if report:
        print(report)
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(report, encoding="utf-8")
    return report


__all__ = ["format_benchmark", "report_benchmark"]
