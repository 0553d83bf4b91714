"""Typer command for the timing harness."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from editmatch.benchmark import run_benchmark
from editmatch.reporting import report_benchmark
from editmatch.utils import set_global_seed

from .app import app, apply_config_log_level, logger
from .common import MetricChoice, OptionalConfigArgument, load_app_config


@app.command("bench")
def bench_command(
    ctx: typer.Context,
    config: Optional[Path] = OptionalConfigArgument,
    metric: Optional[List[MetricChoice]] = typer.Option(
        None,
        "--metric",
        "-m",
        help="Restrict the run to these metrics (repeatable).",
        case_sensitive=False,
    ),
    repetitions: Optional[int] = typer.Option(
        None,
        "--repetitions",
        min=1,
        help="Override how many timing repeats to take the best of.",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for the random string generator.",
    ),
    rapidfuzz: Optional[bool] = typer.Option(
        None,
        "--rapidfuzz/--no-rapidfuzz",
        help="Also time RapidFuzz's implementation as a baseline.",
    ),
    output_csv: Optional[Path] = typer.Option(
        None,
        "--output-csv",
        help="Write raw measurements to this CSV file.",
        path_type=Path,
    ),
    summary_md: Optional[Path] = typer.Option(
        None,
        "--summary-md",
        help="Write the Markdown report to the given file.",
        metavar="PATH",
    ),
    progress: bool = typer.Option(
        True,
        "--progress/--no-progress",
        help="Show a progress bar while timing.",
    ),
) -> None:
    """Time distance and similarity calls over random strings."""

    config_obj, base_path = load_app_config(config)
    if config is not None:
        apply_config_log_level(ctx, config_obj.logging.level)
        logger.info("Loaded configuration from %s", config)

    bench_cfg = config_obj.benchmark
    if repetitions is not None:
        bench_cfg.repetitions = repetitions
    if seed is not None:
        bench_cfg.seed = seed
    if rapidfuzz is not None:
        bench_cfg.compare_rapidfuzz = rapidfuzz
    set_global_seed(config_obj.seed)

    metrics = [choice.value for choice in metric] if metric else None
    df = run_benchmark(bench_cfg, metrics=metrics, progress=progress)

    results_path = output_csv.resolve() if output_csv else bench_cfg.resolve_results_path(base_path)
    if results_path is not None:
        results_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(results_path, index=False)
        logger.info("Results saved to %s", results_path)

    report_benchmark(df, output_path=summary_md.resolve() if summary_md else None)
