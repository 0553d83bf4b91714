from __future__ import annotations

import logging
import os
from typing import Optional

import typer

from editmatch.utils import configure_logging


LOGGER_NAME = "editmatch.cli"


def _explicit_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level:
        return log_level
    return os.getenv("LOG_LEVEL") or None


def create_app() -> typer.Typer:
    app = typer.Typer(help="Fast bounded edit distance and similarity")

    @app.callback()
    def _configure_cli(
        ctx: typer.Context,
        log_level: Optional[str] = typer.Option(None, help="Python logging level"),
    ) -> None:
        """Configure logging before running any command."""

        explicit = _explicit_log_level(log_level)
        configure_logging(level=explicit or logging.INFO)
        ctx.obj = {"explicit_log_level": explicit is not None}

    return app


def apply_config_log_level(ctx: typer.Context, level: str) -> None:
    """Use a config file's log level unless one was given on the command line or env."""

    if isinstance(ctx.obj, dict) and ctx.obj.get("explicit_log_level"):
        return
    configure_logging(level=level)
    logging.getLogger().setLevel(level.upper())


logger = logging.getLogger(LOGGER_NAME)

app = create_app()

__all__ = ["app", "apply_config_log_level", "logger"]
