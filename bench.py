from __future__ import annotations

import sys

from typer import Exit
from typer.main import get_command

from editmatch.cli import app as cli_app


def main(argv: list[str] | None = None) -> None:
    """Delegate to the Typer-based CLI bench subcommand."""

    args = list(sys.argv[1:] if argv is None else argv)
    command = get_command(cli_app)
    try:
        command.main(
            args=["bench", *args],
            prog_name="editmatch",
            standalone_mode=False,
        )
    except Exit as exc:  # pragma: no cover - pass exit codes through
        raise SystemExit(exc.exit_code) from exc


if __name__ == "__main__":
    main()
