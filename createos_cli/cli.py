"""Command-line interface for the CreateOS deployment platform."""

from __future__ import annotations

# ruff: noqa: B008,F401
from pathlib import Path
from typing import Annotated

import typer

from createos_cli.commands import deployments, environments, projects
from createos_cli.commands.common import _version_callback, app
from createos_cli.logging_utils import configure_logging


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show createos version and exit.",
            is_eager=True,
            callback=_version_callback,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose debug logging."),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write this run's logs to the given file."),
    ] = None,
) -> None:
    """CreateOS deployment CLI. Requires CREATEOS_API_KEY; CREATEOS_API_URL is optional."""
    configure_logging(log_file=log_file, verbose=verbose)


if __name__ == "__main__":
    app()
