"""Module entrypoint for python -m createos_cli."""

from __future__ import annotations

from createos_cli.cli import app
from createos_cli.logging_utils import configure_json_logging

if __name__ == "__main__":
    configure_json_logging()
    app()
