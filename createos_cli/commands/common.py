"""Shared CLI state and helpers for createos command modules."""

from __future__ import annotations

# ruff: noqa: F401
import json
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape

from createos_cli import __version__
from createos_cli.api import endpoints
from createos_cli.api.client import ApiClient, is_present, parse_body
from createos_cli.config import (
    ClientConfig,
    require_positive_int,
    validate_choice,
    validate_port,
)
from createos_cli.errors import ApplicationError, CreateOSError
from createos_cli.logging_utils import configure_logging, get_logger

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)
LOGGER = get_logger()


def _version_callback(value: bool) -> None:
    """Print package version and exit when requested."""
    if value:
        console.print(__version__)
        raise typer.Exit()


def _info(message: str) -> None:
    err_console.print(f"[blue][INFO][/blue] {escape(message)}")


def _success(message: str) -> None:
    err_console.print(f"[green][SUCCESS][/green] {escape(message)}")


def _warn(message: str) -> None:
    err_console.print(f"[yellow][WARN][/yellow] {escape(message)}")


def _error_text(exc: CreateOSError) -> str:
    if isinstance(exc, ApplicationError):
        return f"CreateOS API error: {exc}"
    return str(exc)


@contextmanager
def _api_errors() -> Iterator[None]:
    """Report CreateOS failures to the operator and exit non-zero."""
    try:
        yield
    except CreateOSError as exc:
        LOGGER.error("%s: %s", type(exc).__name__, exc)
        err_console.print(f"[red][ERROR][/red] {escape(_error_text(exc))}")
        raise typer.Exit(code=1) from exc


def _create_client() -> ApiClient:
    """Create an API client from environment configuration."""
    return ApiClient(ClientConfig.from_env())


def _checked(validator: Callable[..., Any], *args: Any) -> Any:
    """Run a config validator and convert failures into usage errors."""
    try:
        return validator(*args)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _print_response(body: str) -> None:
    """Pretty-print a validated JSON response body."""
    console.print_json(body)


def _response_id(body: str) -> str | None:
    """Return ``data.id`` from a response body when present."""
    parsed = parse_body(body)
    data = parsed.get("data") if isinstance(parsed, dict) else None
    if isinstance(data, dict) and data.get("id"):
        return str(data["id"])
    return None


__all__ = [name for name in globals() if not name.startswith("__")]
