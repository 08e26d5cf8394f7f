"""CLI command registrations."""

from __future__ import annotations

# mypy: ignore-errors
# ruff: noqa: B008,F403,F405,I001
from createos_cli.commands.common import *


@app.command("create-project")
def create_project(
    name: Annotated[str, typer.Argument(help="Unique project name.")],
    display_name: Annotated[str, typer.Argument(help="Human-readable project name.")],
    project_type: Annotated[
        str,
        typer.Argument(metavar="TYPE", help="Project type: vcs, image or upload."),
    ] = endpoints.DEFAULT_PROJECT_TYPE,
    runtime: Annotated[
        str,
        typer.Argument(help="Runtime identifier, e.g. node:20 or python:3.12."),
    ] = endpoints.DEFAULT_RUNTIME,
    port: Annotated[int, typer.Argument(help="Application port.")] = endpoints.DEFAULT_PORT,
) -> None:
    """Create a new project."""
    _checked(validate_choice, project_type, "type", endpoints.PROJECT_TYPES)
    _checked(validate_port, port)
    request = endpoints.ProjectCreate(
        unique_name=name,
        display_name=display_name,
        project_type=project_type,
        settings=endpoints.ProjectSettings(runtime=runtime, port=port),
    )
    with _api_errors():
        client = _create_client()
        _info(f"Creating project: {name}")
        body = client.call(endpoints.create_project(request))
        _print_response(body)
        project_id = _response_id(body)
        if project_id is None:
            raise ApplicationError("Failed to create project: response carried no project id")
    LOGGER.info("Created project %s (%s)", name, project_id)
    _success(f"Project created: {project_id}")


@app.command("list-projects")
def list_projects(
    limit: Annotated[
        int,
        typer.Argument(help="Maximum number of projects to list."),
    ] = endpoints.DEFAULT_LIST_LIMIT,
) -> None:
    """List projects."""
    _checked(require_positive_int, limit, "limit")
    with _api_errors():
        client = _create_client()
        _info(f"Listing projects (limit: {limit})")
        _print_response(client.call(endpoints.list_projects(limit)))
