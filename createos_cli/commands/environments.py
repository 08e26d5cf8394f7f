"""CLI command registrations."""

from __future__ import annotations

# mypy: ignore-errors
# ruff: noqa: B008,F403,F405,I001
from createos_cli.commands.common import *
from createos_cli.environments import (
    build_env_vars_payload,
    build_rollback_payload,
    find_environment,
    parse_env_pairs,
)


def _fetch_environment(client: ApiClient, project_id: str, environment_id: str) -> dict[str, Any]:
    """Read the current environment object from the project's environment list."""
    listing = client.call_json(endpoints.list_environments(project_id))
    return find_environment(listing, environment_id)


@app.command("env-vars")
def env_vars(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    environment_id: Annotated[str, typer.Argument(help="Environment ID.")],
    pairs: Annotated[
        list[str] | None,
        typer.Argument(metavar="KEY=VALUE...", help="Variables to set on the environment."),
    ] = None,
) -> None:
    """Update environment variables."""
    new_pairs = _checked(parse_env_pairs, pairs or [])
    with _api_errors():
        client = _create_client()
        _info(f"Updating environment variables for environment: {environment_id}")
        current = _fetch_environment(client, project_id, environment_id)
        payload = build_env_vars_payload(current, new_pairs)
        body = client.call(endpoints.update_environment(project_id, environment_id, payload))
        _print_response(body)
    LOGGER.info("Updated %s variable(s) on %s", len(new_pairs), environment_id)


@app.command("rollback")
def rollback(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    environment_id: Annotated[str, typer.Argument(help="Environment ID.")],
    deployment_id: Annotated[str, typer.Argument(help="Deployment ID to roll back to.")],
) -> None:
    """Roll an environment back to an earlier deployment."""
    with _api_errors():
        client = _create_client()
        _info(f"Rolling back environment {environment_id} to deployment {deployment_id}")
        _warn("Note: CreateOS may not support pinning deployments on all project types.")
        current = _fetch_environment(client, project_id, environment_id)
        payload = build_rollback_payload(current, deployment_id)
        body = client.call(endpoints.update_environment(project_id, environment_id, payload))
        _print_response(body)
    _success("Rollback request submitted")


@app.command("analytics")
def analytics(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    environment_id: Annotated[str, typer.Argument(help="Environment ID.")],
) -> None:
    """Show analytics for an environment."""
    with _api_errors():
        client = _create_client()
        _info(f"Getting analytics for environment: {environment_id}")
        _print_response(client.call(endpoints.environment_analytics(project_id, environment_id)))
