"""CLI command registrations."""

from __future__ import annotations

# mypy: ignore-errors
# ruff: noqa: B008,F403,F405,I001
from createos_cli.commands.common import *
from createos_cli.upload import UploadMode, build_upload_payload, collect_upload_entries


def _log_lines(parsed: Any) -> list[str]:
    """Select the printable log payload: data.logs, then data, then everything."""
    selected = parsed
    if isinstance(parsed, dict):
        data = parsed.get("data")
        if isinstance(data, dict) and is_present(data.get("logs")):
            selected = data["logs"]
        elif is_present(data):
            selected = data
    if isinstance(selected, str):
        return [selected]
    if isinstance(selected, list):
        return [item if isinstance(item, str) else json.dumps(item) for item in selected]
    return [json.dumps(selected, indent=2)]


@app.command("deploy")
def deploy(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    branch: Annotated[str, typer.Argument(help="Branch to build.")] = endpoints.DEFAULT_BRANCH,
) -> None:
    """Trigger a deployment from a VCS branch."""
    with _api_errors():
        client = _create_client()
        _info(f"Triggering deployment for project: {project_id} (branch: {branch})")
        body = client.call(endpoints.trigger_deployment(project_id, branch))
        _print_response(body)
        deployment_id = _response_id(body)
    if deployment_id is not None:
        _success(f"Deployment triggered: {deployment_id}")


@app.command("deploy-image")
def deploy_image(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    image: Annotated[
        str,
        typer.Argument(help="Docker image reference, e.g. nginx:latest or myapp:v1.0.0."),
    ],
) -> None:
    """Deploy a container image."""
    with _api_errors():
        client = _create_client()
        _info(f"Deploying image: {image} to project: {project_id}")
        _print_response(client.call(endpoints.deploy_image(project_id, image)))


@app.command("upload")
def upload(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    path: Annotated[Path, typer.Argument(help="File or directory to upload.")],
    mode: Annotated[
        str,
        typer.Argument(help="base64 (supports binaries) or text (UTF-8 only)."),
    ] = UploadMode.BASE64.value,
) -> None:
    """Upload files to deploy."""
    allowed_modes = {item.value for item in UploadMode}
    upload_mode = UploadMode(_checked(validate_choice, mode, "mode", allowed_modes))
    with _api_errors():
        client = _create_client()
        kind = "directory" if path.is_dir() else "file"
        _info(f"Uploading {kind} ({upload_mode.value}): {path}")
        entries = collect_upload_entries(path, upload_mode)
        endpoint = endpoints.upload_files(
            project_id,
            build_upload_payload(entries),
            binary_safe=upload_mode.binary_safe,
        )
        _info(f"Uploading {len(entries)} file(s) to CreateOS endpoint: {endpoint.path}")
        _print_response(client.call(endpoint))


@app.command("status")
def status(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    deployment_id: Annotated[
        str | None,
        typer.Argument(help="Deployment ID; omit to list the latest deployments."),
    ] = None,
) -> None:
    """Check deployment status."""
    with _api_errors():
        client = _create_client()
        if deployment_id:
            _info(f"Getting deployment status: {deployment_id}")
            endpoint = endpoints.get_deployment(project_id, deployment_id)
        else:
            _info(f"Getting latest deployments for project: {project_id}")
            endpoint = endpoints.list_deployments(project_id, endpoints.STATUS_LIST_LIMIT)
        _print_response(client.call(endpoint))


@app.command("logs")
def logs(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    deployment_id: Annotated[str, typer.Argument(help="Deployment ID.")],
    kind: Annotated[str, typer.Argument(help="Log stream: build or runtime.")] = "runtime",
    since_seconds: Annotated[
        int,
        typer.Option("--since-seconds", help="Runtime log window in seconds."),
    ] = endpoints.RUNTIME_LOG_WINDOW_SECONDS,
) -> None:
    """View deployment logs."""
    _checked(validate_choice, kind, "log type", endpoints.LOG_KINDS)
    _checked(require_positive_int, since_seconds, "since-seconds")
    with _api_errors():
        client = _create_client()
        _info(f"Getting {kind} logs for deployment: {deployment_id}")
        parsed = client.call_json(
            endpoints.deployment_logs(project_id, deployment_id, kind, since_seconds)
        )
    for line in _log_lines(parsed):
        typer.echo(line)


@app.command("list-deployments")
def list_deployments(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    limit: Annotated[
        int,
        typer.Argument(help="Maximum number of deployments to list."),
    ] = endpoints.DEFAULT_LIST_LIMIT,
) -> None:
    """List deployments for a project."""
    _checked(require_positive_int, limit, "limit")
    with _api_errors():
        client = _create_client()
        _info(f"Listing deployments for project: {project_id}")
        _print_response(client.call(endpoints.list_deployments(project_id, limit)))


@app.command("wake")
def wake(
    project_id: Annotated[str, typer.Argument(help="Project ID.")],
    deployment_id: Annotated[str, typer.Argument(help="Deployment ID.")],
) -> None:
    """Wake a sleeping deployment."""
    with _api_errors():
        client = _create_client()
        _info(f"Waking deployment: {deployment_id}")
        _print_response(client.call(endpoints.wake_deployment(project_id, deployment_id)))
