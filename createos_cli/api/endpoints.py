"""Typed request records and endpoint builders for CreateOS resources."""

from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from typing import Any

from createos_cli.api.client import Endpoint

PROJECT_TYPES = {"vcs", "image", "upload"}
LOG_KINDS = {"build", "runtime"}
DEFAULT_PROJECT_TYPE = "upload"
DEFAULT_RUNTIME = "node:20"
DEFAULT_PORT = 3000
DEFAULT_BRANCH = "main"
DEFAULT_LIST_LIMIT = 10
STATUS_LIST_LIMIT = 5
RUNTIME_LOG_WINDOW_SECONDS = 300


@dataclass(frozen=True)
class ProjectSettings:
    """Runtime settings applied to a new project."""

    runtime: str = DEFAULT_RUNTIME
    port: int = DEFAULT_PORT

    def to_dict(self) -> dict[str, Any]:
        return {"runtime": self.runtime, "port": self.port}


@dataclass(frozen=True)
class ProjectCreate:
    """Request body for project creation."""

    unique_name: str
    display_name: str
    project_type: str = DEFAULT_PROJECT_TYPE
    settings: ProjectSettings = ProjectSettings()

    def to_dict(self) -> dict[str, Any]:
        return {
            "uniqueName": self.unique_name,
            "displayName": self.display_name,
            "type": self.project_type,
            "source": {},
            "settings": self.settings.to_dict(),
        }


def _segment(value: str) -> str:
    """Escape one id so it stays a single URL path segment."""
    return urllib.parse.quote(value, safe="")


def _project_path(project_id: str) -> str:
    return f"/v1/projects/{_segment(project_id)}"


def _deployment_path(project_id: str, deployment_id: str) -> str:
    return f"{_project_path(project_id)}/deployments/{_segment(deployment_id)}"


def _environment_path(project_id: str, environment_id: str) -> str:
    return f"{_project_path(project_id)}/environments/{_segment(environment_id)}"


def create_project(request: ProjectCreate) -> Endpoint:
    return Endpoint("POST", "/v1/projects", body=request.to_dict())


def list_projects(limit: int = DEFAULT_LIST_LIMIT) -> Endpoint:
    return Endpoint("GET", "/v1/projects", query={"limit": limit})


def trigger_deployment(project_id: str, branch: str = DEFAULT_BRANCH) -> Endpoint:
    """Build a deployment from a VCS branch."""
    return Endpoint(
        "POST",
        f"{_project_path(project_id)}/deployments/trigger",
        body={"branch": branch},
    )


def deploy_image(project_id: str, image: str) -> Endpoint:
    """Create a deployment from a container image reference."""
    return Endpoint("POST", f"{_project_path(project_id)}/deployments", body={"image": image})


def upload_files(project_id: str, payload: dict[str, Any], *, binary_safe: bool) -> Endpoint:
    """Upload a batch of files; base64 variant accepts binaries, the other UTF-8 only."""
    path = f"{_project_path(project_id)}/deployments/files"
    if binary_safe:
        path = f"{path}/base64"
    return Endpoint("PUT", path, body=payload)


def get_deployment(project_id: str, deployment_id: str) -> Endpoint:
    return Endpoint("GET", _deployment_path(project_id, deployment_id))


def list_deployments(project_id: str, limit: int = DEFAULT_LIST_LIMIT) -> Endpoint:
    return Endpoint("GET", f"{_project_path(project_id)}/deployments", query={"limit": limit})


def deployment_logs(
    project_id: str,
    deployment_id: str,
    kind: str = "runtime",
    since_seconds: int = RUNTIME_LOG_WINDOW_SECONDS,
) -> Endpoint:
    """Fetch build logs, or runtime logs windowed to the last ``since_seconds``."""
    path = f"{_deployment_path(project_id, deployment_id)}/logs/{_segment(kind)}"
    if kind == "build":
        return Endpoint("GET", path)
    return Endpoint("GET", path, query={"since-seconds": since_seconds})


def wake_deployment(project_id: str, deployment_id: str) -> Endpoint:
    return Endpoint("POST", f"{_deployment_path(project_id, deployment_id)}/wake")


def list_environments(project_id: str) -> Endpoint:
    return Endpoint("GET", f"{_project_path(project_id)}/environments")


def update_environment(project_id: str, environment_id: str, payload: dict[str, Any]) -> Endpoint:
    """Replace environment settings; the API accepts only the full object."""
    return Endpoint("PUT", _environment_path(project_id, environment_id), body=payload)


def environment_analytics(project_id: str, environment_id: str) -> Endpoint:
    return Endpoint("GET", f"{_environment_path(project_id, environment_id)}/analytics")
