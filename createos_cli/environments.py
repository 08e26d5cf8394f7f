"""Environment lookup and settings merge for env-vars and rollback updates."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from createos_cli.errors import NotFoundError

DEFAULT_RESOURCES: dict[str, int] = {"cpu": 200, "memory": 500, "replicas": 1}


def _object_or(value: Any, default: dict[str, Any]) -> dict[str, Any]:
    """Return a deep copy of a non-empty JSON object, else of the default."""
    return copy.deepcopy(value if isinstance(value, dict) and value else default)


@dataclass(frozen=True)
class EnvironmentUpdate:
    """Full replacement body for ``PUT /environments/{id}``."""

    display_name: Any
    unique_name: Any
    description: str
    branch: Any
    is_auto_promote_enabled: bool
    resources: dict[str, Any]
    settings: dict[str, Any] = field(default_factory=lambda: {"runEnvs": {}})
    deployment_id: str | None = None

    @classmethod
    def from_existing(cls, existing: Mapping[str, Any]) -> EnvironmentUpdate:
        """Carry the updatable fields of a fetched environment object."""
        return cls(
            display_name=existing.get("displayName"),
            unique_name=existing.get("uniqueName"),
            description=existing.get("description") or "",
            branch=existing.get("branch"),
            is_auto_promote_enabled=bool(existing.get("isAutoPromoteEnabled")),
            resources=_object_or(existing.get("resources"), DEFAULT_RESOURCES),
            settings=_object_or(existing.get("settings"), {"runEnvs": {}}),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "displayName": self.display_name,
            "uniqueName": self.unique_name,
            "description": self.description,
            "branch": self.branch,
            "isAutoPromoteEnabled": self.is_auto_promote_enabled,
            "resources": self.resources,
            "settings": self.settings,
        }
        if self.deployment_id is not None:
            # API variants disagree on the field name.
            payload["deploymentId"] = self.deployment_id
            payload["projectDeploymentId"] = self.deployment_id
        return payload


def find_environment(listing: Any, environment_id: str) -> dict[str, Any]:
    """Return the environment with ``environment_id`` from a list response."""
    items = listing.get("data") if isinstance(listing, dict) else listing
    if isinstance(items, list):
        for item in items:
            if isinstance(item, dict) and item.get("id") == environment_id:
                return item
    raise NotFoundError(f"Environment not found: {environment_id}")


def parse_env_pairs(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=value`` arguments; values may themselves contain ``=``."""
    parsed: dict[str, str] = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key.strip():
            raise ValueError(f"Expected KEY=value, got '{pair}'.")
        parsed[key.strip()] = value
    return parsed


def build_env_vars_payload(
    existing: Mapping[str, Any],
    new_pairs: Mapping[str, str],
) -> dict[str, Any]:
    """Merge new runtime variables into an environment's ``settings.runEnvs``."""
    update = EnvironmentUpdate.from_existing(existing)
    current = update.settings.get("runEnvs")
    run_envs = dict(current) if isinstance(current, dict) else {}
    run_envs.update(new_pairs)
    update.settings["runEnvs"] = run_envs
    return update.to_dict()


def build_rollback_payload(existing: Mapping[str, Any], deployment_id: str) -> dict[str, Any]:
    """Point an environment at an earlier deployment (best effort)."""
    update = replace(EnvironmentUpdate.from_existing(existing), deployment_id=deployment_id)
    return update.to_dict()
