"""Environment-supplied configuration and shared validation helpers."""

from __future__ import annotations

import os
import urllib.parse
from collections.abc import Mapping
from dataclasses import dataclass

from createos_cli.errors import ConfigurationError

API_KEY_ENV = "CREATEOS_API_KEY"
API_URL_ENV = "CREATEOS_API_URL"
DEFAULT_API_URL = "https://api-createos.nodeops.network"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for the CreateOS REST API."""

    api_key: str
    base_url: str = DEFAULT_API_URL

    def __post_init__(self) -> None:
        if not self.api_key.strip():
            raise ConfigurationError(f"{API_KEY_ENV} environment variable is not set")
        base_url = self.base_url.rstrip("/")
        parts = urllib.parse.urlsplit(base_url)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ConfigurationError(
                f"{API_URL_ENV} must be an http(s) URL with a host, got '{self.base_url}'"
            )
        object.__setattr__(self, "base_url", base_url)

    def __repr__(self) -> str:
        return f"ClientConfig(api_key='***', base_url={self.base_url!r})"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build configuration from process environment variables."""
        source = os.environ if environ is None else environ
        api_key = source.get(API_KEY_ENV, "")
        if not api_key.strip():
            raise ConfigurationError(f"{API_KEY_ENV} environment variable is not set")
        base_url = source.get(API_URL_ENV, "").strip() or DEFAULT_API_URL
        return cls(api_key=api_key.strip(), base_url=base_url)


def require_positive_int(value: int, field_name: str) -> int:
    """Validate a positive integer input and return it."""
    if value <= 0:
        raise ValueError(f"{field_name} must be greater than zero.")
    return value


def validate_choice(value: str, field_name: str, allowed: set[str]) -> str:
    """Validate that a string value is within a set of allowed options."""
    if value not in allowed:
        options = ", ".join(sorted(allowed))
        raise ValueError(f"{field_name} must be one of: {options}.")
    return value


def validate_port(value: int) -> int:
    """Validate a TCP port number."""
    if value <= 0 or value > 65535:
        raise ValueError("port must be between 1 and 65535.")
    return value
