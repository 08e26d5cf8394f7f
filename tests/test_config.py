"""Tests for environment configuration and validation helpers."""

from __future__ import annotations

import pytest

from createos_cli.config import (
    DEFAULT_API_URL,
    ClientConfig,
    require_positive_int,
    validate_choice,
    validate_port,
)
from createos_cli.errors import ConfigurationError


def test_from_env_requires_api_key() -> None:
    with pytest.raises(ConfigurationError, match="CREATEOS_API_KEY"):
        ClientConfig.from_env({})


def test_from_env_rejects_blank_api_key() -> None:
    with pytest.raises(ConfigurationError):
        ClientConfig.from_env({"CREATEOS_API_KEY": "   "})


def test_from_env_uses_default_url() -> None:
    config = ClientConfig.from_env({"CREATEOS_API_KEY": "k"})
    assert config.base_url == DEFAULT_API_URL
    assert config.api_key == "k"


def test_from_env_strips_trailing_slash() -> None:
    config = ClientConfig.from_env(
        {"CREATEOS_API_KEY": "k", "CREATEOS_API_URL": "http://localhost:8080/"}
    )
    assert config.base_url == "http://localhost:8080"


@pytest.mark.parametrize("url", ["api.example.com", "ftp://api.example.com", "https://"])
def test_from_env_rejects_url_without_http_scheme_or_host(url: str) -> None:
    with pytest.raises(ConfigurationError, match="CREATEOS_API_URL"):
        ClientConfig.from_env({"CREATEOS_API_KEY": "k", "CREATEOS_API_URL": url})


def test_repr_hides_api_key() -> None:
    assert "secret-key" not in repr(ClientConfig(api_key="secret-key"))


def test_validate_choice_rejects_unknown() -> None:
    """Choice validator should list the allowed options."""
    with pytest.raises(ValueError, match="image, upload, vcs"):
        validate_choice("ftp", "type", {"vcs", "image", "upload"})


def test_require_positive_int() -> None:
    assert require_positive_int(5, "limit") == 5
    with pytest.raises(ValueError):
        require_positive_int(0, "limit")


def test_validate_port_bounds() -> None:
    assert validate_port(3000) == 3000
    with pytest.raises(ValueError):
        validate_port(70000)
