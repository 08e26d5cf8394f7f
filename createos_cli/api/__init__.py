"""CreateOS REST API client exports."""

from __future__ import annotations

from createos_cli.api.client import (
    ApiClient,
    ApiResponse,
    Endpoint,
    Failure,
    Success,
    classify_response,
    validate_response,
)

__all__ = [
    "ApiClient",
    "ApiResponse",
    "Endpoint",
    "Failure",
    "Success",
    "classify_response",
    "validate_response",
]
