"""HTTP client and response validation for the CreateOS REST API."""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from createos_cli import __version__
from createos_cli.config import ClientConfig
from createos_cli.errors import ApplicationError, ProtocolError, TransportError
from createos_cli.logging_utils import get_logger

LOGGER = get_logger()

SUCCESS_STATUS = "success"
_MISSING = object()

Opener = Callable[[urllib.request.Request], Any]


@dataclass(frozen=True)
class Endpoint:
    """One API call: HTTP method, path below the base URL, optional JSON body."""

    method: str
    path: str
    body: Any = None
    query: Mapping[str, str | int] = field(default_factory=dict)

    def url(self, base_url: str) -> str:
        """Return the absolute request URL for a base URL."""
        url = f"{base_url}{self.path}"
        if self.query:
            url = f"{url}?{urllib.parse.urlencode(self.query)}"
        return url


@dataclass(frozen=True)
class Success:
    """Response classified as successful; carries the parsed JSON value."""

    value: Any


@dataclass(frozen=True)
class Failure:
    """Response classified as an application-level failure."""

    message: str


ApiResponse = Success | Failure


def is_present(value: Any) -> bool:
    """Mirror jq's alternative operator: null and false count as absent."""
    return value is not None and value is not False


def _render_message(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def failure_message(parsed: Any) -> str:
    """Pick the operator-facing message from a failure envelope.

    Tries ``data``, then ``error.message``, then ``error``, then the whole
    value; the first present one wins.
    """
    if isinstance(parsed, dict):
        data = parsed.get("data")
        if is_present(data):
            return _render_message(data)
        error = parsed.get("error")
        if isinstance(error, dict) and is_present(error.get("message")):
            return _render_message(error["message"])
        if is_present(error):
            return _render_message(error)
    return _render_message(parsed)


def classify_response(parsed: Any) -> ApiResponse:
    """Classify a parsed response body as Success or Failure.

    Values that are not objects, and objects without a ``status`` field, are
    implicitly successful.
    """
    status = parsed.get("status", _MISSING) if isinstance(parsed, dict) else _MISSING
    if status is _MISSING or status == SUCCESS_STATUS:
        return Success(parsed)
    return Failure(failure_message(parsed))


def parse_body(body: str) -> Any:
    """Parse a response body, raising ProtocolError on malformed JSON."""
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        snippet = body.strip()[:200] or "<empty>"
        raise ProtocolError(f"CreateOS API returned a non-JSON response: {snippet}") from exc


def validate_response(body: str) -> str:
    """Validate a raw response body and return it unchanged on success."""
    result = classify_response(parse_body(body))
    if isinstance(result, Failure):
        raise ApplicationError(result.message)
    return body


class ApiClient:
    """Synchronous CreateOS API client authenticated with a static key header."""

    def __init__(self, config: ClientConfig, opener: Opener | None = None) -> None:
        """Initialize client with connection settings and an optional URL opener."""
        self.config = config
        self._opener = opener or urllib.request.urlopen

    def _build_request(self, endpoint: Endpoint) -> urllib.request.Request:
        headers = {
            "X-Api-Key": self.config.api_key,
            "Accept": "application/json",
            "User-Agent": f"createos-cli/{__version__}",
        }
        data = None
        if endpoint.body is not None:
            data = json.dumps(endpoint.body).encode("utf-8")
            headers["Content-Type"] = "application/json"
        return urllib.request.Request(
            url=endpoint.url(self.config.base_url),
            method=endpoint.method,
            data=data,
            headers=headers,
        )

    def request(self, endpoint: Endpoint) -> str:
        """Perform one request and return the raw response body."""
        request = self._build_request(endpoint)
        LOGGER.debug("%s %s", endpoint.method, request.full_url)
        try:
            with self._opener(request) as response:  # noqa: S310
                raw = response.read()
        except urllib.error.HTTPError as exc:
            # Error statuses still carry a JSON envelope worth reporting.
            LOGGER.warning("%s %s returned HTTP %s", endpoint.method, endpoint.path, exc.code)
            raw = exc.read()
        except (urllib.error.URLError, OSError) as exc:
            reason = getattr(exc, "reason", exc)
            LOGGER.warning("%s %s failed: %s", endpoint.method, endpoint.path, reason)
            raise TransportError(
                f"Could not reach CreateOS API at {self.config.base_url}: {reason}"
            ) from exc
        return raw.decode("utf-8", errors="replace")

    def call(self, endpoint: Endpoint) -> str:
        """Perform one request and validate the response envelope."""
        body = self.request(endpoint)
        try:
            return validate_response(body)
        except ApplicationError as exc:
            LOGGER.warning("%s %s rejected: %s", endpoint.method, endpoint.path, exc)
            raise

    def call_json(self, endpoint: Endpoint) -> Any:
        """Perform one validated request and return the parsed JSON value."""
        return json.loads(self.call(endpoint))
