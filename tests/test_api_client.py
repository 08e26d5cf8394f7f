"""Tests for the CreateOS HTTP client and response validator."""

from __future__ import annotations

import io
import json
import urllib.error
import urllib.request
from typing import Any

import pytest

from createos_cli.api import endpoints
from createos_cli.api.client import (
    ApiClient,
    Endpoint,
    Failure,
    Success,
    classify_response,
    validate_response,
)
from createos_cli.config import ClientConfig
from createos_cli.errors import ApplicationError, ProtocolError, TransportError


class _FakeResponse:
    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> _FakeResponse:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


class _RecordingOpener:
    def __init__(self, body: Any = None, error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.requests: list[urllib.request.Request] = []

    def __call__(self, request: urllib.request.Request) -> _FakeResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        raw = self.body if isinstance(self.body, bytes) else json.dumps(self.body).encode("utf-8")
        return _FakeResponse(raw)


def _client(opener: _RecordingOpener) -> ApiClient:
    config = ClientConfig(api_key="key-123", base_url="https://api.example.test/")
    return ApiClient(config, opener=opener)


def test_classify_success_status_returns_value() -> None:
    parsed = {"status": "success", "data": {"id": "p1"}}
    assert classify_response(parsed) == Success(parsed)


@pytest.mark.parametrize("parsed", [[1, 2, 3], "text", 42, None, {"data": {"id": "x"}}])
def test_classify_without_status_is_implicit_success(parsed: Any) -> None:
    assert classify_response(parsed) == Success(parsed)


@pytest.mark.parametrize(
    ("parsed", "message"),
    [
        ({"status": "fail", "data": "bad name", "error": {"message": "ignored"}}, "bad name"),
        ({"status": "fail", "error": {"message": "quota exceeded"}}, "quota exceeded"),
        ({"status": "fail", "data": None, "error": "plain error"}, "plain error"),
        ({"status": "fail", "error": {"code": 7}}, '{"code":7}'),
        ({"status": "fail"}, '{"status":"fail"}'),
    ],
)
def test_classify_failure_message_priority(parsed: dict[str, Any], message: str) -> None:
    assert classify_response(parsed) == Failure(message)


def test_validate_response_returns_body_unchanged() -> None:
    body = '{"status": "success",   "data": {"id": "abc"}}'
    assert validate_response(body) == body


def test_validate_response_raises_application_error() -> None:
    with pytest.raises(ApplicationError) as excinfo:
        validate_response(json.dumps({"status": "fail", "data": "Project exists"}))
    assert str(excinfo.value) == "Project exists"


def test_validate_response_rejects_non_json() -> None:
    with pytest.raises(ProtocolError):
        validate_response("<html>Bad Gateway</html>")


def test_request_sends_key_header_and_json_body() -> None:
    opener = _RecordingOpener({"status": "success", "data": {"id": "d1"}})
    endpoint = Endpoint("POST", "/v1/projects/p1/deployments", body={"image": 'say "hi"\\'})

    _client(opener).call(endpoint)

    request = opener.requests[0]
    assert request.full_url == "https://api.example.test/v1/projects/p1/deployments"
    assert request.get_method() == "POST"
    assert request.get_header("X-api-key") == "key-123"
    assert request.get_header("Content-type") == "application/json"
    assert json.loads(request.data.decode("utf-8")) == {"image": 'say "hi"\\'}


def test_request_without_body_omits_content_type() -> None:
    opener = _RecordingOpener({"status": "success", "data": []})
    _client(opener).call(Endpoint("GET", "/v1/projects", query={"limit": 5}))

    request = opener.requests[0]
    assert request.full_url == "https://api.example.test/v1/projects?limit=5"
    assert request.data is None
    assert request.get_header("Content-type") is None


def test_http_error_body_is_validated() -> None:
    body = io.BytesIO(json.dumps({"status": "fail", "data": "Unauthorized"}).encode("utf-8"))
    error = urllib.error.HTTPError("https://api.example.test", 401, "Unauthorized", None, body)
    opener = _RecordingOpener(error=error)

    with pytest.raises(ApplicationError, match="Unauthorized"):
        _client(opener).call(Endpoint("GET", "/v1/projects"))


def test_connection_failure_raises_transport_error() -> None:
    opener = _RecordingOpener(error=urllib.error.URLError("connection refused"))
    with pytest.raises(TransportError, match="connection refused"):
        _client(opener).call(Endpoint("GET", "/v1/projects"))


def test_timeout_raises_transport_error() -> None:
    opener = _RecordingOpener(error=TimeoutError("timed out"))
    with pytest.raises(TransportError):
        _client(opener).request(Endpoint("GET", "/v1/projects"))


def test_call_json_parses_validated_body() -> None:
    opener = _RecordingOpener({"status": "success", "data": {"logs": ["a", "b"]}})
    parsed = _client(opener).call_json(Endpoint("GET", "/v1/logs"))
    assert parsed["data"]["logs"] == ["a", "b"]


def test_ids_are_escaped_as_single_path_segments() -> None:
    opener = _RecordingOpener({"status": "success", "data": {"id": "d1"}})

    _client(opener).call(endpoints.trigger_deployment("p1?x=", "main"))
    _client(opener).call(endpoints.get_deployment("team/app", "d#1"))

    assert opener.requests[0].full_url == (
        "https://api.example.test/v1/projects/p1%3Fx%3D/deployments/trigger"
    )
    assert opener.requests[1].full_url == (
        "https://api.example.test/v1/projects/team%2Fapp/deployments/d%231"
    )


def test_project_create_serialises_type_key() -> None:
    request = endpoints.ProjectCreate("api", "API", project_type="vcs")
    assert request.to_dict()["type"] == "vcs"
