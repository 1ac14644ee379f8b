"""Unit tests for the HTTP gateway (janrain/core/client.py)."""
import json

import pytest
import requests

from janrain.core import CaptureClient, JanrainAPIError, flatten_params


def test_request_sends_form_body_without_auth(capture_client, http):
    http.queue({"stat": "ok"})

    body = capture_client.request("https://capture.example", "/entity", {"type_name": "user"})

    assert body == {"stat": "ok"}
    call = http.last
    assert call["method"] == "GET"
    assert call["url"] == "https://capture.example/entity"
    assert call["data"] == {"type_name": "user"}
    assert call["auth"] is None
    assert call["headers"] == {"Accept": "application/json"}


def test_request_attaches_basic_auth_when_both_credentials_given(capture_client, http):
    http.queue({"stat": "ok"})

    capture_client.request("https://capture.example", "/clients/list", {}, "post", "id", "secret")

    assert http.last["auth"] == ("id", "secret")
    assert http.last["method"] == "POST"


def test_request_skips_auth_when_secret_missing(capture_client, http):
    http.queue({"stat": "ok"})

    capture_client.request("https://capture.example", "/entity", {}, "GET", "id", None)

    assert http.last["auth"] is None


def test_request_uses_custom_accept_header(capture_client, http):
    http.queue({"stat": "ok"})

    capture_client.request("https://capture.example", "/x", {}, accept_header="text/plain")

    assert http.last["headers"] == {"Accept": "text/plain"}


def test_request_passes_configured_timeout(config, http):
    http.queue({"stat": "ok"})
    client = CaptureClient(config.with_overrides(request_timeout=3.5))

    client.request("https://capture.example", "/x", {})

    assert http.last["timeout"] == 3.5


def test_request_logs_error_for_non_ok_stat(capture_client, http, logger):
    response = {"stat": "error", "code": 200, "error": "invalid_argument"}
    http.queue(response)

    body = capture_client.request(
        "https://capture.example", "/entity.find", {"filter": "x"}, "GET", "owner-id", "owner-secret"
    )

    assert body == response
    logger.error.assert_called_once()
    args = logger.error.call_args[0]
    assert args[1] == "https://capture.example/entity.find"
    assert json.loads(args[2]) == {"filter": "x"}
    assert args[3] == "GET"
    assert args[4] == "owner-id"
    assert json.loads(args[5]) == response


def test_request_does_not_log_ok_or_stat_less_bodies(capture_client, http, logger):
    http.queue({"stat": "ok"})
    http.queue([{"version": "HEAD", "change": "init"}])
    http.queue({"errors": ["not found"]})

    capture_client.request("https://capture.example", "/a", {})
    capture_client.request("https://config.example", "/b", {})
    capture_client.request("https://config.example", "/c", {})

    logger.error.assert_not_called()


def test_request_raises_on_non_json_body_without_logging(capture_client, http, logger):
    http.queue(status_code=502, text="<html>Bad Gateway</html>")

    with pytest.raises(JanrainAPIError) as exc_info:
        capture_client.request("https://capture.example", "/entity", {})

    assert exc_info.value.status_code == 502
    assert exc_info.value.endpoint == "https://capture.example/entity"
    assert "Bad Gateway" in exc_info.value.message
    logger.error.assert_not_called()


def test_request_propagates_transport_errors(capture_client, monkeypatch, logger):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "request", boom)

    with pytest.raises(requests.ConnectionError):
        capture_client.request("https://capture.example", "/entity", {})
    logger.error.assert_not_called()


def test_request_returns_json_error_body_on_http_error_status(capture_client, http):
    http.queue({"stat": "error", "error": "invalid_client"}, status_code=401)

    body = capture_client.request("https://capture.example", "/oauth/token", {}, "POST")

    assert body["error"] == "invalid_client"


def test_fetch_text_returns_raw_body(capture_client, http):
    http.queue(text="janrain.capture.ui.handleCaptureResponse(...)")

    text = capture_client.fetch_text("https://cdn.example/flow.js:app:en-US:HEAD:standard")

    assert text.startswith("janrain.capture.ui")
    assert http.last["url"] == "https://cdn.example/flow.js:app:en-US:HEAD:standard"


def test_fetch_text_raises_on_http_error(capture_client, http):
    http.queue(status_code=404, text="Not Found")

    with pytest.raises(JanrainAPIError) as exc_info:
        capture_client.fetch_text("https://cdn.example/missing")
    assert exc_info.value.status_code == 404


# ─────────────────────────────────────────────────────────────────────────────
# flatten_params
# ─────────────────────────────────────────────────────────────────────────────
def test_flatten_params_drops_none_and_stringifies_scalars():
    assert flatten_params({"a": None, "b": 3, "c": "x"}) == {"b": "3", "c": "x"}


def test_flatten_params_encodes_booleans_as_digits():
    assert flatten_params({"optIn": True, "optOut": False}) == {"optIn": "1", "optOut": "0"}


def test_flatten_params_expands_nested_structures():
    params = {"profile": {"name": "Ann", "tags": ["a", "b"]}}

    assert flatten_params(params) == {
        "profile[name]": "Ann",
        "profile[tags][0]": "a",
        "profile[tags][1]": "b",
    }


def test_flatten_params_accepts_none():
    assert flatten_params(None) == {}
