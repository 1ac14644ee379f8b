"""Pytest shared fixtures for the Janrain client tests."""
import json
import pathlib
import sys
from typing import Optional
from unittest.mock import MagicMock

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from janrain.config import JanrainConfig
from janrain.core import CaptureClient


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
class _StubResponse:
    def __init__(self, payload=None, status_code: int = 200, text: Optional[str] = None, url: str = ""):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)
        self.url = url

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(response=self)


class StubHttp:
    """Records outbound calls and answers them from a queue of responses."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, payload=None, status_code: int = 200, text: Optional[str] = None):
        self.responses.append(_StubResponse(payload, status_code, text))

    def _next(self, url):
        if not self.responses:
            raise RuntimeError(f"Unexpected HTTP call in unit test: {url}")
        resp = self.responses.pop(0)
        resp.url = url
        return resp

    def request(self, method, url, *args, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        return self._next(url)

    def get(self, url, *args, **kwargs):
        self.calls.append({"method": "GET", "url": url, **kwargs})
        return self._next(url)

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture(autouse=True)
def http(monkeypatch):
    """Stub requests so no unit test reaches the network."""
    stub = StubHttp()
    monkeypatch.setattr(requests, "request", stub.request)
    monkeypatch.setattr(requests, "get", stub.get)
    return stub


# ─────────────────────────────────────────────────────────────────────────────
# Configuration and clients
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def config():
    return JanrainConfig(
        capture_server_url="https://acme.us.janraincapture.com",
        configuration_server_url="https://v1.api.us.janrain.com",
        cdn_url="https://ssl-static.janraincapture.com/widget_data/flow.js",
        full_client_id="owner-id",
        full_client_secret="owner-secret",
        login_client_id="login-id",
        login_client_secret="login-secret",
        app_id="app123",
        locale="en-US",
        flow_name="standard",
    )


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def capture_client(config, logger):
    return CaptureClient(config, logger)


def make_flow_asset(document, stat: str = "ok") -> str:
    """Build a CDN flow asset body around a flow document."""
    return (
        "janrain.capture.ui.handleCaptureResponse("
        + json.dumps({"stat": stat})
        + ")function () { janrain.capture.ui.render("
        + json.dumps(document)
        + "); });"
    )


@pytest.fixture
def flow_asset():
    return make_flow_asset


@pytest.fixture
def flow_document():
    return {
        "fields": {
            "signInForm": {"type": "form", "fields": ["email", "password"]},
            "email": {"type": "email", "label": "Email", "forms": ["signInForm"]},
            "password": {"type": "password", "label": "Password", "forms": ["signInForm"]},
            "welcomeText": {"type": "string", "value": "Welcome back"},
            "emptyForm": {"type": "form", "fields": []},
        },
        "version": "HEAD",
    }
