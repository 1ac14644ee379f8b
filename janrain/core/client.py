"""Low-level HTTP client for the Janrain Capture API.

Handles basic-auth credentials, form encoding and JSON decoding for every
service module.
"""
from __future__ import annotations
import json
import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, NamedTuple, Optional, Union

import requests

from .exceptions import JanrainAPIError

if TYPE_CHECKING:
    from janrain.config.settings import JanrainConfig

JsonBody = Union[Dict[str, Any], list]


class Credentials(NamedTuple):
    """Client id/secret pair sent as HTTP basic auth."""
    client_id: str
    client_secret: str


def flatten_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Flatten a parameter map into scalar form fields.

    Nested mappings and sequences become ``key[sub]`` / ``key[0]`` fields,
    ``None`` values are dropped and booleans are sent as ``1``/``0``.

    Args:
        params: Parameter map, possibly nested

    Returns:
        Ordered dict of string form fields
    """
    flat: Dict[str, str] = {}

    def _add(key: str, value: Any) -> None:
        if value is None:
            return
        if isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                _add(f"{key}[{sub_key}]", sub_value)
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                _add(f"{key}[{index}]", item)
        elif isinstance(value, bool):
            flat[key] = "1" if value else "0"
        else:
            flat[key] = str(value)

    for key, value in (params or {}).items():
        _add(str(key), value)
    return flat


class CaptureClient:
    """HTTP gateway shared by all Janrain service modules.

    Every call is a single synchronous request; nothing is retried. Responses
    are returned as decoded JSON without validation. A JSON object whose
    ``stat`` is present and not ``"ok"`` is logged at error level and still
    returned to the caller.

    Usage:
        client = CaptureClient(config)
        body = client.request(config.capture_server_url, "/entity", {"type_name": "user"})
    """

    def __init__(self, config: "JanrainConfig", logger: Optional[logging.Logger] = None):
        """Initialize the gateway.

        Args:
            config: Shared client configuration
            logger: Leveled logger; defaults to this module's logger
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

    def request(
        self,
        base_url: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        accept_header: str = "application/json",
    ) -> JsonBody:
        """Call a Janrain endpoint and return the decoded JSON body.

        Parameters are always sent as a form-encoded body, including for
        GET calls, which is what the Capture API expects.

        Args:
            base_url: Server base URL
            path: Endpoint path appended to base_url
            params: Form fields
            method: HTTP method
            client_id: Basic-auth user, only sent together with client_secret
            client_secret: Basic-auth password
            accept_header: Accept header value

        Returns:
            Decoded JSON document

        Raises:
            JanrainAPIError: If the body is not valid JSON
            requests.RequestException: On transport failure
        """
        url = f"{base_url}{path}"
        method = method.upper()
        data = flatten_params(params)
        auth = None
        if client_id is not None and client_secret is not None:
            auth = (client_id, client_secret)

        self.logger.debug("Janrain %s %s", method, url)
        resp = requests.request(
            method,
            url,
            data=data,
            headers={"Accept": accept_header},
            auth=auth,
            timeout=self.config.request_timeout,
        )

        try:
            body = resp.json()
        except ValueError as exc:
            raise JanrainAPIError(resp.status_code, resp.text, url) from exc

        if isinstance(body, dict) and "stat" in body and body["stat"] != "ok":
            self.logger.error(
                "Janrain request failed || ServiceUrl: %s | Data: %s | Method: %s | ClientId: %s | ResponseBody: %s",
                url,
                json.dumps(data),
                method,
                client_id or "",
                json.dumps(body),
            )
        return body

    def fetch_text(self, url: str) -> str:
        """Fetch a raw text document (the static flow asset).

        Args:
            url: Absolute URL

        Returns:
            Response body as text

        Raises:
            JanrainAPIError: On HTTP status >= 400
            requests.RequestException: On transport failure
        """
        self.logger.debug("Janrain GET %s", url)
        resp = requests.get(url, timeout=self.config.request_timeout)
        self._handle_error(resp)
        return resp.text

    def _handle_error(self, resp: requests.Response) -> None:
        """Raise JanrainAPIError when the response status indicates an error."""
        if resp.status_code >= 400:
            raise JanrainAPIError(resp.status_code, resp.text, resp.url)
