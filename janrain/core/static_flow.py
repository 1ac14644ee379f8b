"""Static flow assets served by the Janrain CDN.

The CDN serves each flow as a JavaScript snippet of the form::

    janrain.capture.ui.handleCaptureResponse({"stat": "ok"})function () { janrain.capture.ui.render({...}); });

The status object precedes the render marker and the flow document is the
argument of the render call. The asset format is not a documented API, so
the markers below must match it literally.
"""
from __future__ import annotations
import json
import threading
from typing import Any, Dict, Optional

from .client import CaptureClient


RENDER_MARKER = "function () { janrain.capture.ui.render("
RESPONSE_MARKER = "janrain.capture.ui.handleCaptureResponse("
HEAD_VERSION = "HEAD"

FlowDocument = Dict[str, Any]

_decoder = json.JSONDecoder()


def flow_asset_url(cdn_url: str, app_id: str, locale: str, version: str, flow_name: str) -> str:
    """Return the colon-joined asset URL of a flow."""
    return f"{cdn_url}:{app_id}:{locale}:{version}:{flow_name}"


def _decode_leading_json(text: str) -> Any:
    """Decode the JSON value at the start of text, ignoring what follows it."""
    value, _ = _decoder.raw_decode(text.strip())
    return value


def decode_flow_asset(raw_text: str) -> Optional[FlowDocument]:
    """Extract the flow document from a CDN flow asset.

    Args:
        raw_text: Asset body as served by the CDN

    Returns:
        Decoded flow document, or None if the asset reports a non-ok status
        or cannot be decoded
    """
    status_segment, marker, payload = raw_text.partition(RENDER_MARKER)
    if not marker:
        return None

    # Status object, minus the wrapping call and its closing delimiter
    status_segment = status_segment.replace(RESPONSE_MARKER, "")[:-1]
    try:
        status = _decode_leading_json(status_segment)
    except ValueError:
        return None
    if not isinstance(status, dict) or status.get("stat") != "ok":
        return None

    # Flow document, minus the closing syntax of the render wrapper
    payload = payload.replace(RENDER_MARKER, "")
    try:
        document = _decode_leading_json(payload)
    except ValueError:
        return None
    return document if isinstance(document, dict) else None


class StaticFlow:
    """Fetches and memoizes the flow document of the configured flow.

    ``get_flow_content`` fetches the HEAD version in the configured locale at
    most once per instance (a failed fetch is retried on the next call).
    ``get_flow_by_version_and_locale`` always fetches.
    """

    def __init__(self, client: CaptureClient):
        """Initialize static flow accessor.

        Args:
            client: Shared Capture HTTP client
        """
        self.client = client
        self._flow_content: Optional[FlowDocument] = None
        self._lock = threading.Lock()

    def get_flow_content(self) -> Optional[FlowDocument]:
        """Return the memoized HEAD flow document for the configured locale."""
        if self._flow_content:
            return self._flow_content
        with self._lock:
            if not self._flow_content:
                self._flow_content = self._get_file(HEAD_VERSION, self.client.config.locale)
        return self._flow_content

    def get_flow_by_version_and_locale(self, version: str, locale: str) -> Optional[FlowDocument]:
        """Fetch a specific flow version and locale, bypassing the memo."""
        return self._get_file(version, locale)

    def _get_file(self, version: str, locale: str) -> Optional[FlowDocument]:
        config = self.client.config
        url = flow_asset_url(config.cdn_url, config.app_id, locale, version, config.flow_name)
        raw_text = self.client.fetch_text(url)
        document = decode_flow_asset(raw_text)
        if document is None:
            self.client.logger.debug("Flow asset %s could not be decoded", url)
        return document
