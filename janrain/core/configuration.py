"""Janrain Configuration API operations (flows, forms, fields).

These endpoints live on the configuration server and answer with plain JSON
(no ``stat`` field); failures are objects carrying an ``errors`` key.
"""
from __future__ import annotations

from .client import CaptureClient, JsonBody


def is_configuration_error(body: JsonBody) -> bool:
    """Return True if a Configuration API response reports errors."""
    return isinstance(body, dict) and "errors" in body


class ConfigurationService:
    """Service for /config/{app}/flows/... on the configuration server."""

    def __init__(self, client: CaptureClient):
        """Initialize configuration service.

        Args:
            client: Shared Capture HTTP client
        """
        self.client = client

    def _get(self, path: str) -> JsonBody:
        config = self.client.config
        creds = config.full_credentials
        return self.client.request(
            config.configuration_server_url,
            path,
            {},
            "GET",
            creds.client_id,
            creds.client_secret,
        )

    def _flow_path(self, flow: str) -> str:
        return f"/config/{self.client.config.app_id}/flows/{flow}"

    def flow_versions(self, flow: str) -> JsonBody:
        """List every version of a flow with its change note.

        Returns:
            List of ``{"change": ..., "version": ...}`` objects
        """
        return self._get(f"{self._flow_path(flow)}/versions")

    def form_configuration(self, form: str, flow: str) -> JsonBody:
        """Return the fields of a form."""
        return self._get(f"{self._flow_path(flow)}/forms/{form}")

    def field_configuration(self, field: str, flow: str) -> JsonBody:
        """Return a single field definition."""
        return self._get(f"{self._flow_path(flow)}/fields/{field}")
