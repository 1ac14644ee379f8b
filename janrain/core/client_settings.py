"""Janrain client and settings operations."""
from __future__ import annotations

from .client import CaptureClient, Credentials, JsonBody


class ClientSettingsService:
    """Service for /clients/list and /settings/items."""

    def __init__(self, client: CaptureClient):
        """Initialize client settings service.

        Args:
            client: Shared Capture HTTP client
        """
        self.client = client

    def clients_list(self) -> JsonBody:
        """List the API clients of the application (owner client only).

        Returns:
            Response carrying ``results``
        """
        creds = self.client.config.full_credentials
        return self.client.request(
            self.client.config.capture_server_url,
            "/clients/list",
            {},
            "GET",
            creds.client_id,
            creds.client_secret,
        )

    def settings_items(self, credentials: Credentials) -> JsonBody:
        """Return every setting visible to a client, application defaults included.

        Args:
            credentials: Client whose settings are read

        Returns:
            Response carrying the ``result`` key/value map
        """
        return self.client.request(
            self.client.config.capture_server_url,
            "/settings/items",
            {},
            "GET",
            credentials.client_id,
            credentials.client_secret,
        )
