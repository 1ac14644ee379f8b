"""Janrain Social Login (Engage) provider lookups."""
from __future__ import annotations

from .client import CaptureClient, JsonBody


class SocialService:
    """Service for the /api/v2 provider endpoints on the RPX realm host.

    Both calls are anonymous POSTs.
    """

    def __init__(self, client: CaptureClient):
        self.client = client

    def get_available_providers(self, rpx_url: str) -> JsonBody:
        """Providers configured for the application.

        Returns:
            Response carrying ``signin``, ``social`` and ``share`` lists
        """
        return self.client.request(rpx_url, "/api/v2/get_available_providers", {}, "POST")

    def providers(self, rpx_url: str) -> JsonBody:
        """Sign-in and social providers with the share widget configuration.

        Returns:
            Response carrying ``signin``, ``social`` and ``shareWidget``
        """
        return self.client.request(rpx_url, "/api/v2/providers", {}, "POST")
