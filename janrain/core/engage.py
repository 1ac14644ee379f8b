"""Social login URL construction."""
from __future__ import annotations
from urllib.parse import urlencode

from .client import CaptureClient


def build_social_login_url(rpx_url: str, social_media: str, token_url: str, language: str, app_id: str) -> str:
    """Return the popup start URL of a social provider.

    Values are form-encoded (space as ``+``).
    """
    query = urlencode({
        "language_preference": language,
        "token_url": token_url,
        "display": "popup",
        "applicationId": app_id,
    })
    return f"{rpx_url}/{social_media}/start?{query}"


class EngageService:
    """Builds Engage URLs for the configured application. No network calls."""

    def __init__(self, client: CaptureClient):
        self.client = client

    def get_social_login_url(self, rpx_url: str, social_media: str, token_url: str, language: str) -> str:
        """Return the social login URL for a provider.

        Args:
            rpx_url: RPX realm base URL, e.g. "https://acme.rpxnow.com"
            social_media: Provider id, e.g. "facebook"
            token_url: URL the provider returns to
            language: Language preference

        Returns:
            Absolute login URL
        """
        return build_social_login_url(rpx_url, social_media, token_url, language, self.client.config.app_id)
