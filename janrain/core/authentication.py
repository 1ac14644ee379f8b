"""Janrain authentication and OAuth native-flow operations."""
from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

from .client import CaptureClient, JsonBody


class AuthenticationService:
    """Service for the /access and /oauth endpoints of the Capture API.

    Owner-level /access calls authenticate with the full client; the native
    flow calls are anonymous except token, update_profile_native and
    verify_email_native, which use the login client.
    """

    def __init__(self, client: CaptureClient):
        """Initialize authentication service.

        Args:
            client: Shared Capture HTTP client
        """
        self.client = client

    @property
    def _server_url(self) -> str:
        return self.client.config.capture_server_url

    def _call_as_owner(self, path: str, params: Mapping[str, Any], method: str = "GET") -> JsonBody:
        creds = self.client.config.full_credentials
        return self.client.request(
            self._server_url, path, params, method, creds.client_id, creds.client_secret
        )

    def _call_as_login_client(self, path: str, params: Mapping[str, Any]) -> JsonBody:
        creds = self.client.config.login_credentials
        return self.client.request(
            self._server_url, path, params, "POST", creds.client_id, creds.client_secret
        )

    def _call_anonymous(self, path: str, params: Mapping[str, Any], method: str = "POST") -> JsonBody:
        return self.client.request(self._server_url, path, params, method)

    @staticmethod
    def _flow_params(client_id: str, flow: str, flow_version: str, locale: str) -> Dict[str, Any]:
        return {
            "client_id": client_id,
            "flow": flow,
            "flow_version": flow_version,
            "locale": locale,
        }

    # ─────────────────────────────────────────────────────────────────────────
    # /access
    # ─────────────────────────────────────────────────────────────────────────
    def get_access_token(self, uuid: str, type_name: str, for_client_id: Optional[str] = None) -> JsonBody:
        """Create an access token for a user, on behalf of another client.

        Args:
            uuid: Entity uuid
            type_name: Entity type (usually "user")
            for_client_id: Client the token is issued for

        Returns:
            Response carrying ``accessToken``
        """
        params = {
            "uuid": uuid,
            "type_name": type_name,
            "for_client_id": for_client_id,
        }
        return self._call_as_owner("/access/getAccessToken", params)

    def get_authorization_code(self, uuid: str, type_name: str, for_client_id: str, redirect_uri: str) -> JsonBody:
        """Create an OAuth authorization code for a user.

        Returns:
            Response carrying ``authorizationCode``
        """
        params = {
            "uuid": uuid,
            "type_name": type_name,
            "redirect_uri": redirect_uri,
            "for_client_id": for_client_id,
        }
        return self._call_as_owner("/access/getAuthorizationCode", params)

    def get_creation_token(self, type_name: str, lifetime: str, for_client_id: str) -> JsonBody:
        """Create a token that allows a single entity creation.

        Returns:
            Response carrying ``creation_token``
        """
        params = {
            "type_name": type_name,
            "lifetime": lifetime,
            "for_client_id": for_client_id,
        }
        return self._call_as_owner("/access/getCreationToken", params)

    def get_verification_code(self, uuid: str, type_name: str, attribute_name: str) -> JsonBody:
        """Create a code that sets a time attribute (e.g. emailVerified) when used.

        Returns:
            Response carrying ``verification_code``
        """
        params = {
            "uuid": uuid,
            "type_name": type_name,
            "attribute_name": attribute_name,
        }
        return self._call_as_owner("/access/getVerificationCode", params)

    def use_verification_code(self, verification_code: str) -> JsonBody:
        """Redeem a verification code.

        Returns:
            Response carrying the entity ``uuid``
        """
        params = {"verification_code": verification_code}
        return self._call_anonymous("/access/useVerificationCode", params, method="GET")

    # ─────────────────────────────────────────────────────────────────────────
    # /oauth native flows
    # ─────────────────────────────────────────────────────────────────────────
    def auth_native(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        redirect_uri: str,
        form: str,
        engage_token: str,
        merge_token: str = "",
    ) -> JsonBody:
        """Sign in with a social login (Engage) token.

        The merge token is only sent when it is non-empty.

        Args:
            client_id: Login client id
            flow: Flow name
            flow_version: Flow version
            locale: Locale code
            redirect_uri: Redirect URI registered for the client
            form: Registration form used for two-step registration
            engage_token: Token returned by the social login popup
            merge_token: Token from a previous merge attempt

        Returns:
            Response carrying ``capture_user``, ``access_token`` and
            ``authorization_code``
        """
        params = self._flow_params(client_id, flow, flow_version, locale)
        params.update({
            "redirect_uri": redirect_uri,
            "response_type": "code_and_token",
            "registration_form": form,
            "token": engage_token,
        })
        if merge_token:
            params["merge_token"] = merge_token
        return self._call_anonymous("/oauth/auth_native", params)

    def auth_native_traditional(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        redirect_uri: str,
        form: str,
        form_fields: Mapping[str, Any],
    ) -> JsonBody:
        """Sign in with traditional (email/password) form fields."""
        params = self._flow_params(client_id, flow, flow_version, locale)
        params.update({
            "redirect_uri": redirect_uri,
            "response_type": "code_and_token",
            "form": form,
        })
        params.update(form_fields)
        return self._call_anonymous("/oauth/auth_native_traditional", params)

    def forgot_password_native(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        redirect_uri: str,
        form: str,
        form_fields: Mapping[str, Any],
    ) -> JsonBody:
        """Send a password reset email."""
        params = self._flow_params(client_id, flow, flow_version, locale)
        params.update({
            "redirect_uri": redirect_uri,
            "form": form,
        })
        params.update(form_fields)
        return self._call_anonymous("/oauth/forgot_password_native", params)

    def link_account_native(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        redirect_uri: str,
        form: str,
        token: str,
        access_token: str,
    ) -> JsonBody:
        """Link a social identity to the signed-in user."""
        params = self._flow_params(client_id, flow, flow_version, locale)
        params.update({
            "redirect_uri": redirect_uri,
            "form": form,
            "token": token,
            "access_token": access_token,
        })
        return self._call_anonymous("/oauth/link_account_native", params)

    def register_native(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        redirect_uri: str,
        form: str,
        engage_token: str,
        form_fields: Mapping[str, Any],
    ) -> JsonBody:
        """Complete a social registration started by auth_native."""
        params = self._flow_params(client_id, flow, flow_version, locale)
        params.update({
            "redirect_uri": redirect_uri,
            "response_type": "code_and_token",
            "form": form,
            "token": engage_token,
        })
        params.update(form_fields)
        return self._call_anonymous("/oauth/register_native", params)

    def register_native_traditional(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        redirect_uri: str,
        form: str,
        form_fields: Mapping[str, Any],
    ) -> JsonBody:
        """Register a user with traditional form fields."""
        params = self._flow_params(client_id, flow, flow_version, locale)
        params.update({
            "redirect_uri": redirect_uri,
            "response_type": "code_and_token",
            "form": form,
        })
        params.update(form_fields)
        return self._call_anonymous("/oauth/register_native_traditional", params)

    def token(
        self,
        grant_type: str,
        code: Optional[str] = None,
        redirect_uri: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ) -> JsonBody:
        """Exchange an authorization code or refresh token for an access token.

        Only the parameters relevant to the grant type are sent.

        Args:
            grant_type: "authorization_code" or "refresh_token"
            code: Authorization code (authorization_code grant)
            redirect_uri: Redirect URI used to obtain the code
            refresh_token: Refresh token (refresh_token grant)

        Returns:
            Response carrying ``access_token``, ``expires_in`` and
            ``refresh_token``
        """
        params: Dict[str, Any] = {"grant_type": grant_type}
        if grant_type == "refresh_token":
            params["refresh_token"] = refresh_token
        if grant_type == "authorization_code":
            params["code"] = code
            params["redirect_uri"] = redirect_uri
        return self._call_as_login_client("/oauth/token", params)

    def unlink_account_native(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        identifier_to_remove: str,
        access_token: str,
    ) -> JsonBody:
        """Remove a linked social identity from the signed-in user."""
        params = {"access_token": access_token}
        params.update(self._flow_params(client_id, flow, flow_version, locale))
        params["identifier_to_remove"] = identifier_to_remove
        return self._call_anonymous("/oauth/unlink_account_native", params)

    def update_profile_native(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        form: str,
        access_token: str,
        form_fields: Mapping[str, Any],
    ) -> JsonBody:
        """Update the signed-in user's profile from an edit-profile form."""
        params = self._flow_params(client_id, flow, flow_version, locale)
        params.update({
            "form": form,
            "access_token": access_token,
        })
        params.update(form_fields)
        return self._call_as_login_client("/oauth/update_profile_native", params)

    def verify_email_native(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        redirect_uri: str,
        form: str,
        form_fields: Mapping[str, Any],
    ) -> JsonBody:
        """Resend the email verification message."""
        params = self._flow_params(client_id, flow, flow_version, locale)
        params.update({
            "redirect_uri": redirect_uri,
            "form": form,
        })
        params.update(form_fields)
        return self._call_as_login_client("/oauth/verify_email_native", params)

    def generic_custom_call(
        self,
        client_id: str,
        flow: str,
        flow_version: str,
        locale: str,
        redirect_uri: str,
        form: str,
        form_fields: Mapping[str, Any],
        path: str,
    ) -> JsonBody:
        """Submit a form to an arbitrary native-flow endpoint.

        Args:
            path: Endpoint path, e.g. "/oauth/custom_form_native"
        """
        params = self._flow_params(client_id, flow, flow_version, locale)
        params.update({
            "redirect_uri": redirect_uri,
            "form": form,
        })
        params.update(form_fields)
        return self._call_anonymous(path, params)
