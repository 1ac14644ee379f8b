"""Janrain facade: one method per remote operation, normalized results.

Every method returns a dict with a ``has_errors`` flag. Successful calls add
the documented payload fields; rejected calls add ``error``, ``code``,
``error_description`` and ``invalid_fields``, defaulted when the remote
omitted them. Transport and decoding failures are raised, never converted.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Optional

from janrain.config import JanrainConfig
from janrain.core import (
    AuthenticationService,
    CaptureClient,
    CaptureResponse,
    ClientSettingsService,
    ConfigurationService,
    Credentials,
    EngageService,
    EntityService,
    FormConfiguration,
    HEAD_VERSION,
    SocialService,
    StaticFlow,
    Translations,
)

Result = Dict[str, Any]


def _credentials(client_id: Optional[str], client_secret: Optional[str]) -> Optional[Credentials]:
    if client_id is None or client_secret is None:
        return None
    return Credentials(client_id, client_secret)


class Janrain:
    """Entry point to the Janrain Capture API.

    Usage:
        janrain = Janrain(load_settings(options), logger=logging.getLogger("capture"))
        result = janrain.auth_native_traditional(
            client_id, flow_version, redirect_uri, "signInForm",
            {"signInEmailAddress": "alice@example.com", "currentPassword": "..."},
        )
        if not result["has_errors"]:
            access_token = result["access_token"]
    """

    def __init__(self, config: JanrainConfig, logger: Optional[logging.Logger] = None):
        """Wire the service modules around a shared HTTP client.

        Args:
            config: Servers, credentials, application and flow settings
            logger: Leveled logger receiving request failure records
        """
        self.config = config
        self.client = CaptureClient(config, logger)

        self.authentication = AuthenticationService(self.client)
        self.entities = EntityService(self.client)
        self.configuration = ConfigurationService(self.client)
        self.client_settings = ClientSettingsService(self.client)
        self.social = SocialService(self.client)
        self.engage = EngageService(self.client)

        self.static_flow = StaticFlow(self.client)
        self.form_configuration_loader = FormConfiguration(self.static_flow)
        self.translations = Translations(self.static_flow)

    def _flow(self, flow_name: Optional[str]) -> str:
        return flow_name or self.config.flow_name

    def _locale(self, locale: Optional[str]) -> str:
        return locale or self.config.locale

    # ─────────────────────────────────────────────────────────────────────────
    # Access tokens and codes
    # ─────────────────────────────────────────────────────────────────────────
    def get_access_token(self, uuid: str, type_name: str, client_id: Optional[str] = None) -> Result:
        resp = CaptureResponse(self.authentication.get_access_token(uuid, type_name, client_id))
        if resp.ok:
            return resp.success("accessToken")
        return resp.errors()

    def get_authorization_code(self, uuid: str, type_name: str, client_id: str, redirect_uri: str) -> Result:
        resp = CaptureResponse(
            self.authentication.get_authorization_code(uuid, type_name, client_id, redirect_uri)
        )
        if resp.ok:
            return resp.success("authorizationCode")
        return resp.errors()

    def get_creation_token(self, type_name: str, lifetime: str, client_id: str) -> Result:
        resp = CaptureResponse(self.authentication.get_creation_token(type_name, lifetime, client_id))
        if resp.ok:
            return resp.success("creation_token")
        return resp.errors()

    def get_verification_code(self, uuid: str, type_name: str, attribute_name: str) -> Result:
        resp = CaptureResponse(self.authentication.get_verification_code(uuid, type_name, attribute_name))
        if resp.ok:
            return resp.success(verificationCode="verification_code")
        return resp.errors()

    def use_verification_code(self, verification_code: str) -> Result:
        resp = CaptureResponse(self.authentication.use_verification_code(verification_code))
        if resp.ok:
            return resp.success("uuid")
        return resp.errors()

    def token(
        self,
        grant_type: str,
        code: Optional[str] = None,
        redirect_uri: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ) -> Result:
        """Exchange an authorization code or a refresh token.

        Returns:
            ``access_token``, ``expires_in`` and ``refresh_token`` on success
        """
        resp = CaptureResponse(self.authentication.token(grant_type, code, redirect_uri, refresh_token))
        if resp.ok:
            return resp.success("access_token", "expires_in", "refresh_token")
        return resp.errors()

    # ─────────────────────────────────────────────────────────────────────────
    # Native flows
    # ─────────────────────────────────────────────────────────────────────────
    def auth_native(
        self,
        client_id: str,
        flow_version: str,
        redirect_uri: str,
        form_name: str,
        engage_token: str,
        merge_token: str = "",
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        """Sign in with a social login token.

        On failure the result also carries ``user_data`` (the remote's
        ``prereg_fields``, used to pre-fill a registration form),
        ``request_id`` and ``existing_provider`` (for account merging).
        """
        resp = CaptureResponse(self.authentication.auth_native(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            redirect_uri,
            form_name,
            engage_token,
            merge_token,
        ))
        if resp.ok:
            return resp.success("capture_user", "access_token", "authorization_code")
        return resp.errors(
            user_data=resp.get("prereg_fields", {}),
            request_id=resp.get("request_id", ""),
            existing_provider=resp.get("existing_provider", ""),
        )

    def auth_native_traditional(
        self,
        client_id: str,
        flow_version: str,
        redirect_uri: str,
        form_name: str,
        form_fields: Mapping[str, Any],
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.authentication.auth_native_traditional(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            redirect_uri,
            form_name,
            form_fields,
        ))
        if resp.ok:
            return resp.success("capture_user", "access_token", "authorization_code")
        return resp.errors()

    def register_native(
        self,
        client_id: str,
        flow_version: str,
        redirect_uri: str,
        form_name: str,
        engage_token: str,
        form_fields: Mapping[str, Any],
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.authentication.register_native(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            redirect_uri,
            form_name,
            engage_token,
            form_fields,
        ))
        if resp.ok:
            return resp.success("capture_user", "access_token", "authorization_code")
        return resp.errors()

    def register_native_traditional(
        self,
        client_id: str,
        flow_version: str,
        redirect_uri: str,
        form_name: str,
        form_fields: Mapping[str, Any],
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.authentication.register_native_traditional(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            redirect_uri,
            form_name,
            form_fields,
        ))
        if resp.ok:
            return resp.success("capture_user", "access_token")
        return resp.errors()

    def forgot_password_native(
        self,
        client_id: str,
        flow_version: str,
        redirect_uri: str,
        form_name: str,
        form_fields: Mapping[str, Any],
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.authentication.forgot_password_native(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            redirect_uri,
            form_name,
            form_fields,
        ))
        if resp.ok:
            return resp.success()
        return resp.errors()

    def link_account_native(
        self,
        client_id: str,
        flow_version: str,
        redirect_uri: str,
        form_name: str,
        token: str,
        access_token: str,
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.authentication.link_account_native(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            redirect_uri,
            form_name,
            token,
            access_token,
        ))
        if resp.ok:
            return resp.success()
        return resp.errors()

    def unlink_account_native(
        self,
        client_id: str,
        flow_version: str,
        identifier_to_remove: str,
        access_token: str,
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.authentication.unlink_account_native(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            identifier_to_remove,
            access_token,
        ))
        if resp.ok:
            return resp.success()
        return resp.errors()

    def update_profile_native(
        self,
        client_id: str,
        flow_version: str,
        form_name: str,
        access_token: str,
        form_fields: Mapping[str, Any],
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.authentication.update_profile_native(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            form_name,
            access_token,
            form_fields,
        ))
        if resp.ok:
            return resp.success()
        return resp.errors()

    def verify_email_native(
        self,
        client_id: str,
        flow_version: str,
        redirect_uri: str,
        form_name: str,
        form_fields: Mapping[str, Any],
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.authentication.verify_email_native(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            redirect_uri,
            form_name,
            form_fields,
        ))
        if resp.ok:
            return resp.success()
        return resp.form_errors(form_name)

    def generic_custom_call(
        self,
        client_id: str,
        flow_version: str,
        redirect_uri: str,
        form_name: str,
        form_fields: Mapping[str, Any],
        path: str,
        flow_name: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Result:
        """Submit a flow form to a native endpoint not covered by a dedicated method."""
        resp = CaptureResponse(self.authentication.generic_custom_call(
            client_id,
            self._flow(flow_name),
            flow_version,
            self._locale(locale),
            redirect_uri,
            form_name,
            form_fields,
            path,
        ))
        if resp.ok:
            return resp.success()
        return resp.form_errors(form_name)

    # ─────────────────────────────────────────────────────────────────────────
    # Entities
    # ─────────────────────────────────────────────────────────────────────────
    def entity(
        self,
        access_token: str,
        type_name: str,
        id: Optional[str] = None,
        method: str = "GET",
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.entities.entity(
            access_token, type_name, id, method, _credentials(client_id, client_secret)
        ))
        if resp.ok:
            return {"has_errors": False, "result": dict(resp.get("result", {}))}
        return resp.errors()

    def entity_create(
        self,
        attributes: Any,
        type_name: str,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.entities.entity_create(
            attributes, type_name, _credentials(client_id, client_secret)
        ))
        if resp.ok:
            return resp.success("id", "uuid")
        return resp.errors()

    def entity_delete(self, uuid: str, type_name: str) -> Result:
        resp = CaptureResponse(self.entities.entity_delete(uuid, type_name))
        if resp.ok:
            return resp.success()
        return resp.errors()

    def entity_delete_access(self, uuid: str, type_name: str) -> Result:
        resp = CaptureResponse(self.entities.entity_delete_access(uuid, type_name))
        if resp.ok:
            return resp.success()
        return resp.errors()

    def entity_find(
        self,
        filter: str,
        type_name: str,
        attributes: Optional[Any] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.entities.entity_find(
            filter, type_name, attributes, _credentials(client_id, client_secret)
        ))
        if resp.ok:
            return {
                "has_errors": False,
                "result_count": resp.get("result_count", 0),
                "results": list(resp.get("results", [])),
            }
        return resp.errors()

    def entity_update(
        self,
        uuid: Optional[str],
        attributes: Any,
        type_name: str,
        key_attribute: Optional[str] = None,
        key_value: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
    ) -> Result:
        resp = CaptureResponse(self.entities.entity_update(
            uuid,
            attributes,
            type_name,
            key_attribute,
            key_value,
            _credentials(client_id, client_secret),
        ))
        if resp.ok:
            return resp.success()
        return resp.errors()

    # ─────────────────────────────────────────────────────────────────────────
    # Configuration API
    # ─────────────────────────────────────────────────────────────────────────
    def flow_versions(self, flow_name: Optional[str] = None) -> Result:
        resp = CaptureResponse.from_configuration(self.configuration.flow_versions(self._flow(flow_name)))
        if resp.ok:
            return {"has_errors": False, "versions": resp.body}
        return resp.errors(errors=resp.get("errors", []))

    def form_configuration(self, form_name: str, flow_name: Optional[str] = None) -> Result:
        resp = CaptureResponse.from_configuration(
            self.configuration.form_configuration(form_name, self._flow(flow_name))
        )
        if resp.ok:
            return {"has_errors": False, "result": resp.body}
        return resp.errors(errors=resp.get("errors", []))

    def field_configuration(self, field_name: str, flow_name: Optional[str] = None) -> Result:
        resp = CaptureResponse.from_configuration(
            self.configuration.field_configuration(field_name, self._flow(flow_name))
        )
        if resp.ok:
            return {"has_errors": False, "result": resp.body}
        return resp.errors(errors=resp.get("errors", []))

    # ─────────────────────────────────────────────────────────────────────────
    # Static flow
    # ─────────────────────────────────────────────────────────────────────────
    def get_flow(self, flow_version: str = HEAD_VERSION, locale: str = "") -> Result:
        """Fetch a flow document for a version and locale (never memoized)."""
        flow = self.static_flow.get_flow_by_version_and_locale(flow_version, self._locale(locale))
        if flow is None:
            return {"has_errors": True}
        return {"has_errors": False, "flow": flow}

    def load_form_configuration(self, form_name: str) -> Result:
        fields = self.form_configuration_loader.load_form_configuration(form_name)
        if fields is None:
            return {"has_errors": True}
        return {"has_errors": False, "results": fields}

    def load_translation(self, name: str) -> Result:
        value = self.translations.load_translation(name)
        if value is None:
            return {"has_errors": True}
        return {"has_errors": False, "result": value}

    # ─────────────────────────────────────────────────────────────────────────
    # Clients and settings
    # ─────────────────────────────────────────────────────────────────────────
    def clients_list(self) -> Result:
        resp = CaptureResponse(self.client_settings.clients_list())
        if resp.ok:
            return {"has_errors": False, "results": list(resp.get("results", []))}
        return resp.errors()

    def settings_items(self, client_id: str, client_secret: str) -> Result:
        resp = CaptureResponse(self.client_settings.settings_items(Credentials(client_id, client_secret)))
        if resp.ok:
            return {"has_errors": False, "result": dict(resp.get("result", {}))}
        return resp.errors()

    def get_settings_item(
        self,
        name: str,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
    ) -> Optional[Any]:
        """Return one setting of a client (the login client by default).

        Returns:
            Setting value, or None if the lookup failed or the key is absent
        """
        if client_id is None or client_secret is None:
            client_id, client_secret = self.config.login_credentials
        settings = self.settings_items(client_id, client_secret)
        if settings["has_errors"]:
            return None
        return settings["result"].get(name)

    # ─────────────────────────────────────────────────────────────────────────
    # Social login
    # ─────────────────────────────────────────────────────────────────────────
    def _rpx_url(self) -> Optional[str]:
        rpx_realm = self.get_settings_item("rpx_realm")
        if not rpx_realm:
            return None
        return f"https://{rpx_realm}.rpxnow.com"

    @staticmethod
    def _missing_realm() -> Result:
        return CaptureResponse({}).errors(
            error="rpx_realm_not_found",
            error_description="The rpx_realm setting could not be read for the login client",
        )

    def available_providers(self) -> Result:
        """Social providers configured for the application.

        Returns:
            ``providers`` (the sign-in list) plus ``signin``, ``social`` and
            ``share`` on success
        """
        rpx_url = self._rpx_url()
        if rpx_url is None:
            return self._missing_realm()
        resp = CaptureResponse(self.social.get_available_providers(rpx_url))
        if resp.ok:
            result = resp.success("signin", "social", "share")
            result["providers"] = result["signin"]
            return result
        return resp.errors()

    def providers(self) -> Result:
        """Sign-in and social providers with the share widget configuration.

        Returns:
            ``providers`` (the sign-in list) plus ``signin``, ``social`` and
            ``shareWidget`` on success
        """
        rpx_url = self._rpx_url()
        if rpx_url is None:
            return self._missing_realm()
        resp = CaptureResponse(self.social.providers(rpx_url))
        if resp.ok:
            result = resp.success("signin", "social", "shareWidget")
            result["providers"] = result["signin"]
            return result
        return resp.errors()

    def social_login_url(self, social_media: str, token_url: str, language: str = "") -> Optional[str]:
        """Return the social login URL of a provider.

        Args:
            social_media: Provider id, e.g. "facebook"
            token_url: URL the provider returns to
            language: Language preference, defaults to the configured locale

        Returns:
            Login URL, or None if the RPX realm cannot be resolved
        """
        rpx_url = self._rpx_url()
        if rpx_url is None:
            return None
        return self.engage.get_social_login_url(rpx_url, social_media, token_url, self._locale(language))
