"""Janrain entity (user record) operations."""
from __future__ import annotations
import json
from typing import Any, Dict, Optional

from .client import CaptureClient, Credentials, JsonBody


def _encode_attributes(attributes: Any) -> Optional[str]:
    """Attributes are sent as a JSON string; strings pass through untouched."""
    if attributes is None or isinstance(attributes, str):
        return attributes
    return json.dumps(attributes)


class EntityService:
    """Service for the /entity* endpoints of the Capture API."""

    def __init__(self, client: CaptureClient):
        """Initialize entity service.

        Args:
            client: Shared Capture HTTP client
        """
        self.client = client

    def _owner_request(
        self,
        path: str,
        params: Dict[str, Any],
        credentials: Optional[Credentials] = None,
        method: str = "GET",
    ) -> JsonBody:
        creds = credentials or self.client.config.full_credentials
        return self.client.request(
            self.client.config.capture_server_url,
            path,
            params,
            method,
            creds.client_id,
            creds.client_secret,
        )

    def entity(
        self,
        access_token: str,
        type_name: str,
        id: Optional[str] = None,
        method: str = "GET",
        credentials: Optional[Credentials] = None,
    ) -> JsonBody:
        """Retrieve a single entity.

        With only an access token the call is anonymous and returns the token
        owner's record. When ``id`` is given the record is looked up by id
        with owner credentials (the configured full client unless
        ``credentials`` overrides it).

        Args:
            access_token: Token returned by a sign-in or registration call
            type_name: Entity type
            id: Entity id for owner lookups
            method: HTTP method
            credentials: Client credentials override

        Returns:
            Response carrying ``result``
        """
        params = {
            "type_name": type_name,
            "access_token": access_token or None,
        }
        if id:
            params["id"] = id
            return self._owner_request("/entity", params, credentials, method)
        if credentials is not None:
            return self._owner_request("/entity", params, credentials, method)
        return self.client.request(self.client.config.capture_server_url, "/entity", params, method)

    def entity_create(
        self,
        attributes: Any,
        type_name: str,
        credentials: Optional[Credentials] = None,
    ) -> JsonBody:
        """Create a new entity.

        Args:
            attributes: JSON string or mapping of attribute values
            type_name: Entity type
            credentials: Client credentials override

        Returns:
            Response carrying ``id`` and ``uuid``
        """
        params = {
            "type_name": type_name,
            "attributes": _encode_attributes(attributes),
        }
        return self._owner_request("/entity.create", params, credentials)

    def entity_delete(self, uuid: str, type_name: str) -> JsonBody:
        """Delete an entity."""
        params = {
            "type_name": type_name,
            "uuid": uuid,
        }
        return self._owner_request("/entity.delete", params)

    def entity_delete_access(self, uuid: str, type_name: str) -> JsonBody:
        """Revoke every access and refresh token of an entity."""
        params = {
            "type_name": type_name,
            "uuid": uuid,
        }
        return self._owner_request("/entity.deleteAccess", params)

    def entity_find(
        self,
        filter: str,
        type_name: str,
        attributes: Optional[Any] = None,
        credentials: Optional[Credentials] = None,
    ) -> JsonBody:
        """Search entities with a filter expression.

        Args:
            filter: Filter expression, e.g. "email = 'a@example.com'"
            type_name: Entity type
            attributes: Attribute names to return, JSON-encoded when given
            credentials: Client credentials override

        Returns:
            Response carrying ``result_count`` and ``results``
        """
        params = {
            "type_name": type_name,
            "filter": filter,
        }
        if attributes is not None:
            params["attributes"] = _encode_attributes(attributes)
        return self._owner_request("/entity.find", params, credentials)

    def entity_update(
        self,
        uuid: Optional[str],
        attributes: Any,
        type_name: str,
        key_attribute: Optional[str] = None,
        key_value: Optional[str] = None,
        credentials: Optional[Credentials] = None,
    ) -> JsonBody:
        """Update attributes of an entity.

        The record is addressed by ``uuid``, or by ``key_attribute`` and
        ``key_value`` (e.g. email) when both are given.

        Args:
            uuid: Entity uuid
            attributes: JSON string or mapping of attribute values
            type_name: Entity type
            key_attribute: Unique attribute used instead of uuid
            key_value: Value of key_attribute, JSON-quoted when it is a string
            credentials: Client credentials override
        """
        params: Dict[str, Any] = {"type_name": type_name}
        if key_attribute and key_value is not None:
            params["key_attribute"] = key_attribute
            params["key_value"] = json.dumps(key_value)
        else:
            params["uuid"] = uuid
        params["attributes"] = _encode_attributes(attributes)
        return self._owner_request("/entity.update", params, credentials)
