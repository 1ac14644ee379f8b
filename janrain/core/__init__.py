"""Janrain Capture API client library.

This package provides a modular, testable interface to the Janrain Capture /
Identity Cloud REST API.

Architecture:
- client.py: HTTP gateway with basic auth, form encoding and error logging
- authentication.py: /access and /oauth native-flow operations
- entity.py: Entity (user record) operations
- configuration.py: Configuration API (flows, forms, fields)
- client_settings.py: API clients and settings
- social.py: Social login provider lookups
- engage.py: Social login URL builder
- static_flow.py: CDN flow asset fetching and decoding
- form_configuration.py / translations.py: Views over the flow document
- response.py: Success/error reshaping used by the facade
- exceptions.py: Typed exceptions for error handling

Usage:
    from janrain.config import JanrainConfig
    from janrain.core import CaptureClient, EntityService

    client = CaptureClient(config)
    entity_service = EntityService(client)
    body = entity_service.entity_find("email = 'alice@example.com'", "user")
"""
from .client import (
    CaptureClient,
    Credentials,
    flatten_params,
)
from .exceptions import (
    JanrainError,
    JanrainAPIError,
    ConfigurationError,
)
from .authentication import AuthenticationService
from .entity import EntityService
from .configuration import ConfigurationService, is_configuration_error
from .client_settings import ClientSettingsService
from .social import SocialService
from .engage import EngageService, build_social_login_url
from .static_flow import (
    StaticFlow,
    decode_flow_asset,
    flow_asset_url,
    HEAD_VERSION,
)
from .form_configuration import FormConfiguration
from .translations import Translations
from .response import CaptureResponse

__all__ = [
    # Client
    "CaptureClient",
    "Credentials",
    "flatten_params",

    # Exceptions
    "JanrainError",
    "JanrainAPIError",
    "ConfigurationError",

    # Services
    "AuthenticationService",
    "EntityService",
    "ConfigurationService",
    "ClientSettingsService",
    "SocialService",
    "EngageService",

    # Static flow
    "StaticFlow",
    "FormConfiguration",
    "Translations",
    "decode_flow_asset",
    "flow_asset_url",
    "HEAD_VERSION",

    # Helpers
    "CaptureResponse",
    "build_social_login_url",
    "is_configuration_error",
]
