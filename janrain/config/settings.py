"""Settings container for the Janrain client.

All configuration is passed explicitly; nothing is read from the environment.
"""
from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Optional

from janrain.core.client import Credentials
from janrain.core.exceptions import ConfigurationError


# camelCase option names accepted by load_settings()
_OPTION_ALIASES = {
    "captureServerUrl": "capture_server_url",
    "configurationServerUrl": "configuration_server_url",
    "cdnUrl": "cdn_url",
    "fullClientId": "full_client_id",
    "fullClientSecret": "full_client_secret",
    "loginClientId": "login_client_id",
    "loginClientSecret": "login_client_secret",
    "appId": "app_id",
    "locale": "locale",
    "flowName": "flow_name",
    "requestTimeout": "request_timeout",
}


@dataclass(frozen=True)
class JanrainConfig:
    """Connection and credential settings shared by every service."""
    # Servers
    capture_server_url: str
    configuration_server_url: str
    cdn_url: str

    # Owner client (administrative entity operations)
    full_client_id: str
    full_client_secret: str = field(repr=False)

    # Login client (end-user authentication flows)
    login_client_id: str = ""
    login_client_secret: str = field(default="", repr=False)

    # Application / flow
    app_id: str = ""
    locale: str = "en-US"
    flow_name: str = "standard"

    # None leaves timeouts to the HTTP client defaults
    request_timeout: Optional[float] = None

    def __post_init__(self):
        # CDN url is colon-joined with the flow coordinates, so keep it verbatim
        for name in ("capture_server_url", "configuration_server_url"):
            object.__setattr__(self, name, getattr(self, name).rstrip("/"))

    @property
    def full_credentials(self) -> Credentials:
        return Credentials(self.full_client_id, self.full_client_secret)

    @property
    def login_credentials(self) -> Credentials:
        return Credentials(self.login_client_id, self.login_client_secret)

    def with_overrides(self, **changes: Any) -> "JanrainConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


_REQUIRED = (
    "capture_server_url",
    "configuration_server_url",
    "cdn_url",
    "full_client_id",
    "full_client_secret",
    "app_id",
)


def load_settings(source: Mapping[str, Any]) -> JanrainConfig:
    """Build a JanrainConfig from a mapping of options.

    Accepts both field names (``capture_server_url``) and the camelCase
    option names (``captureServerUrl``). Unknown keys are ignored.

    Args:
        source: Mapping of configuration options

    Returns:
        JanrainConfig instance

    Raises:
        ConfigurationError: If required options are missing or empty
    """
    known = {f.name for f in fields(JanrainConfig)}
    values: dict[str, Any] = {}
    for key, value in source.items():
        name = _OPTION_ALIASES.get(key, key)
        if name in known:
            values[name] = value

    missing = [name for name in _REQUIRED if not values.get(name)]
    if missing:
        raise ConfigurationError(f"Missing required Janrain settings: {', '.join(missing)}")

    timeout = values.get("request_timeout")
    if timeout is not None:
        try:
            values["request_timeout"] = float(timeout)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid request_timeout: {timeout!r}") from exc

    return JanrainConfig(**values)
