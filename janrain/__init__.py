"""Python client for the Janrain Capture / Identity Cloud REST API."""
from .api import Janrain
from .config import JanrainConfig, load_settings
from .core import Credentials, JanrainAPIError, JanrainError, ConfigurationError

__all__ = [
    "Janrain",
    "JanrainConfig",
    "load_settings",
    "Credentials",
    "JanrainError",
    "JanrainAPIError",
    "ConfigurationError",
]
