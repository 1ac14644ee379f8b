"""Configuration module for the Janrain client."""
from .settings import JanrainConfig, load_settings

__all__ = ["JanrainConfig", "load_settings"]
