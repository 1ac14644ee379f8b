"""Janrain-specific exceptions for error handling.

Remote rejections (``stat != "ok"``) are returned as data by the facade and
never raised. These exceptions cover the cases where there is no usable JSON
document to hand back.
"""


class JanrainError(Exception):
    """Base exception for all Janrain operations."""
    pass


class JanrainAPIError(JanrainError):
    """HTTP or decoding failure talking to a Janrain endpoint.

    Attributes:
        status_code: HTTP status code
        message: Raw response body
        endpoint: URL that was called
    """

    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")


class ConfigurationError(JanrainError):
    """Client configuration is incomplete or invalid."""
    pass
