"""Normalization of Capture API responses into ``has_errors`` dictionaries."""
from __future__ import annotations
from typing import Any, Dict, Optional

from .client import JsonBody
from .configuration import is_configuration_error


class CaptureResponse:
    """A decoded response, classified as success or failure.

    Capture responses succeed when ``stat == "ok"``. Configuration API
    responses have no ``stat`` and fail only when they carry ``errors``.
    Field access never raises; absent fields resolve to a default.
    """

    def __init__(self, body: JsonBody, ok: Optional[bool] = None):
        self.body = body
        if ok is None:
            ok = isinstance(body, dict) and body.get("stat") == "ok"
        self.ok = ok

    @classmethod
    def from_configuration(cls, body: JsonBody) -> "CaptureResponse":
        return cls(body, ok=not is_configuration_error(body))

    def get(self, key: str, default: Any = None) -> Any:
        if isinstance(self.body, dict):
            value = self.body.get(key)
            if value is not None:
                return value
        return default

    def success(self, *keys: str, **renamed: str) -> Dict[str, Any]:
        """Success shape with the given body fields.

        Args:
            *keys: Body fields copied under the same name
            **renamed: Output name -> body field name
        """
        result: Dict[str, Any] = {"has_errors": False}
        for key in keys:
            result[key] = self.get(key)
        for out_key, body_key in renamed.items():
            result[out_key] = self.get(body_key)
        return result

    def errors(self, **extra: Any) -> Dict[str, Any]:
        """Error shape with every optional error field defaulted."""
        result = {
            "has_errors": True,
            "error_description": self.get("error_description", ""),
            "code": self.get("code", ""),
            "error": self.get("error", ""),
            "invalid_fields": self.get("invalid_fields", {}),
        }
        result.update(extra)
        return result

    def form_errors(self, form_name: str) -> Dict[str, Any]:
        """Error shape where a bare ``message`` is reported against the form.

        When the response has no ``invalid_fields`` but carries a
        ``message``, it becomes ``invalid_fields[form_name]``.
        """
        result = self.errors()
        message = self.get("message")
        if not result["invalid_fields"] and message:
            result["invalid_fields"] = {form_name: message if isinstance(message, list) else [message]}
        return result
