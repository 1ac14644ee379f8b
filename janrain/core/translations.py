"""Translation strings derived from the static flow document."""
from __future__ import annotations
from typing import Optional

from .static_flow import StaticFlow


class Translations:
    """Looks up translation strings in the flow document."""

    def __init__(self, static_flow: StaticFlow):
        self.static_flow = static_flow

    def load_translation(self, name: str) -> Optional[str]:
        """Return the value of a string field.

        Returns:
            Translated text, or None if the flow or field is missing or the
            field is not of type "string"
        """
        flow_content = self.static_flow.get_flow_content()
        if not flow_content:
            return None
        field = (flow_content.get("fields") or {}).get(name)
        if not field or field.get("type") != "string":
            return None
        return field.get("value")
