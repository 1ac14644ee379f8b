"""Form field lists derived from the static flow document."""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from .static_flow import StaticFlow


class FormConfiguration:
    """Resolves the field descriptors of a form in the flow document."""

    def __init__(self, static_flow: StaticFlow):
        self.static_flow = static_flow

    def load_form_configuration(self, form_name: str) -> Optional[List[Dict[str, Any]]]:
        """Return the ordered field descriptors of a form.

        Each descriptor is a copy stamped with its ``name`` and without the
        ``forms`` back-reference; the memoized flow document is left intact.

        Args:
            form_name: Form key in the flow's ``fields`` map

        Returns:
            List of field descriptors, or None if the flow or form is missing
        """
        flow_content = self.static_flow.get_flow_content()
        if not flow_content:
            return None
        fields = flow_content.get("fields") or {}
        form = fields.get(form_name)
        if not form:
            return None

        descriptors = []
        for field_name in form.get("fields") or []:
            descriptor = dict(fields.get(field_name) or {})
            descriptor["name"] = field_name
            descriptor.pop("forms", None)
            descriptors.append(descriptor)
        return descriptors
