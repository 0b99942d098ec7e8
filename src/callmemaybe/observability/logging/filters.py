"""Observability – ContactFieldsFilter."""
from __future__ import annotations

from typing import Any

# Keys whose values are personal contact data or raw query text.
CONTACT_FIELDS: frozenset[str] = frozenset({
    "name", "phone", "email", "address", "gender", "age", "interest", "interests",
    "raw", "value", "values", "keywords",
})


class ContactFieldsFilter:
    """Replace values of contact-data keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or CONTACT_FIELDS

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["CONTACT_FIELDS", "ContactFieldsFilter"]
