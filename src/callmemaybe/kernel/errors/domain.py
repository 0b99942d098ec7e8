"""Domain errors – malformed user input for queries and filters."""

from __future__ import annotations

from typing import Any

from callmemaybe.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when user input violates a rule of the contact domain."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A raw field value does not match the grammar of its field.

    ``field`` names the offending field (a tag value such as ``"done"``) and
    ``expected`` describes the accepted format.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        self.expected = expected or message

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["field"] = self.field
        base["expected"] = self.expected
        return base


class InvalidArgumentError(ValidationError):
    """A numeric value or command argument cannot be parsed or is out of range."""

    default_code = "invalid_argument"

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("field", argument)
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["argument"] = self.argument
        base["value"] = self.value
        return base


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
