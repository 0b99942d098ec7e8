"""Sorting – Category names accepted by the filter command."""
from __future__ import annotations

from enum import Enum

from callmemaybe.kernel.errors.domain import InvalidArgumentError


class Category(str, Enum):
    """Contact field named as a sort key."""

    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    GENDER = "gender"
    AGE = "age"
    DONE = "done"
    INTEREST = "interest"

    @classmethod
    def parse(cls, text: str) -> "Category":
        """Case-insensitive lookup: ``"Age"`` and ``"AGE"`` both give :attr:`AGE`."""
        try:
            return cls(text.strip().lower())
        except ValueError as exc:
            choices = ", ".join(c.value for c in cls)
            raise InvalidArgumentError(
                f"Unknown category {text!r}; expected one of: {choices}",
                argument="category",
                value=text,
            ) from exc

    def __str__(self) -> str:
        return self.value


__all__ = ["Category"]
