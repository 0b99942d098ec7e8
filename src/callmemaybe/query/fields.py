"""Query fields – FieldTag and the command-line prefix of each field."""
from __future__ import annotations

from enum import Enum

from callmemaybe.kernel.errors.domain import InvalidArgumentError


class FieldTag(str, Enum):
    """Contact attribute targeted by one fragment of a query."""

    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    GENDER = "gender"
    AGE = "age"
    DONE = "done"
    INTEREST = "interest"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @classmethod
    def from_prefix(cls, prefix: str) -> "FieldTag":
        """Resolve a prefix such as ``"n/"`` (the trailing slash is optional)."""
        key = prefix.strip().lower()
        if not key.endswith("/"):
            key += "/"
        for tag, tag_prefix in _PREFIXES.items():
            if tag_prefix == key:
                return tag
        raise InvalidArgumentError(f"Unknown field prefix: {prefix!r}", argument="prefix", value=prefix)


_PREFIXES: dict[FieldTag, str] = {
    FieldTag.NAME: "n/",
    FieldTag.PHONE: "p/",
    FieldTag.EMAIL: "e/",
    FieldTag.ADDRESS: "a/",
    FieldTag.GENDER: "g/",
    FieldTag.AGE: "ag/",
    FieldTag.DONE: "d/",
    FieldTag.INTEREST: "i/",
}


def tokenize(raw: str) -> list[str]:
    """Split a raw field value on whitespace."""
    return raw.split()


__all__ = ["FieldTag", "tokenize"]
