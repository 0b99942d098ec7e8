"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for settings read from prefixed environment variables.

    A field ``log_level`` on a subclass with ``_prefix = "CALLMEMAYBE"`` is
    read from ``CALLMEMAYBE_LOG_LEVEL``; without a prefix it is ``LOG_LEVEL``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Return the environment variable backing *field_name*."""
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        """Map every field name to its environment variable, in field order."""
        return {field.name: cls.env_key(field.name) for field in dataclasses.fields(cls)}

    def _validate(self) -> None:
        """Override to check or normalise field values after loading."""


__all__ = ["Settings"]
