"""Errors raised while reading ``CALLMEMAYBE_*`` settings from the environment."""
from __future__ import annotations

from callmemaybe.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str, *, field: str | None = None) -> None:
        super().__init__(
            f"Environment variable {env_key} must be set",
            detail={"env_key": env_key, "field": field},
        )
        self.env_key = env_key
        self.field = field


class InvalidSettingValueError(ConfigError):
    """An environment variable holds a value its setting cannot take.

    *expected* names what would have been accepted, e.g. ``"a boolean"``.
    """

    default_code = "invalid_setting_value"

    def __init__(self, env_key: str, value: object, expected: str, *, field: str | None = None) -> None:
        super().__init__(
            f"{env_key}={value!r} is not valid, expected {expected}",
            detail={"env_key": env_key, "field": field, "value": value, "expected": expected},
        )
        self.env_key = env_key
        self.field = field
        self.value = value
        self.expected = expected


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
