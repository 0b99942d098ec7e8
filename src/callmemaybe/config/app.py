"""Config – AppSettings and logging bootstrap."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from callmemaybe.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from callmemaybe.config.errors import InvalidSettingValueError
from callmemaybe.observability.logging import JsonLoggerFactory

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class AppSettings(Settings):
    """Runtime settings, read from ``CALLMEMAYBE_*`` environment variables."""

    _prefix: ClassVar[str] = "CALLMEMAYBE"

    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                self.env_key("log_level"),
                self.log_level,
                f"one of {', '.join(_LOG_LEVELS)}",
                field="log_level",
            )
        self.log_level = level


def load_settings(loader: SettingsLoader | None = None) -> AppSettings:
    return (loader or EnvSettingsLoader()).load(AppSettings)


def configure_logging(settings: AppSettings | None = None) -> AppSettings:
    """Configure structlog from *settings* (loaded from the environment when omitted)."""
    settings = settings or load_settings()
    JsonLoggerFactory.configure(
        level=logging.getLevelName(settings.log_level),
        json=settings.log_json,
    )
    return settings


__all__ = ["AppSettings", "configure_logging", "load_settings"]
