"""Config – environment settings, loaders and logging bootstrap."""

from callmemaybe.config.app import AppSettings, configure_logging, load_settings
from callmemaybe.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from callmemaybe.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "AppSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "configure_logging",
    "load_settings",
]
