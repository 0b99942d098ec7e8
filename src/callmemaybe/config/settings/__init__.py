"""Config settings – environment-based configuration."""
from callmemaybe.config.settings.base import Settings
from callmemaybe.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
