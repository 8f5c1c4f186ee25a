"""Config settings – 12-factor env-based configuration."""
from foundation_commons.config.settings.base import Settings
from foundation_commons.config.settings.factory import SettingsFactory
from foundation_commons.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
