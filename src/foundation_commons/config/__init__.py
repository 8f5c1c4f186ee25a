"""Config – 12-factor settings and loaders."""

from foundation_commons.config.settings import (
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from foundation_commons.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
