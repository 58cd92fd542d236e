"""Config – 12-factor settings and loaders."""

from pushy_proxy.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    JsonSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from pushy_proxy.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "JsonSettingsLoader",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
