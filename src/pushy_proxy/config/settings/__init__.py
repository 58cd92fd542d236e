"""Config settings – env, dotenv and JSON file configuration."""
from pushy_proxy.config.settings.base import Settings
from pushy_proxy.config.settings.factory import SettingsFactory
from pushy_proxy.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    JsonSettingsLoader,
    SettingsLoader,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "JsonSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
