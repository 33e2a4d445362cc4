"""Config – 12-factor env-based settings."""
from feature_maybe.config.base import Settings
from feature_maybe.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from feature_maybe.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from feature_maybe.config.settings import FeatureMaybeSettings, get_settings

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeatureMaybeSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "get_settings",
]
