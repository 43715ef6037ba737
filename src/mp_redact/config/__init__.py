"""Config – 12-factor settings and loaders."""

from mp_redact.config.settings import (
    EnvSettingsLoader,
    RedactionSettings,
    Settings,
    SettingsLoader,
    build_redactor,
)
from mp_redact.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RedactionSettings",
    "Settings",
    "SettingsLoader",
    "build_redactor",
]
