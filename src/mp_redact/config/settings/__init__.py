"""Config settings – 12-factor env-based configuration."""
from mp_redact.config.settings.base import Settings
from mp_redact.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_redact.config.settings.redaction import RedactionSettings, build_redactor

__all__ = ["EnvSettingsLoader", "RedactionSettings", "Settings", "SettingsLoader", "build_redactor"]
