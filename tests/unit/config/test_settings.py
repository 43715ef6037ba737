"""Unit tests for config settings, loaders and redaction settings."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from mp_redact import REDACTED
from mp_redact.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    RedactionSettings,
    Settings,
    build_redactor,
)
from mp_redact.kernel.security import DEFAULT_SENSITIVE_FIELDS


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "SVC"

    host: str


@dataclass
class ValidatedSettings(Settings):
    _prefix: ClassVar[str] = "VAL"

    level: int = 1

    def _validate(self) -> None:
        if self.level < 0:
            raise ValueError("level must be positive")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestSettingsEnvKey:
    def test_prefixed_and_upper_cased(self) -> None:
        assert AppSettings.env_key("allowed_origins") == "APP_ALLOWED_ORIGINS"

    def test_no_prefix(self) -> None:
        assert Settings.env_key("host") == "HOST"

    def test_redaction_prefix(self) -> None:
        assert RedactionSettings.env_key("match") == "REDACT_MATCH"

    def test_loader_reports_env_key(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(RequiredSettings)
        assert exc_info.value.setting_name == RequiredSettings.env_key("host")


class TestEnvSettingsLoader:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader(environ={}).load(AppSettings)
        assert settings == AppSettings()

    def test_coercion(self) -> None:
        environ = {
            "APP_HOST": "example.com",
            "APP_PORT": "9000",
            "APP_RATIO": "0.25",
            "APP_DEBUG": "yes",
            "APP_ALLOWED_ORIGINS": "a.com, b.com,",
        }
        settings = EnvSettingsLoader(environ=environ).load(AppSettings)
        assert settings.host == "example.com"
        assert settings.port == 9000
        assert settings.ratio == 0.25
        assert settings.debug is True
        assert settings.allowed_origins == ["a.com", "b.com"]

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "env.example")
        assert EnvSettingsLoader().load(AppSettings).host == "env.example"

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(RequiredSettings)
        assert exc_info.value.setting_name == "SVC_HOST"

    def test_bad_number(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(environ={"APP_PORT": "eighty"}).load(AppSettings)

    def test_validation_failure_wrapped(self) -> None:
        with pytest.raises(ConfigError, match="level must be positive"):
            EnvSettingsLoader(environ={"VAL_LEVEL": "-1"}).load(ValidatedSettings)


# ---------------------------------------------------------------------------
# RedactionSettings / build_redactor
# ---------------------------------------------------------------------------


class TestRedactionSettings:
    def test_defaults(self) -> None:
        settings = RedactionSettings()
        assert set(settings.sensitive_fields) == DEFAULT_SENSITIVE_FIELDS
        assert settings.annotation_keys == ["json", "xml", "yaml", "form", "query", "db", "bson"]
        assert settings.replacement == REDACTED
        assert settings.match == "exact"

    def test_from_environment(self) -> None:
        environ = {
            "REDACT_SENSITIVE_FIELDS": "password,token",
            "REDACT_MATCH": "contains",
            "REDACT_REPLACEMENT": "[hidden]",
            "REDACT_ANNOTATION_KEYS": "json,proto",
        }
        settings = EnvSettingsLoader(environ=environ).load(RedactionSettings)
        assert settings.sensitive_fields == ["password", "token"]
        assert settings.match == "contains"
        assert settings.annotation_keys == ["json", "proto"]

    def test_unknown_match_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RedactionSettings(match="regex")

    def test_unknown_match_from_environment(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(environ={"REDACT_MATCH": "regex"}).load(RedactionSettings)

    def test_empty_fields_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RedactionSettings(sensitive_fields=[])

    def test_bad_annotation_key_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RedactionSettings(annotation_keys=["json", ""])


class TestBuildRedactor:
    def test_exact(self) -> None:
        redactor = build_redactor(RedactionSettings(sensitive_fields=["password"]))
        assert redactor.redact({"password": "p", "Password": "q", "passwords": "r"}) == {
            "password": REDACTED,
            "Password": REDACTED,
            "passwords": "r",
        }

    def test_contains_with_replacement(self) -> None:
        settings = RedactionSettings(sensitive_fields=["token"], match="contains", replacement="[x]")
        redactor = build_redactor(settings)
        assert redactor.redact({"AccessToken": "a", "user": "u"}) == {"AccessToken": "[x]", "user": "u"}

    def test_glob(self) -> None:
        redactor = build_redactor(RedactionSettings(sensitive_fields=["*_key"], match="glob"))
        assert redactor.redact({"api_key": "k", "key": "v"}) == {"api_key": REDACTED, "key": "v"}

    def test_annotation_keys_forwarded(self) -> None:
        redactor = build_redactor(RedactionSettings(annotation_keys=["proto"]))
        assert redactor.annotation_keys == ("proto",)
