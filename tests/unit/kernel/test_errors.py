"""Unit tests for the kernel error hierarchy."""
import json

from mp_redact.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from mp_redact.kernel.errors import ApplicationError, BaseError


class TestBaseError:
    def test_default_code(self):
        assert BaseError("x").code == "base_error"

    def test_code_derived_from_class_name(self):
        class UpstreamTimeoutError(BaseError):
            pass

        assert UpstreamTimeoutError("x").code == "upstream_timeout_error"

    def test_subclass_inherits_default_code(self):
        class StrictConfigError(ConfigError):
            pass

        assert StrictConfigError("x").code == "config_error"

    def test_custom_code_and_detail(self):
        err = BaseError("x", code="custom", detail={"k": 1})
        assert err.to_dict() == {"code": "custom", "message": "x", "detail": {"k": 1}}

    def test_cause_chained(self):
        cause = ValueError("bad")
        err = BaseError("x", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_str_is_json(self):
        assert json.loads(str(BaseError("x")))["message"] == "x"

    def test_repr(self):
        assert repr(ApplicationError("x")) == "ApplicationError(code='application_error', message='x')"


class TestConfigErrors:
    def test_hierarchy(self):
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_missing_setting(self):
        err = MissingRequiredSettingError("REDACT_MATCH")
        assert err.setting_name == "REDACT_MATCH"
        assert err.code == "missing_required_setting"

    def test_invalid_setting(self):
        err = InvalidSettingValueError("match", "regex", "unsupported")
        assert err.value == "regex"
        assert err.reason == "unsupported"
        assert "regex" in err.message
