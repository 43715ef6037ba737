"""Config settings – RedactionSettings and build_redactor."""
from __future__ import annotations

import dataclasses
from typing import Callable, ClassVar

from mp_redact.application.redaction import DEFAULT_ANNOTATION_KEYS, REDACTED, TreeRedactor, replace_strings
from mp_redact.config.settings.base import Settings
from mp_redact.config.validation import InvalidSettingValueError
from mp_redact.kernel.security import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitivityPredicate,
    names_containing,
    names_equal,
    names_matching,
)

_MATCHERS: dict[str, Callable[..., SensitivityPredicate]] = {
    "exact": names_equal,
    "contains": names_containing,
    "glob": names_matching,
}


@dataclasses.dataclass
class RedactionSettings(Settings):
    """Environment-driven redaction policy (``REDACT_*`` variables).

    ``REDACT_SENSITIVE_FIELDS=password,token`` with ``REDACT_MATCH=contains``
    redacts ``AccessToken`` as well as ``password``.
    """

    _prefix: ClassVar[str] = "REDACT"

    sensitive_fields: list[str] = dataclasses.field(
        default_factory=lambda: sorted(DEFAULT_SENSITIVE_FIELDS)
    )
    annotation_keys: list[str] = dataclasses.field(default_factory=lambda: list(DEFAULT_ANNOTATION_KEYS))
    replacement: str = REDACTED
    match: str = "exact"

    def _validate(self) -> None:
        if self.match not in _MATCHERS:
            raise InvalidSettingValueError("match", self.match, f"expected one of {sorted(_MATCHERS)}")
        if not self.sensitive_fields:
            raise InvalidSettingValueError("sensitive_fields", self.sensitive_fields, "must not be empty")
        for key in self.annotation_keys:
            if not key or "," in key:
                raise InvalidSettingValueError(
                    "annotation_keys", self.annotation_keys, f"invalid annotation key {key!r}"
                )


def build_redactor(settings: RedactionSettings) -> TreeRedactor:
    """Wire a :class:`TreeRedactor` that replaces sensitive strings."""
    predicate = _MATCHERS[settings.match](*settings.sensitive_fields)
    return TreeRedactor(
        predicate,
        replace_strings(settings.replacement),
        annotation_keys=settings.annotation_keys,
    )


__all__ = ["RedactionSettings", "build_redactor"]
