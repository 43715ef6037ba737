"""Root error class for the mp-redact error hierarchy."""

from __future__ import annotations

import json
import re
from typing import Any, ClassVar

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class BaseError(Exception):
    """Root of the error hierarchy.

    Redaction itself never raises; these errors surface from configuration
    loading and validation only.  ``detail`` must stay free of secrets: it is
    meant to be logged as-is.

    Args:
        message: Human-readable description.
        code: Machine-readable slug; falls back to ``default_code``, then to
            the class name in snake_case (``SettingsError`` -> ``settings_error``).
        detail: Extra context, safe to log.
        cause: Original exception that triggered this error.
    """

    default_code: ClassVar[str | None] = None

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code or _CAMEL_BOUNDARY.sub("_", type(self).__name__).lower()
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view; ``cause`` appears only when one was given."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
