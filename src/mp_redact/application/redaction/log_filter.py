from __future__ import annotations

import logging
from collections.abc import Mapping

from mp_redact.application.redaction.redactor import TreeRedactor

__all__ = ["RedactingLogFilter"]


class RedactingLogFilter(logging.Filter):
    """Applies a :class:`TreeRedactor` to log record msg and args before emission.

    Plain-string messages pass through untouched; only named slots are
    redacted, so pass structured data as a mapping or record.
    """

    def __init__(self, redactor: TreeRedactor, name: str = "") -> None:
        super().__init__(name)
        self._redactor = redactor

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if not isinstance(record.msg, str):
            record.msg = self._redactor.redact(record.msg)
        if isinstance(record.args, Mapping):
            record.args = self._redactor.redact(dict(record.args))
        elif isinstance(record.args, tuple):
            record.args = tuple(self._redactor.redact(arg) for arg in record.args)
        return True
