"""Observability – structlog processors and get_logger helper.

``RedactionProcessor`` — redacts the structlog event dict.
``get_logger(name)`` — returns a bound structlog logger.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from mp_redact.application.redaction import TreeRedactor


class RedactionProcessor:
    """structlog processor that runs a :class:`TreeRedactor` over each event.

    Usage::

        import structlog
        from mp_redact import TreeRedactor
        from mp_redact.observability.logging import RedactionProcessor

        structlog.configure(processors=[RedactionProcessor(redactor), ...])
    """

    def __init__(self, redactor: TreeRedactor) -> None:
        self._redactor = redactor

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._redactor.redact(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, bound to *initial_values* when given.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["RedactionProcessor", "get_logger"]
