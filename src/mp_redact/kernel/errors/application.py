"""Application-layer errors."""

from __future__ import annotations

from mp_redact.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Misuse of the library by its caller (bad settings, bad wiring)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
