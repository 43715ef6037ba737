"""Kernel – framework-agnostic building blocks."""

from mp_redact.kernel.errors import ApplicationError, BaseError
from mp_redact.kernel.types import Ref

__all__ = [
    "ApplicationError",
    "BaseError",
    "Ref",
]
