"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        └── ConfigError      (mp_redact.config.validation)
"""

from mp_redact.kernel.errors.application import ApplicationError
from mp_redact.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
]
