"""Ready-made transforms for sensitive values.

Every transform here rewrites ``str`` values only and returns any other
shape unchanged, so a sensitive ``int`` or nested record survives as-is.
"""
from __future__ import annotations

import hashlib
import uuid
from typing import Any, Callable, TypeAlias

Transform: TypeAlias = Callable[[Any], Any]

REDACTED = "***REDACTED***"


def replace_strings(replacement: str = REDACTED) -> Transform:
    """Replace every string with *replacement*, empty strings included."""

    def _transform(value: Any) -> Any:
        if isinstance(value, str):
            return replacement
        return value

    return _transform


def partial(show_start: int = 0, show_end: int = 4, mask_char: str = "*") -> Transform:
    """Keep the first *show_start* and last *show_end* characters.

    Strings too short to hide anything are masked entirely, keeping their
    length: ``partial()("mypassword123") == "*********d123"``.
    """

    def _transform(value: Any) -> Any:
        if not isinstance(value, str):
            return value
        length = len(value)
        if length <= show_start + show_end:
            return mask_char * length
        hidden = mask_char * (length - show_start - show_end)
        return value[:show_start] + hidden + (value[-show_end:] if show_end else "")

    return _transform


def hash_strings(salt: str = "", prefix: str = "sha256:", length: int = 16) -> Transform:
    """Replace strings with a truncated, salted SHA-256 hex digest."""

    def _transform(value: Any) -> Any:
        if not isinstance(value, str):
            return value
        digest = hashlib.sha256(f"{salt}{value}".encode()).hexdigest()
        return f"{prefix}{digest[:length]}"

    return _transform


def tokenize_strings(salt: str = "") -> Transform:
    """Replace strings with a deterministic UUID-shaped token."""

    def _transform(value: Any) -> Any:
        if not isinstance(value, str):
            return value
        digest = hashlib.sha256(f"{salt}{value}".encode()).hexdigest()
        return str(uuid.UUID(digest[:32]))

    return _transform


__all__ = [
    "REDACTED",
    "Transform",
    "hash_strings",
    "partial",
    "replace_strings",
    "tokenize_strings",
]
