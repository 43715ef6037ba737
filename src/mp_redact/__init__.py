"""
mp_redact – non-mutating redaction of arbitrary value trees.

Import path convention::

    from mp_redact import redact, TreeRedactor
    from mp_redact.application.redaction import replace_strings, partial
    from mp_redact.kernel.security import names_containing
    from mp_redact.config import EnvSettingsLoader, RedactionSettings, build_redactor
"""

from mp_redact.application.redaction import (
    DEFAULT_ANNOTATION_KEYS,
    REDACTED,
    TreeRedactor,
    redact,
    replace_strings,
)
from mp_redact.kernel.types import Ref

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_ANNOTATION_KEYS",
    "REDACTED",
    "Ref",
    "TreeRedactor",
    "__version__",
    "redact",
    "replace_strings",
]
