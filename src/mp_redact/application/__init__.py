"""Application – redaction use cases (framework-agnostic)."""

from mp_redact.application.redaction import RedactingLogFilter, TreeRedactor, redact

__all__ = [
    "RedactingLogFilter",
    "TreeRedactor",
    "redact",
]
