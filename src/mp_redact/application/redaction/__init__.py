"""Application redaction – tree redactor, field resolver, transforms."""
from mp_redact.application.redaction.fields import (
    DEFAULT_ANNOTATION_KEYS,
    FieldDescriptor,
    annotation_name,
    is_field_sensitive,
)
from mp_redact.application.redaction.log_filter import RedactingLogFilter
from mp_redact.application.redaction.redactor import TreeRedactor, redact
from mp_redact.application.redaction.transforms import (
    REDACTED,
    Transform,
    hash_strings,
    partial,
    replace_strings,
    tokenize_strings,
)

__all__ = [
    "DEFAULT_ANNOTATION_KEYS",
    "FieldDescriptor",
    "REDACTED",
    "RedactingLogFilter",
    "Transform",
    "TreeRedactor",
    "annotation_name",
    "hash_strings",
    "is_field_sensitive",
    "partial",
    "redact",
    "replace_strings",
    "tokenize_strings",
]
