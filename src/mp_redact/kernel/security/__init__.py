"""Kernel security – sensitivity predicates and default sensitive names."""
from mp_redact.kernel.security.sensitive import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitivityPredicate,
    any_of,
    default_predicate,
    names_containing,
    names_equal,
    names_matching,
    names_with_prefix,
    names_with_suffix,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "SensitivityPredicate",
    "any_of",
    "default_predicate",
    "names_containing",
    "names_equal",
    "names_matching",
    "names_with_prefix",
    "names_with_suffix",
]
