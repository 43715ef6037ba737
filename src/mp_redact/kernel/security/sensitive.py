"""Kernel security – sensitivity predicates over field and key names.

A predicate answers one question: *does this name label a sensitive slot?*
It is called with record field names, annotation names and mapping keys,
possibly many times for the same name, so it must be pure and cheap.
"""
from __future__ import annotations

import fnmatch
from typing import Callable, TypeAlias

SensitivityPredicate: TypeAlias = Callable[[str], bool]

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "credit_card", "card_number", "cvv", "ssn", "cpf", "cnpj",
})


def names_equal(*names: str, case_sensitive: bool = False) -> SensitivityPredicate:
    """Match names exactly, case-insensitively unless *case_sensitive*."""
    if case_sensitive:
        exact = frozenset(names)
        return lambda name: name in exact
    folded = frozenset(n.lower() for n in names)
    return lambda name: name.lower() in folded


def names_containing(*fragments: str) -> SensitivityPredicate:
    """Match names containing any of *fragments* (``AccessToken`` ~ ``token``)."""
    folded = tuple(f.lower() for f in fragments)

    def _predicate(name: str) -> bool:
        lower = name.lower()
        return any(f in lower for f in folded)

    return _predicate


def names_with_prefix(*prefixes: str) -> SensitivityPredicate:
    folded = tuple(p.lower() for p in prefixes)
    return lambda name: name.lower().startswith(folded)


def names_with_suffix(*suffixes: str) -> SensitivityPredicate:
    folded = tuple(s.lower() for s in suffixes)
    return lambda name: name.lower().endswith(folded)


def names_matching(*patterns: str) -> SensitivityPredicate:
    """Match names against shell-style globs, e.g. ``*_key`` or ``pass*``."""
    folded = tuple(p.lower() for p in patterns)

    def _predicate(name: str) -> bool:
        lower = name.lower()
        return any(fnmatch.fnmatchcase(lower, p) for p in folded)

    return _predicate


def any_of(*predicates: SensitivityPredicate) -> SensitivityPredicate:
    """Combine predicates; the first one answering ``True`` wins."""
    return lambda name: any(p(name) for p in predicates)


def default_predicate() -> SensitivityPredicate:
    """Exact, case-insensitive match against :data:`DEFAULT_SENSITIVE_FIELDS`."""
    return names_equal(*DEFAULT_SENSITIVE_FIELDS)


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
