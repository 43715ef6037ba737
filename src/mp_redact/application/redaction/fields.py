"""Field sensitivity resolution for record fields.

A record field is sensitive when its own name, or the alternate name it
carries under one of the recognised annotation keys, satisfies the caller's
predicate.  Annotations live in dataclass field metadata::

    @dataclass
    class Login:
        user: str
        pw: str = field(metadata={"json": "password,omitempty"})

Only the part before the first comma names the field; ``"-"`` marks a field
excluded from that representation and is ignored.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable, Sequence

DEFAULT_ANNOTATION_KEYS: tuple[str, ...] = ("json", "xml", "yaml", "form", "query", "db", "bson")

IGNORE_MARKER = "-"


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """Name of a record field plus its raw annotation strings."""

    name: str
    annotations: Mapping[str, str] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_dataclass_field(cls, f: dataclasses.Field[Any]) -> FieldDescriptor:
        annotations = {k: v for k, v in f.metadata.items() if isinstance(k, str) and isinstance(v, str)}
        return cls(name=f.name, annotations=annotations)


def annotation_name(raw: str) -> str | None:
    """Return the name portion of *raw*, or ``None`` for the ignore marker.

    An annotation with options only (``",omitempty"``) names the empty
    string, which is still offered to the predicate.

    >>> annotation_name("password,omitempty")
    'password'
    >>> annotation_name(",omitempty")
    ''
    >>> annotation_name("-") is None
    True
    """
    name = raw.split(",", 1)[0]
    if name == IGNORE_MARKER:
        return None
    return name


def is_field_sensitive(
    descriptor: FieldDescriptor,
    is_sensitive: Callable[[str], bool],
    annotation_keys: Sequence[str] = DEFAULT_ANNOTATION_KEYS,
) -> bool:
    """Check the field name first, then each annotation key in order."""
    if is_sensitive(descriptor.name):
        return True
    for key in annotation_keys:
        raw = descriptor.annotations.get(key)
        if not raw:
            continue
        name = annotation_name(raw)
        if name is not None and is_sensitive(name):
            return True
    return False


__all__ = [
    "DEFAULT_ANNOTATION_KEYS",
    "FieldDescriptor",
    "IGNORE_MARKER",
    "annotation_name",
    "is_field_sensitive",
]
