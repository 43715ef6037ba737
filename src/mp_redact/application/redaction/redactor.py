"""Tree redaction – non-mutating traversal and reconstruction of value trees.

:class:`TreeRedactor` walks an arbitrary value and rebuilds it, passing the
values held by sensitive *named slots* (record fields, mapping keys) through a
caller-supplied transform.  Everything else is copied.  Shapes are dispatched
in a fixed order, first match wins:

1. ``None`` and :class:`~mp_redact.kernel.types.Ref` – ``None`` is returned
   as-is; a ``Ref`` is rebuilt around its redacted referent.
2. Records – dataclass and ``NamedTuple`` instances.
3. ``dict`` and its subclasses.
4. ``list``, ``tuple``, ``deque``, ``set``, ``frozenset`` and ``bytearray``.
5. Scalars and every other shape – returned unchanged.

Positional elements carry no name and are never sensitive themselves; a bare
``"password"`` string inside a list is left alone.

Limitations:

* Fields whose name starts with ``_`` are not copied; the output holds the
  field default (or ``None``).
* Container subclasses that cannot be instantiated even through their
  builtin base are returned unchanged.
* Cyclic structures recurse until ``RecursionError``.
"""
from __future__ import annotations

import collections
import dataclasses
import functools
import inspect
import sys
import types
import typing
from typing import Any, Callable, Literal, Sequence, TypeVar, Union

from mp_redact.application.redaction.fields import (
    DEFAULT_ANNOTATION_KEYS,
    FieldDescriptor,
    is_field_sensitive,
)
from mp_redact.kernel.types import Ref
from mp_redact.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)

# Python's numeric tower: an int is acceptable where a float is declared.
_NUMERIC_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


def _defining_class(cls: type, name: str) -> type:
    for klass in cls.__mro__:
        if name in inspect.get_annotations(klass):
            return klass
    return cls


def _resolve_annotation(raw: Any, owner: type) -> Any:
    """Evaluate one string annotation in *owner*'s namespace; ``Any`` when it fails."""
    if not isinstance(raw, str):
        return raw
    module = sys.modules.get(owner.__module__)
    globalns = vars(module) if module is not None else {}
    try:
        return eval(raw, globalns, dict(vars(owner)))  # noqa: S307
    except (NameError, SyntaxError, TypeError, AttributeError):
        return Any


@functools.lru_cache(maxsize=512)
def _field_types(cls: type) -> dict[str, Any]:
    """Declared field types of *cls*, resolved field by field."""
    if dataclasses.is_dataclass(cls):
        raw = {f.name: f.type for f in dataclasses.fields(cls)}
    else:
        raw = dict(getattr(cls, "__annotations__", {}))
    return {name: _resolve_annotation(ann, _defining_class(cls, name)) for name, ann in raw.items()}


def _conforms(value: Any, hint: Any) -> bool:  # noqa: PLR0911
    """Whether *value* may be stored in a slot declared as *hint*.

    Only checks what ``isinstance`` can answer; anything else is accepted.
    """
    if hint is Any or isinstance(hint, TypeVar):
        return True
    origin = typing.get_origin(hint)
    if origin is Union or origin is types.UnionType:
        return any(_conforms(value, arg) for arg in typing.get_args(hint))
    if origin is typing.Annotated:
        return _conforms(value, typing.get_args(hint)[0])
    if origin is Literal:
        return value in typing.get_args(hint)
    if origin is not None:
        hint = origin
    if hint is None:
        hint = types.NoneType
    if isinstance(hint, type):
        try:
            return isinstance(value, (hint, *_NUMERIC_PROMOTIONS.get(hint, ())))
        except TypeError:
            return True
    return True


def _is_record(value: Any) -> bool:
    if dataclasses.is_dataclass(value):
        return not isinstance(value, type)
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _field_default(f: dataclasses.Field[Any]) -> Any:
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    return None


def _new_mapping(mapping: dict[Any, Any]) -> dict[Any, Any]:
    cls = type(mapping)
    if isinstance(mapping, collections.defaultdict):
        return cls(mapping.default_factory)
    return cls()


def _bare_mapping(mapping: dict[Any, Any]) -> dict[Any, Any]:
    """Empty instance of a dict subclass whose constructor wants more arguments."""
    cls = type(mapping)
    result = cls.__new__(cls)
    if isinstance(mapping, collections.defaultdict):
        result.default_factory = mapping.default_factory
    return result


def _new_sequence(seq: Any, items: list[Any]) -> Any:
    cls = type(seq)
    if isinstance(seq, collections.deque):
        return cls(items, seq.maxlen)
    return cls(items)


def _bare_sequence(seq: Any, items: list[Any]) -> Any:
    """Fill a fresh instance through the builtin base, bypassing the subclass ``__init__``."""
    cls = type(seq)
    if isinstance(seq, tuple):
        return tuple.__new__(cls, items)
    if isinstance(seq, frozenset):
        return frozenset.__new__(cls, items)
    result = cls.__new__(cls)
    if isinstance(seq, collections.deque):
        collections.deque.__init__(result, items, seq.maxlen)
    elif isinstance(seq, list):
        list.__init__(result, items)
    elif isinstance(seq, set):
        set.__init__(result, items)
    else:
        bytearray.__init__(result, items)
    return result


class TreeRedactor:
    """Rebuild value trees with sensitive slots transformed.

    Parameters
    ----------
    is_sensitive:
        ``name -> bool``; called for field names, annotation names and string
        mapping keys.  Not memoised, so keep it pure and cheap.
    transform:
        ``value -> value``; called only for values in sensitive slots.  It
        receives the raw value and should return shapes it does not handle
        unchanged.
    annotation_keys:
        Field metadata keys consulted for alternate names, in order.

    A transform result that does not fit the declared type of a record field
    is discarded and the original value is redacted recursively instead.
    The same happens when the transform hands back the very object it was
    given, so the output never shares mutable storage with the input.
    """

    def __init__(
        self,
        is_sensitive: Callable[[str], bool],
        transform: Callable[[Any], Any],
        *,
        annotation_keys: Sequence[str] = DEFAULT_ANNOTATION_KEYS,
    ) -> None:
        self._is_sensitive = is_sensitive
        self._transform = transform
        self._annotation_keys = tuple(annotation_keys)

    @property
    def annotation_keys(self) -> tuple[str, ...]:
        return self._annotation_keys

    def redact(self, value: T) -> T:
        """Return a redacted, independent copy of *value*."""
        return self._walk(value)

    __call__ = redact

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _walk(self, node: Any) -> Any:  # noqa: PLR0911
        if node is None:
            return None
        if isinstance(node, Ref):
            return type(node)(self._walk(node.value))
        if _is_record(node):
            if isinstance(node, tuple):
                return self._walk_named_tuple(node)
            return self._walk_dataclass(node)
        if isinstance(node, dict):
            return self._walk_mapping(node)
        if isinstance(node, (list, tuple, set, frozenset, collections.deque, bytearray)):
            return self._walk_sequence(node)
        return node

    def _walk_dataclass(self, node: Any) -> Any:
        cls = type(node)
        hints = _field_types(cls)
        result = cls.__new__(cls)
        for f in dataclasses.fields(node):
            if f.name.startswith("_"):
                _log.debug("redaction.private_field_reset", record=cls.__qualname__, field=f.name)
                object.__setattr__(result, f.name, _field_default(f))
                continue
            try:
                current = getattr(node, f.name)
            except AttributeError:
                continue
            value = self._redact_field(
                FieldDescriptor.from_dataclass_field(f), current, hints.get(f.name, Any), cls
            )
            object.__setattr__(result, f.name, value)
        return result

    def _walk_named_tuple(self, node: Any) -> Any:
        cls = type(node)
        hints = _field_types(cls)
        values = [
            self._redact_field(FieldDescriptor(name), getattr(node, name), hints.get(name, Any), cls)
            for name in cls._fields
        ]
        return cls._make(values)

    def _walk_mapping(self, node: dict[Any, Any]) -> Any:
        bare = False
        try:
            result = _new_mapping(node)
        except TypeError:
            try:
                result = _bare_mapping(node)
            except TypeError:
                _log.debug("redaction.container_not_rebuilt", container=type(node).__qualname__)
                return node
            bare = True
        for key, value in node.items():
            if isinstance(key, str) and key and self._is_sensitive(key):
                result[key] = self._transform_slot(value)
            else:
                result[key] = self._walk(value)
        if bare:
            self._copy_attributes(node, result)
        return result

    def _walk_sequence(self, node: Any) -> Any:
        if isinstance(node, bytearray):
            items: list[Any] = list(node)
        else:
            items = [self._walk(item) for item in node]
        try:
            return _new_sequence(node, items)
        except TypeError:
            pass
        try:
            result = _bare_sequence(node, items)
        except TypeError:
            _log.debug("redaction.container_not_rebuilt", container=type(node).__qualname__)
            return node
        self._copy_attributes(node, result)
        return result

    def _copy_attributes(self, node: Any, result: Any) -> None:
        """Carry instance attributes of a container subclass over to *result*."""
        for name, value in getattr(node, "__dict__", {}).items():
            object.__setattr__(result, name, self._walk(value))

    # ------------------------------------------------------------------
    # Sensitive slots
    # ------------------------------------------------------------------

    def _redact_field(self, descriptor: FieldDescriptor, value: Any, hint: Any, owner: type) -> Any:
        if not is_field_sensitive(descriptor, self._is_sensitive, self._annotation_keys):
            return self._walk(value)
        if isinstance(value, Ref):
            return type(value)(self._transform_slot(value.value))
        result = self._transform_slot(value)
        if not _conforms(result, hint):
            _log.debug(
                "redaction.transform_type_mismatch",
                record=owner.__qualname__,
                field=descriptor.name,
                expected=str(hint),
                got=type(result).__name__,
            )
            return self._walk(value)
        return result

    def _transform_slot(self, value: Any) -> Any:
        result = self._transform(value)
        if result is value:
            return self._walk(value)
        return result


def redact(
    value: T,
    is_sensitive: Callable[[str], bool],
    transform: Callable[[Any], Any],
) -> T:
    """Return a copy of *value* with values in sensitive slots transformed.

    Shorthand for ``TreeRedactor(is_sensitive, transform).redact(value)``
    using :data:`DEFAULT_ANNOTATION_KEYS`.
    """
    return TreeRedactor(is_sensitive, transform).redact(value)


__all__ = ["TreeRedactor", "redact"]
