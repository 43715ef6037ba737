"""Ref[T] — a mutable single-value reference cell."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Ref(Generic[T]):
    """Shared, mutable indirection to a value.

    Two holders of the same ``Ref`` observe each other's writes, which is
    why redaction never reuses an input ``Ref`` in its output::

        token = Ref("abc123")
        token.value = "rotated"
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:  # noqa: A003
        self._value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ref({self._value!r})"


__all__ = ["Ref"]
