"""Kernel types – reference cells used by redactable value trees."""
from mp_redact.kernel.types.ref import Ref

__all__ = ["Ref"]
