"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass base for settings read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after construction and raises a ``ConfigError`` subclass on bad input.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*: ``REDACT_MATCH`` for ``match``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Cross-field validation hook; a no-op by default."""


__all__ = ["Settings"]
