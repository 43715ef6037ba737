"""Observability – structured logging helpers."""
from mp_redact.observability.logging.processors import RedactionProcessor, get_logger
from mp_redact.observability.logging.factory import JsonLoggerFactory

__all__ = [
    "JsonLoggerFactory",
    "RedactionProcessor",
    "get_logger",
]
