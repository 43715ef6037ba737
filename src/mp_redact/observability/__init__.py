"""Observability – structured logging."""

from mp_redact.observability.logging import JsonLoggerFactory, RedactionProcessor, get_logger

__all__ = ["JsonLoggerFactory", "RedactionProcessor", "get_logger"]
