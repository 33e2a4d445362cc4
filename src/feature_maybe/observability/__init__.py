"""Observability – structured logging."""
from feature_maybe.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
