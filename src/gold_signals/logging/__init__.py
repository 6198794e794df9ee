"""Structured logging."""

from gold_signals.logging.setup import bind_request, get_logger, setup_logging

__all__ = ["bind_request", "get_logger", "setup_logging"]
