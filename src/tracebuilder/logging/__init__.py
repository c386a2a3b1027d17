"""Logging infrastructure for tracebuilder.

This module provides structured logging with JSON output, session context
tracking and OpenTelemetry trace correlation.
"""

from tracebuilder.logging.filters import (
    ContextFilter,
    session_scope,
)
from tracebuilder.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
    "session_scope",
]
