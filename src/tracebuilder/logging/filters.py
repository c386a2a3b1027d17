"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
enabling correlation of logs emitted while a builder session applies its
defaulting rules.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional
from tracebuilder.__version__ import __version__

session_id_var: ContextVar[Optional[str]] = ContextVar("session_id", default=None)
query_ref_var: ContextVar[Optional[str]] = ContextVar("query_ref", default=None)

class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records.

    This filter extracts values from context variables and adds them to
    log records, so every record a session produces carries its id.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        setattr(record, "session_id", session_id_var.get())
        setattr(record, "query_ref", query_ref_var.get())
        setattr(record, "sdk_name", "tracebuilder")
        setattr(record, "sdk_version", __version__)

        return True


@contextmanager
def session_scope(session_id: str, query_ref: Optional[str] = None) -> Iterator[None]:
    """Bind the session id and query reference for the enclosed block.

    Both variables are restored on exit, so scopes nest.
    """
    session_token = session_id_var.set(session_id)
    query_token = query_ref_var.set(query_ref)
    try:
        yield
    finally:
        query_ref_var.reset(query_token)
        session_id_var.reset(session_token)
