"""Settings module providing configuration management for tracebuilder.

Built on Pydantic Settings: values come from environment variables
(``TRACEBUILDER_`` prefix, ``__`` for nesting), then ``.env``, then the
defaults in code.

Structure:
    - base.py: BuilderBaseSettings with shared config and log level
    - traces.py: TraceSettings, the trace query defaults
    - main.py: DatasourceSettings aggregate and the get_settings() singleton

Quick Start:
    >>> from tracebuilder.settings import get_settings
    >>> settings = get_settings()
    >>> settings.max_reaction_passes
    16
"""

from .base import BuilderBaseSettings
from .main import DatasourceSettings, get_settings, reload_settings
from .traces import TraceSettings

__all__ = [
    "BuilderBaseSettings",
    "DatasourceSettings",
    "TraceSettings",
    "get_settings",
    "reload_settings",
]
