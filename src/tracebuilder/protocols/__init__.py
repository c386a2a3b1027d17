"""Protocol definitions for tracebuilder.

This module contains protocol definitions that define contracts for
the collaborators of the defaulting rules. Protocols are part of Layer 0.

Protocols provide type-safe interfaces without requiring inheritance,
following Python's structural subtyping (duck typing with type hints).
"""

from .patterns import Observable
from .providers import ConventionRegistry, TraceDefaultsProvider

__all__ = [
    "ConventionRegistry",
    "Observable",
    "TraceDefaultsProvider",
]
