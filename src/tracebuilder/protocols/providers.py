"""Provider protocol definitions.

This module defines the interfaces of the collaborators the defaulting
rules read from. All reads are synchronous and total-or-absent: a missing
value comes back empty or ``None``, never as an exception.
"""

from typing import TYPE_CHECKING, List, Optional, Protocol, Tuple, runtime_checkable

from tracebuilder.constants import ColumnHint, TimeUnit

if TYPE_CHECKING:
    from tracebuilder.otel.versions import OtelVersion


@runtime_checkable
class TraceDefaultsProvider(Protocol):
    """Protocol for the datasource that supplies query defaults.
    
    The protocol is marked as runtime_checkable to allow isinstance()
    checks at runtime, which is useful for validation and testing.
    """
    
    def get_default_database(self) -> str:
        ...
    
    def get_default_table(self) -> str:
        ...
    
    def get_default_trace_database(self) -> str:
        ...
    
    def get_default_trace_table(self) -> str:
        ...
    
    def get_default_trace_duration_unit(self) -> TimeUnit:
        ...
    
    def get_trace_otel_version(self) -> Optional[str]:
        """Return the configured OTel version, or None when OTel is disabled."""
        ...
    
    def get_default_trace_columns(self) -> List[Tuple[ColumnHint, str]]:
        """Return the default ``(hint, column name)`` pairs in display order."""
        ...
    
    def get_default_trace_flatten_nested(self) -> bool:
        ...
    
    def get_default_trace_events_column_prefix(self) -> str:
        ...
    
    def get_default_trace_links_column_prefix(self) -> str:
        ...


@runtime_checkable
class ConventionRegistry(Protocol):
    """Protocol for instrumentation-convention registries."""
    
    def lookup(self, version: Optional[str]) -> Optional["OtelVersion"]:
        """Return the convention for ``version``, or None if unknown."""
        ...
