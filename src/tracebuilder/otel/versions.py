"""OpenTelemetry instrumentation conventions.

Each ``OtelVersion`` describes the table layout written by a given version
of the ClickHouse OpenTelemetry exporter: which physical column carries each
semantic role, the unit of the duration column, and how span events and
links are stored.
"""

from typing import Dict, List, Optional

from pydantic import Field

from tracebuilder.constants import ColumnHint, TimeUnit
from tracebuilder.logging import get_logger
from tracebuilder.types.base import BuilderBaseModel

logger = get_logger(__name__)

LATEST = "latest"


class OtelVersion(BuilderBaseModel):
    """Column conventions of one OpenTelemetry exporter version.
    
    Attributes:
        name: Version identifier, e.g. "1.2.9".
        spec_url: Link to the exporter schema this version mirrors.
        trace_column_map: Ordered mapping of semantic hint to column name.
        trace_duration_unit: Unit of the duration column.
        flatten_nested: Whether nested columns are stored flattened.
        trace_events_column_prefix: Prefix of the span events nested columns.
        trace_links_column_prefix: Prefix of the span links nested columns.
    """
    name: str
    spec_url: Optional[str] = None
    trace_column_map: Dict[ColumnHint, str] = Field(default_factory=dict)
    trace_duration_unit: TimeUnit = TimeUnit.NANOSECONDS
    flatten_nested: bool = False
    trace_events_column_prefix: str = "Events"
    trace_links_column_prefix: str = "Links"


OTEL_1_2_9 = OtelVersion(
    name="1.2.9",
    spec_url="https://github.com/open-telemetry/opentelemetry-collector-contrib/tree/main/exporter/clickhouseexporter",
    trace_column_map={
        ColumnHint.TIME: "Timestamp",
        ColumnHint.TRACE_ID: "TraceId",
        ColumnHint.TRACE_SPAN_ID: "SpanId",
        ColumnHint.TRACE_PARENT_SPAN_ID: "ParentSpanId",
        ColumnHint.TRACE_SERVICE_NAME: "ServiceName",
        ColumnHint.TRACE_OPERATION_NAME: "SpanName",
        ColumnHint.TRACE_DURATION_TIME: "Duration",
        ColumnHint.TRACE_TAGS: "SpanAttributes",
        ColumnHint.TRACE_SERVICE_TAGS: "ResourceAttributes",
        ColumnHint.TRACE_STATUS_CODE: "StatusCode",
        ColumnHint.TRACE_KIND: "SpanKind",
        ColumnHint.TRACE_STATUS_MESSAGE: "StatusMessage",
        ColumnHint.TRACE_INSTRUMENTATION_LIBRARY_NAME: "ScopeName",
        ColumnHint.TRACE_INSTRUMENTATION_LIBRARY_VERSION: "ScopeVersion",
        ColumnHint.TRACE_STATE: "TraceState",
    },
    trace_duration_unit=TimeUnit.NANOSECONDS,
    flatten_nested=False,
    trace_events_column_prefix="Events",
    trace_links_column_prefix="Links",
)


class OtelRegistry:
    """Registry of known OpenTelemetry conventions.
    
    Versions are kept in registration order; the most recently registered
    one is what ``"latest"`` resolves to. Lookups never raise: an unknown
    version resolves to ``None``.
    
    Example:
        >>> registry = OtelRegistry([OTEL_1_2_9])
        >>> registry.get_version("latest").name
        '1.2.9'
        >>> registry.get_version("0.0.1") is None
        True
    """
    
    def __init__(self, versions: Optional[List[OtelVersion]] = None):
        self._versions: Dict[str, OtelVersion] = {}
        for version in versions or []:
            self.register(version)

    def register(self, version: OtelVersion) -> None:
        """Register a version.
        
        Once registered, subsequent registration attempts for the same name
        are ignored to prevent accidental overrides.
        """
        if version.name in self._versions:
            logger.debug(f"OTel version '{version.name}' already registered, ignoring re-registration attempt")
            return
        if version.name == LATEST:
            raise ValueError(f"'{LATEST}' is reserved and cannot be registered as a version name")
        self._versions[version.name] = version

    @property
    def latest(self) -> Optional[OtelVersion]:
        if not self._versions:
            return None
        return list(self._versions.values())[-1]

    def get_version(self, version: Optional[str] = None) -> Optional[OtelVersion]:
        """Resolve a version name.
        
        Args:
            version: Version name or ``"latest"``
        
        Returns:
            The matching OtelVersion, or None if unknown
        """
        if not version:
            return None
        if version == LATEST:
            return self.latest
        return self._versions.get(version)

    def lookup(self, version: Optional[str]) -> Optional[OtelVersion]:
        """Alias of ``get_version`` satisfying ``ConventionRegistry``."""
        return self.get_version(version)

    def versions(self) -> List[str]:
        """Registered version names, newest last."""
        return list(self._versions.keys())


otel = OtelRegistry([OTEL_1_2_9])


def get_version(version: Optional[str] = None) -> Optional[OtelVersion]:
    """Resolve ``version`` against the built-in registry."""
    return otel.get_version(version)
