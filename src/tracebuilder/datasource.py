"""Settings-backed metadata provider.

``TraceDatasource`` answers the default-value questions the defaulting
rules ask when a new trace query is created. Values come from
``DatasourceSettings``; when OTel is enabled and the configured version
resolves, the convention's columns, unit and prefixes win over the explicit
trace settings.
"""

from typing import List, Optional, Tuple

from tracebuilder.constants import ColumnHint, TimeUnit
from tracebuilder.otel import OtelVersion, otel
from tracebuilder.protocols import ConventionRegistry
from tracebuilder.settings import DatasourceSettings, get_settings


class TraceDatasource:
    """Implements ``TraceDefaultsProvider`` on top of ``DatasourceSettings``.

    Example:
        >>> datasource = TraceDatasource(DatasourceSettings(traces={"otel_enabled": True}))
        >>> datasource.get_trace_otel_version()
        'latest'
        >>> datasource.get_default_trace_columns()[0][1]
        'Timestamp'
    """

    def __init__(
        self,
        settings: Optional[DatasourceSettings] = None,
        registry: ConventionRegistry = otel,
    ):
        self.settings = settings if settings is not None else get_settings()
        self.registry = registry

    def _otel_config(self) -> Optional[OtelVersion]:
        traces = self.settings.traces
        if not traces.otel_enabled:
            return None
        return self.registry.lookup(traces.otel_version)

    def get_default_database(self) -> str:
        return self.settings.default_database

    def get_default_table(self) -> str:
        return self.settings.default_table

    def get_default_trace_database(self) -> str:
        return self.settings.traces.default_database

    def get_default_trace_table(self) -> str:
        return self.settings.traces.default_table

    def get_trace_otel_version(self) -> Optional[str]:
        traces = self.settings.traces
        return traces.otel_version if traces.otel_enabled else None

    def get_default_trace_duration_unit(self) -> TimeUnit:
        otel_config = self._otel_config()
        if otel_config is not None:
            return TimeUnit(otel_config.trace_duration_unit)
        return self.settings.traces.duration_unit

    def get_default_trace_columns(self) -> List[Tuple[ColumnHint, str]]:
        otel_config = self._otel_config()
        if otel_config is not None:
            return [(ColumnHint(hint), name) for hint, name in otel_config.trace_column_map.items()]
        return [(ColumnHint(hint), name) for hint, name in self.settings.traces.columns.items()]

    def get_default_trace_flatten_nested(self) -> bool:
        otel_config = self._otel_config()
        if otel_config is not None:
            return otel_config.flatten_nested
        return self.settings.traces.flatten_nested

    def get_default_trace_events_column_prefix(self) -> str:
        otel_config = self._otel_config()
        if otel_config is not None:
            return otel_config.trace_events_column_prefix
        return self.settings.traces.events_column_prefix

    def get_default_trace_links_column_prefix(self) -> str:
        otel_config = self._otel_config()
        if otel_config is not None:
            return otel_config.trace_links_column_prefix
        return self.settings.traces.links_column_prefix
