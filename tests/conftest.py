from typing import List, Optional, Tuple

import pytest

from tracebuilder.constants import ColumnHint, TimeUnit
from tracebuilder.otel import OTEL_1_2_9, OtelRegistry
from tracebuilder.types.options import TableColumn


class FakeDatasource:
    """In-memory TraceDefaultsProvider with call counting."""

    def __init__(
        self,
        database: str = "default",
        table: str = "",
        trace_database: str = "",
        trace_table: str = "",
        duration_unit: TimeUnit = TimeUnit.MILLISECONDS,
        otel_version: Optional[str] = None,
        columns: Optional[List[Tuple[ColumnHint, str]]] = None,
        flatten_nested: bool = False,
        events_prefix: str = "Events",
        links_prefix: str = "Links",
    ):
        self.database = database
        self.table = table
        self.trace_database = trace_database
        self.trace_table = trace_table
        self.duration_unit = duration_unit
        self.otel_version = otel_version
        self.columns = columns or []
        self.flatten_nested = flatten_nested
        self.events_prefix = events_prefix
        self.links_prefix = links_prefix
        self.column_requests = 0

    def get_default_database(self) -> str:
        return self.database

    def get_default_table(self) -> str:
        return self.table

    def get_default_trace_database(self) -> str:
        return self.trace_database

    def get_default_trace_table(self) -> str:
        return self.trace_table

    def get_default_trace_duration_unit(self) -> TimeUnit:
        return self.duration_unit

    def get_trace_otel_version(self) -> Optional[str]:
        return self.otel_version

    def get_default_trace_columns(self) -> List[Tuple[ColumnHint, str]]:
        self.column_requests += 1
        return list(self.columns)

    def get_default_trace_flatten_nested(self) -> bool:
        return self.flatten_nested

    def get_default_trace_events_column_prefix(self) -> str:
        return self.events_prefix

    def get_default_trace_links_column_prefix(self) -> str:
        return self.links_prefix


class RecordingDispatch:
    """Collects actions dispatched by a reaction under test."""

    def __init__(self):
        self.actions = []

    def __call__(self, action):
        self.actions.append(action)

    @property
    def count(self) -> int:
        return len(self.actions)

    @property
    def last_patch(self):
        return self.actions[-1].patch


@pytest.fixture
def datasource():
    return FakeDatasource(
        trace_table="spans",
        columns=[(ColumnHint.TIME, "ts")],
    )


@pytest.fixture
def registry():
    return OtelRegistry([OTEL_1_2_9])


@pytest.fixture
def recorder():
    return RecordingDispatch()


@pytest.fixture
def otel_schema():
    """Schema of a table written by the ClickHouse OTel exporter."""
    return [
        TableColumn(name="Timestamp", type="DateTime64(9)"),
        TableColumn(name="TraceId", type="String"),
        TableColumn(name="SpanId", type="String"),
        TableColumn(name="ParentSpanId", type="String"),
        TableColumn(name="TraceState", type="String"),
        TableColumn(name="SpanName", type="LowCardinality(String)"),
        TableColumn(name="SpanKind", type="LowCardinality(String)"),
        TableColumn(name="ServiceName", type="LowCardinality(String)"),
        TableColumn(name="ResourceAttributes", type="Map(LowCardinality(String), String)"),
        TableColumn(name="ScopeName", type="String"),
        TableColumn(name="ScopeVersion", type="String"),
        TableColumn(name="SpanAttributes", type="Map(LowCardinality(String), String)"),
        TableColumn(name="Duration", type="UInt64"),
        TableColumn(name="StatusCode", type="LowCardinality(String)"),
        TableColumn(name="StatusMessage", type="String"),
    ]


@pytest.fixture
def make_datasource():
    """Factory for FakeDatasource instances with custom defaults."""
    return FakeDatasource
