"""Defaulting reactions for trace queries.

Four independent reactions keep a trace query's options complete without
overwriting user edits:

    - TraceDefaultsOnMount: datasource defaults for a new query, once
    - OtelColumns: OTel convention columns when OTel is switched on
    - ColumnTypes: column types from the schema, JSON attribute detection
    - DefaultFilters: canonical filters and ordering on table change

Reactions are stateless; their latches live in ``SessionLatches`` owned by
``tracebuilder.session.TraceQueryBuilderSession``.
"""

from tracebuilder.defaults.base import Dispatch, Reaction, ReactionInputs, SessionLatches
from tracebuilder.defaults.column_types import JSON_TYPE_PREFIX, ColumnTypes
from tracebuilder.defaults.default_filters import DefaultFilters, default_trace_filters, default_trace_order_by
from tracebuilder.defaults.mount import TraceDefaultsOnMount
from tracebuilder.defaults.otel_columns import OtelColumns

__all__ = [
    "ColumnTypes",
    "DefaultFilters",
    "Dispatch",
    "JSON_TYPE_PREFIX",
    "OtelColumns",
    "Reaction",
    "ReactionInputs",
    "SessionLatches",
    "TraceDefaultsOnMount",
    "default_trace_filters",
    "default_trace_order_by",
]
