from tracebuilder.__version__ import __version__

from tracebuilder.constants import (
    ColumnHint,
    FilterOperator,
    OrderByDirection,
    TimeUnit,
)
from tracebuilder.types import (
    BuilderOptionsPatch,
    MetaPatch,
    OrderBy,
    QueryBuilderOptions,
    SelectedColumn,
    TableColumn,
)
from tracebuilder.store import BuilderOptionsStore, set_all_options, set_options
from tracebuilder.otel import OtelRegistry, OtelVersion, otel
from tracebuilder.datasource import TraceDatasource
from tracebuilder.session import TraceQueryBuilderSession

from tracebuilder.common.exceptions import BuilderError, ErrorCode


__all__ = [
    "__version__",

    "TraceQueryBuilderSession",
    "TraceDatasource",
    "BuilderOptionsStore",
    "set_options",
    "set_all_options",

    "OtelRegistry",
    "OtelVersion",
    "otel",

    # Types
    "BuilderOptionsPatch",
    "MetaPatch",
    "OrderBy",
    "QueryBuilderOptions",
    "SelectedColumn",
    "TableColumn",
    "ColumnHint",
    "FilterOperator",
    "OrderByDirection",
    "TimeUnit",

    # Exceptions (public API)
    "BuilderError",
    "ErrorCode",
]
