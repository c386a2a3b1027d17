"""Initial defaults for new trace queries."""

from tracebuilder.defaults.base import Dispatch, Reaction, ReactionInputs, SessionLatches
from tracebuilder.logging import get_logger
from tracebuilder.protocols import TraceDefaultsProvider
from tracebuilder.store import set_options
from tracebuilder.types.options import MetaPatch, SelectedColumn

logger = get_logger(__name__)


class TraceDefaultsOnMount(Reaction):
    """Loads the datasource defaults into a new query, once per session.

    Trace-specific database and table settings fall back to the datasource
    defaults, and an empty default table never clears a table that is
    already set. OTel counts as enabled when the datasource reports a
    version.
    """

    name = "trace_defaults_on_mount"

    def __init__(self, datasource: TraceDefaultsProvider):
        self.datasource = datasource

    def dependencies(self, inputs: ReactionInputs):
        options = inputs.options
        return (options.columns, options.order_by, options.table, inputs.is_new_query)

    def run(self, inputs: ReactionInputs, latches: SessionLatches, dispatch: Dispatch) -> None:
        if not inputs.is_new_query or latches.did_set_defaults:
            return

        datasource = self.datasource
        default_db = datasource.get_default_trace_database() or datasource.get_default_database()
        default_table = datasource.get_default_trace_table() or datasource.get_default_table()
        default_duration_unit = datasource.get_default_trace_duration_unit()
        otel_version = datasource.get_trace_otel_version()
        default_columns = datasource.get_default_trace_columns()
        default_flatten_nested = datasource.get_default_trace_flatten_nested()
        default_events_column_prefix = datasource.get_default_trace_events_column_prefix()
        default_links_column_prefix = datasource.get_default_trace_links_column_prefix()

        next_columns = [SelectedColumn(name=name, hint=hint) for hint, name in default_columns]

        dispatch(
            set_options(
                database=default_db,
                table=default_table or inputs.table,
                columns=next_columns,
                meta=MetaPatch(
                    otel_enabled=bool(otel_version),
                    otel_version=otel_version,
                    trace_duration_unit=default_duration_unit,
                    flatten_nested=default_flatten_nested,
                    trace_events_column_prefix=default_events_column_prefix,
                    trace_links_column_prefix=default_links_column_prefix,
                ),
            )
        )
        latches.did_set_defaults = True
        logger.debug(
            "Applied new query defaults",
            extra={"database": default_db, "table": default_table or inputs.table, "column_count": len(next_columns)},
        )
