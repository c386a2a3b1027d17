"""Trace query builder session.

A session owns the configuration store of one query being edited, the
latches of the defaulting reactions, and the current schema of the active
table. After every committed change it re-evaluates the reactions until
the configuration settles.
"""

import uuid
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from tracebuilder.common.exceptions import update_loop_error
from tracebuilder.defaults import (
    ColumnTypes,
    DefaultFilters,
    OtelColumns,
    Reaction,
    ReactionInputs,
    SessionLatches,
    TraceDefaultsOnMount,
)
from tracebuilder.logging import get_logger, session_scope
from tracebuilder.otel import otel
from tracebuilder.protocols import ConventionRegistry, TraceDefaultsProvider
from tracebuilder.settings import DatasourceSettings, get_settings
from tracebuilder.store import BuilderOptionsStore, set_options
from tracebuilder.telemetry import reaction_span, record_dispatch
from tracebuilder.types.options import QueryBuilderOptions, TableColumn

logger = get_logger(__name__)

_UNSET: Tuple[Any, ...] = (object(),)


class TraceQueryBuilderSession:
    """Editing session of one trace query.

    Reactions run in a fixed order (mount defaults, OTel columns, column
    types, default filters) but do not rely on it: each one reads the
    committed configuration right before it is evaluated, and a dispatch
    made during a pass is picked up by the next pass rather than
    re-entrantly. Passes repeat until one commits nothing.

    Args:
        datasource: Provider of new query defaults
        registry: OTel convention registry
        options: Initial configuration (e.g. a saved query)
        is_new_query: Whether the query was just created
        schema: Columns of the active table, if already known
        settings: Settings to read the pass limit from, defaults to
            ``get_settings()``
        max_passes: Pass limit per change, overrides
            ``settings.max_reaction_passes``
        session_id: Id stamped on log records, generated when omitted
        query_ref: Reference of the edited query (e.g. its ref id),
            stamped on log records

    Example:
        >>> settings = DatasourceSettings(traces={"default_table": "otel_traces", "otel_enabled": True})
        >>> session = TraceQueryBuilderSession(TraceDatasource(settings), is_new_query=True)
        >>> session.options.table
        'otel_traces'
        >>> session.set_schema([TableColumn(name="Timestamp", type="DateTime64(9)")])
        >>> session.options.columns[0].type
        'DateTime64(9)'
    """

    def __init__(
        self,
        datasource: TraceDefaultsProvider,
        *,
        registry: ConventionRegistry = otel,
        options: Optional[QueryBuilderOptions] = None,
        is_new_query: bool = False,
        schema: Optional[Iterable[Union[TableColumn, Dict[str, Any]]]] = None,
        settings: Optional[DatasourceSettings] = None,
        max_passes: Optional[int] = None,
        session_id: Optional[str] = None,
        query_ref: Optional[str] = None,
    ):
        self.session_id = session_id or str(uuid.uuid4())
        self.query_ref = query_ref
        self.is_new_query = is_new_query
        if max_passes is None:
            max_passes = (settings if settings is not None else get_settings()).max_reaction_passes
        self.max_passes = max_passes
        self.store = BuilderOptionsStore(options)
        self.latches = SessionLatches.seed(self.store.state, is_new_query)
        self.reactions: List[Reaction] = [
            TraceDefaultsOnMount(datasource),
            OtelColumns(registry),
            ColumnTypes(),
            DefaultFilters(),
        ]
        self._schema: List[TableColumn] = self._to_schema(schema or [])
        self._last_dependencies: Dict[str, Tuple[Any, ...]] = {}
        self._running = False
        self._dirty = False
        self._unsubscribe = self.store.subscribe(self._on_commit)

        self.refresh()

    @staticmethod
    def _to_schema(columns: Iterable[Union[TableColumn, Dict[str, Any]]]) -> List[TableColumn]:
        return [c if isinstance(c, TableColumn) else TableColumn.model_validate(c) for c in columns]

    @property
    def options(self) -> QueryBuilderOptions:
        """The committed configuration."""
        return self.store.state

    @property
    def schema(self) -> List[TableColumn]:
        return list(self._schema)

    def dispatch(self, action: Any) -> bool:
        """Apply a user edit and let the reactions respond.

        Returns:
            True if the configuration changed
        """
        return self.store.dispatch(action)

    def set_options(self, **fields: Any) -> bool:
        """Shorthand for ``dispatch(set_options(**fields))``."""
        return self.dispatch(set_options(**fields))

    def set_schema(self, columns: Iterable[Union[TableColumn, Dict[str, Any]]]) -> None:
        """Replace the known schema of the active table."""
        schema = self._to_schema(columns)
        if schema == self._schema:
            return
        self._schema = schema
        self._dirty = True
        self.refresh()

    def close(self) -> None:
        """Stop reacting to store commits."""
        self._unsubscribe()

    def _on_commit(self, options: QueryBuilderOptions) -> None:
        self._dirty = True
        self.refresh()

    def refresh(self) -> None:
        """Evaluate the reactions until the configuration settles.

        Raises:
            BuilderError: With ``UPDATE_LOOP`` if reactions still dispatch
                after ``max_passes`` passes
        """
        if self._running:
            self._dirty = True
            return

        self._running = True
        try:
            with session_scope(self.session_id, self.query_ref):
                passes = 0
                fired: List[str] = []
                while True:
                    if passes >= self.max_passes:
                        raise update_loop_error(passes, fired)
                    passes += 1
                    self._dirty = False
                    fired = self._run_pass()
                    if not self._dirty:
                        break
                logger.debug(f"Reactions settled after {passes} pass(es)", extra={"passes": passes})
        finally:
            self._running = False

    def _inputs(self) -> ReactionInputs:
        return ReactionInputs(
            options=self.store.state,
            schema=self._schema,
            is_new_query=self.is_new_query,
        )

    def _run_pass(self) -> List[str]:
        fired: List[str] = []
        for reaction in self.reactions:
            inputs = self._inputs()
            reaction.prepare(inputs, self.latches)
            dependencies = reaction.dependencies(inputs)
            if self._last_dependencies.get(reaction.name, _UNSET) == dependencies:
                continue
            self._last_dependencies[reaction.name] = dependencies
            reaction.run(inputs, self.latches, self._dispatcher(reaction.name, fired))
        return fired

    def _dispatcher(self, name: str, fired: List[str]) -> Callable[[Any], None]:
        def dispatch(action: Any) -> None:
            with reaction_span(name) as span:
                changed = self.store.dispatch(action)
                span.set_attribute("tracebuilder.changed", changed)
            if changed:
                record_dispatch(name)
                fired.append(name)
            logger.debug(
                f"Reaction '{name}' dispatched",
                extra={"reaction": name, "changed": changed},
            )
        return dispatch

