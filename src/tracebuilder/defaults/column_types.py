"""Column type backfill and JSON attribute detection."""

from typing import List, Optional

from tracebuilder.constants import ColumnHint
from tracebuilder.defaults.base import Dispatch, Reaction, ReactionInputs, SessionLatches
from tracebuilder.logging import get_logger
from tracebuilder.store import set_options
from tracebuilder.types.options import MetaPatch, SelectedColumn, TableColumn, find_column_by_hint

logger = get_logger(__name__)

JSON_TYPE_PREFIX = "json"


def _is_json_column(column: Optional[SelectedColumn]) -> bool:
    return bool(column and column.type and column.type.lower().startswith(JSON_TYPE_PREFIX))


def _backfill_types(columns: List[SelectedColumn], schema: List[TableColumn]) -> List[SelectedColumn]:
    schema_types = {}
    for schema_column in schema:
        schema_types.setdefault(schema_column.name, schema_column.type)

    updated = []
    for column in columns:
        schema_type = schema_types.get(column.name)
        if column.type or not schema_type:
            updated.append(column)
        else:
            updated.append(column.model_copy(update={"type": schema_type}))
    return updated


class ColumnTypes(Reaction):
    """Fills in column types from the table schema and detects JSON attributes.

    When the tags or service tags column has a JSON type and the user has not
    already turned it on, ``use_json_attributes`` is set. The flag is only
    ever set to True here, never cleared.

    The latch only short-circuits re-evaluation once nothing is missing a
    type; it is set after every evaluation, dispatch or not, and cleared
    while columns or schema are empty.
    """

    name = "column_types"

    def dependencies(self, inputs: ReactionInputs):
        return (inputs.schema, inputs.options.columns, inputs.use_json_attributes)

    def run(self, inputs: ReactionInputs, latches: SessionLatches, dispatch: Dispatch) -> None:
        columns = inputs.options.columns
        schema = inputs.schema
        if not columns or not schema:
            latches.did_populate_types = False
            return

        columns_need_types = any(not c.type for c in columns)
        if not columns_need_types and latches.did_populate_types:
            return

        updated_columns = _backfill_types(columns, schema)
        has_changes = updated_columns != columns

        detected_json_attributes = False
        if not inputs.use_json_attributes:
            tags_column = find_column_by_hint(updated_columns, ColumnHint.TRACE_TAGS)
            service_tags_column = find_column_by_hint(updated_columns, ColumnHint.TRACE_SERVICE_TAGS)
            detected_json_attributes = _is_json_column(tags_column) or _is_json_column(service_tags_column)

        if has_changes or detected_json_attributes:
            dispatch(
                set_options(
                    columns=updated_columns,
                    meta=MetaPatch(use_json_attributes=True) if detected_json_attributes else None,
                )
            )
            logger.debug(
                "Backfilled column types",
                extra={
                    "typed_columns": sum(1 for old, new in zip(columns, updated_columns) if old is not new),
                    "json_attributes_detected": detected_json_attributes,
                },
            )

        latches.did_populate_types = True
