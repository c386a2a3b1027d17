"""Default filters and ordering applied on table change."""

from typing import List

from tracebuilder.constants import ColumnHint, FilterCondition, FilterOperator, OrderByDirection
from tracebuilder.defaults.base import Dispatch, Reaction, ReactionInputs, SessionLatches
from tracebuilder.logging import get_logger
from tracebuilder.store import set_options
from tracebuilder.types.options import (
    DateFilterWithoutValue,
    Filter,
    NumberFilter,
    OrderBy,
    StringFilter,
)

logger = get_logger(__name__)


def default_trace_filters() -> List[Filter]:
    """The canonical filters of a trace search.

    Filters reference columns by hint only; ``key`` is left empty for the
    consuming layer to resolve.
    """
    return [
        # Dashboard time range
        DateFilterWithoutValue(
            operator=FilterOperator.WITH_IN_GRAFANA_TIME_RANGE,
            filter_type="custom",
            key="",
            hint=ColumnHint.TIME,
            condition=FilterCondition.AND,
        ),
        # Top level spans only
        StringFilter(
            operator=FilterOperator.IS_EMPTY,
            filter_type="custom",
            key="",
            hint=ColumnHint.TRACE_PARENT_SPAN_ID,
            condition=FilterCondition.AND,
            value="",
        ),
        NumberFilter(
            type="UInt64",
            operator=FilterOperator.GREATER_THAN,
            filter_type="custom",
            key="",
            hint=ColumnHint.TRACE_DURATION_TIME,
            condition=FilterCondition.AND,
            value=0,
        ),
        # Service name placeholder
        StringFilter(
            operator=FilterOperator.IS_ANYTHING,
            filter_type="custom",
            key="",
            hint=ColumnHint.TRACE_SERVICE_NAME,
            condition=FilterCondition.AND,
            value="",
        ),
    ]


def default_trace_order_by() -> List[OrderBy]:
    """Newest spans first, then longest."""
    return [
        OrderBy(name="", hint=ColumnHint.TIME, dir=OrderByDirection.DESC, default=True),
        OrderBy(name="", hint=ColumnHint.TRACE_DURATION_TIME, dir=OrderByDirection.DESC, default=True),
    ]


class DefaultFilters(Reaction):
    """Replaces filters and ordering with the defaults whenever the table changes.

    Skipped in trace ID mode. Every table change re-arms the reaction, also
    for queries that were not new; switching back to a previous table
    applies the defaults again.
    """

    name = "default_filters"

    def prepare(self, inputs: ReactionInputs, latches: SessionLatches) -> None:
        if inputs.table != latches.last_table:
            latches.applied_default_filters = False

    def dependencies(self, inputs: ReactionInputs):
        return (inputs.table, inputs.is_trace_id_mode)

    def run(self, inputs: ReactionInputs, latches: SessionLatches, dispatch: Dispatch) -> None:
        if inputs.is_trace_id_mode or not inputs.table or latches.applied_default_filters:
            return

        latches.last_table = inputs.table
        latches.applied_default_filters = True
        dispatch(
            set_options(
                filters=default_trace_filters(),
                order_by=default_trace_order_by(),
            )
        )
        logger.debug(f"Applied default filters for table '{inputs.table}'", extra={"table": inputs.table})
