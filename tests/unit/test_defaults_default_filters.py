"""Tests for the default filters reaction."""

from tracebuilder.constants import ColumnHint, FilterOperator, OrderByDirection
from tracebuilder.defaults import (
    DefaultFilters,
    ReactionInputs,
    SessionLatches,
    default_trace_filters,
    default_trace_order_by,
)
from tracebuilder.types.options import (
    BuilderOptionsMeta,
    DateFilterWithoutValue,
    NumberFilter,
    QueryBuilderOptions,
    StringFilter,
)


def _inputs(table="spans", is_trace_id_mode=None):
    options = QueryBuilderOptions(table=table, meta=BuilderOptionsMeta(is_trace_id_mode=is_trace_id_mode))
    return ReactionInputs(options=options)


def _evaluate(reaction, inputs, latches, dispatch):
    reaction.prepare(inputs, latches)
    reaction.run(inputs, latches, dispatch)


class TestDefaultTraceFilters:
    """Test the canonical filter and ordering lists."""

    def test_filters(self):
        filters = default_trace_filters()

        assert [type(f) for f in filters] == [DateFilterWithoutValue, StringFilter, NumberFilter, StringFilter]
        assert [f.hint for f in filters] == [
            ColumnHint.TIME,
            ColumnHint.TRACE_PARENT_SPAN_ID,
            ColumnHint.TRACE_DURATION_TIME,
            ColumnHint.TRACE_SERVICE_NAME,
        ]
        assert [f.operator for f in filters] == [
            FilterOperator.WITH_IN_GRAFANA_TIME_RANGE,
            FilterOperator.IS_EMPTY,
            FilterOperator.GREATER_THAN,
            FilterOperator.IS_ANYTHING,
        ]
        assert filters[2].type == "UInt64"
        assert filters[2].value == 0
        assert all(f.key == "" and f.filter_type == "custom" for f in filters)

    def test_order_by(self):
        order_by = default_trace_order_by()

        assert [(o.hint, o.dir, o.default) for o in order_by] == [
            (ColumnHint.TIME, OrderByDirection.DESC, True),
            (ColumnHint.TRACE_DURATION_TIME, OrderByDirection.DESC, True),
        ]

    def test_fresh_lists(self):
        assert default_trace_filters() is not default_trace_filters()
        assert default_trace_filters() == default_trace_filters()


class TestDefaultFilters:
    """Test DefaultFilters re-arming on table changes."""

    def test_applies_defaults_to_new_query(self, recorder):
        latches = SessionLatches.seed(QueryBuilderOptions(), is_new_query=True)

        _evaluate(DefaultFilters(), _inputs(), latches, recorder)

        assert recorder.count == 1
        patch = recorder.last_patch
        assert patch.filters == default_trace_filters()
        assert patch.order_by == default_trace_order_by()
        assert latches.applied_default_filters is True
        assert latches.last_table == "spans"

    def test_existing_query_same_table_untouched(self, recorder):
        inputs = _inputs()
        latches = SessionLatches.seed(inputs.options, is_new_query=False)

        _evaluate(DefaultFilters(), inputs, latches, recorder)

        assert recorder.count == 0

    def test_existing_query_table_change_applies(self, recorder):
        latches = SessionLatches.seed(_inputs().options, is_new_query=False)

        _evaluate(DefaultFilters(), _inputs(table="other_spans"), latches, recorder)

        assert recorder.count == 1
        assert latches.last_table == "other_spans"

    def test_empty_table_is_no_op(self, recorder):
        latches = SessionLatches.seed(QueryBuilderOptions(), is_new_query=True)
        _evaluate(DefaultFilters(), _inputs(table=""), latches, recorder)
        assert recorder.count == 0

    def test_trace_id_mode_skips(self, recorder):
        latches = SessionLatches.seed(QueryBuilderOptions(), is_new_query=True)
        _evaluate(DefaultFilters(), _inputs(is_trace_id_mode=True), latches, recorder)
        assert recorder.count == 0
        assert latches.applied_default_filters is False

    def test_switching_back_reapplies(self, recorder):
        reaction = DefaultFilters()
        latches = SessionLatches.seed(QueryBuilderOptions(), is_new_query=True)

        for table in ("a", "b", "a"):
            _evaluate(reaction, _inputs(table=table), latches, recorder)

        assert recorder.count == 3

    def test_same_table_applies_once(self, recorder):
        reaction = DefaultFilters()
        latches = SessionLatches.seed(QueryBuilderOptions(), is_new_query=True)

        _evaluate(reaction, _inputs(), latches, recorder)
        _evaluate(reaction, _inputs(), latches, recorder)

        assert recorder.count == 1

    def test_dependencies(self):
        assert DefaultFilters().dependencies(_inputs(is_trace_id_mode=True)) == ("spans", True)
