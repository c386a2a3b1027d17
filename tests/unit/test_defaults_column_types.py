"""Tests for column type backfill and JSON attribute detection."""

from tracebuilder.constants import ColumnHint
from tracebuilder.defaults import ColumnTypes, ReactionInputs, SessionLatches
from tracebuilder.types.options import (
    BuilderOptionsMeta,
    QueryBuilderOptions,
    SelectedColumn,
    TableColumn,
)


def _inputs(columns, schema, use_json_attributes=None):
    options = QueryBuilderOptions(
        columns=columns,
        meta=BuilderOptionsMeta(use_json_attributes=use_json_attributes),
    )
    return ReactionInputs(options=options, schema=schema)


class TestColumnTypes:
    """Test ColumnTypes backfill rules."""

    def test_backfills_missing_types(self, recorder):
        latches = SessionLatches()
        columns = [
            SelectedColumn(name="Timestamp", hint=ColumnHint.TIME),
            SelectedColumn(name="TraceId", hint=ColumnHint.TRACE_ID, type="FixedString(32)"),
            SelectedColumn(name="Missing"),
        ]
        schema = [
            TableColumn(name="Timestamp", type="DateTime64(9)"),
            TableColumn(name="TraceId", type="String"),
        ]

        ColumnTypes().run(_inputs(columns, schema), latches, recorder)

        assert recorder.count == 1
        patched = recorder.last_patch.columns
        assert [c.type for c in patched] == ["DateTime64(9)", "FixedString(32)", None]
        assert recorder.last_patch.meta is None
        assert latches.did_populate_types is True

    def test_first_schema_match_wins(self, recorder):
        columns = [SelectedColumn(name="ts")]
        schema = [TableColumn(name="ts", type="DateTime"), TableColumn(name="ts", type="String")]

        ColumnTypes().run(_inputs(columns, schema), SessionLatches(), recorder)

        assert recorder.last_patch.columns[0].type == "DateTime"

    def test_nothing_to_do_sets_latch_without_dispatch(self, recorder):
        latches = SessionLatches()
        columns = [SelectedColumn(name="ts", type="DateTime")]

        ColumnTypes().run(_inputs(columns, [TableColumn(name="ts", type="DateTime")]), latches, recorder)

        assert recorder.count == 0
        assert latches.did_populate_types is True

    def test_unmatched_columns_do_not_dispatch(self, recorder):
        latches = SessionLatches()
        columns = [SelectedColumn(name="ts")]

        ColumnTypes().run(_inputs(columns, [TableColumn(name="other", type="String")]), latches, recorder)

        assert recorder.count == 0
        assert latches.did_populate_types is True

    def test_empty_inputs_clear_latch(self, recorder):
        latches = SessionLatches(did_populate_types=True)
        ColumnTypes().run(_inputs([], [TableColumn(name="ts", type="DateTime")]), latches, recorder)
        assert latches.did_populate_types is False

        latches.did_populate_types = True
        ColumnTypes().run(_inputs([SelectedColumn(name="ts")], []), latches, recorder)
        assert latches.did_populate_types is False
        assert recorder.count == 0

    def test_detects_json_tags(self, recorder):
        columns = [
            SelectedColumn(name="SpanAttributes", hint=ColumnHint.TRACE_TAGS),
            SelectedColumn(name="ResourceAttributes", hint=ColumnHint.TRACE_SERVICE_TAGS),
        ]
        schema = [
            TableColumn(name="SpanAttributes", type="JSON"),
            TableColumn(name="ResourceAttributes", type="Map(LowCardinality(String), String)"),
        ]

        ColumnTypes().run(_inputs(columns, schema), SessionLatches(), recorder)

        assert recorder.count == 1
        patch = recorder.last_patch
        assert patch.meta.use_json_attributes is True
        assert patch.meta.model_fields_set == {"use_json_attributes"}
        assert patch.columns[0].type == "JSON"

    def test_detects_json_on_already_typed_column(self, recorder):
        columns = [SelectedColumn(name="attrs", hint=ColumnHint.TRACE_SERVICE_TAGS, type="json(max_dynamic_paths=16)")]

        ColumnTypes().run(_inputs(columns, [TableColumn(name="attrs", type="JSON")]), SessionLatches(), recorder)

        assert recorder.count == 1
        assert recorder.last_patch.columns == columns
        assert recorder.last_patch.meta.use_json_attributes is True

    def test_no_detection_when_already_enabled(self, recorder):
        columns = [SelectedColumn(name="attrs", hint=ColumnHint.TRACE_TAGS, type="JSON")]

        ColumnTypes().run(
            _inputs(columns, [TableColumn(name="attrs", type="JSON")], use_json_attributes=True),
            SessionLatches(),
            recorder,
        )

        assert recorder.count == 0

    def test_map_columns_are_not_json(self, recorder, otel_schema):
        hints = {"SpanAttributes": ColumnHint.TRACE_TAGS, "ResourceAttributes": ColumnHint.TRACE_SERVICE_TAGS}
        columns = [SelectedColumn(name=c.name, hint=hints.get(c.name)) for c in otel_schema]

        ColumnTypes().run(_inputs(columns, otel_schema), SessionLatches(), recorder)

        assert recorder.count == 1
        assert recorder.last_patch.meta is None
        assert all(c.type for c in recorder.last_patch.columns)

    def test_latch_short_circuits_when_all_typed(self, recorder):
        latches = SessionLatches(did_populate_types=True)
        columns = [SelectedColumn(name="attrs", hint=ColumnHint.TRACE_TAGS, type="JSON")]

        ColumnTypes().run(_inputs(columns, [TableColumn(name="attrs", type="JSON")]), latches, recorder)

        assert recorder.count == 0

    def test_latch_ignored_when_types_missing(self, recorder):
        latches = SessionLatches(did_populate_types=True)
        columns = [SelectedColumn(name="ts")]

        ColumnTypes().run(_inputs(columns, [TableColumn(name="ts", type="DateTime")]), latches, recorder)

        assert recorder.count == 1
