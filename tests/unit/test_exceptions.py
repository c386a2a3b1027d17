"""Tests for BuilderError and its helper constructors."""

import logging

from tracebuilder.common.exceptions import (
    BuilderError,
    ErrorCode,
    configuration_error,
    invalid_action_error,
    update_loop_error,
)


class TestBuilderError:
    """Test BuilderError formatting and serialization."""

    def test_defaults(self):
        error = BuilderError("something failed")

        assert error.error_code == ErrorCode.EXECUTION_ERROR
        assert error.details == {}
        assert str(error) == "[EXECUTION_001] something failed"

    def test_str_includes_cause(self):
        error = BuilderError("bad", cause=ValueError("nope"))
        assert str(error) == "[EXECUTION_001] bad (caused by: ValueError: nope)"

    def test_to_dict(self):
        error = BuilderError("bad", ErrorCode.INVALID_ACTION, {"action_type": "dict"})

        assert error.to_dict() == {
            "type": "BuilderError",
            "message": "bad",
            "error_code": "VALIDATION_005",
            "error_name": "INVALID_ACTION",
            "details": {"action_type": "dict"},
        }

    def test_logs_on_creation(self, caplog):
        with caplog.at_level(logging.ERROR, logger="tracebuilder.common.exceptions"):
            BuilderError("logged", ErrorCode.UPDATE_LOOP, {"passes": 2})

        record = caplog.records[-1]
        assert record.getMessage() == "logged"
        assert record.error_code == "EXECUTION_006"
        assert record.details == {"passes": 2}


class TestHelpers:
    """Test the helper constructors."""

    def test_configuration_error(self):
        error = configuration_error("Invalid value", config_key="traces.default_table")

        assert error.error_code == ErrorCode.CONFIG_INVALID
        assert error.details == {"config_key": "traces.default_table"}

    def test_invalid_action_error(self):
        error = invalid_action_error({"type": "unknown"})

        assert error.error_code == ErrorCode.INVALID_ACTION
        assert error.details["action_type"] == "dict"
        assert "dict" in error.message

    def test_update_loop_error(self):
        error = update_loop_error(4, ["otel_columns", "column_types"])

        assert error.error_code == ErrorCode.UPDATE_LOOP
        assert error.details == {"passes": 4, "reactions": ["otel_columns", "column_types"]}

    def test_update_loop_error_without_reactions(self):
        assert "reactions" not in update_loop_error(1).details
