"""Semantic column hints.

A hint tags a selected column with the role it plays in a trace query,
independent of the physical column name. Filters and ordering entries
installed by the defaulting rules refer to columns by hint only and leave
resolution to the consuming layer.
"""

from enum import Enum


class ColumnHint(str, Enum):
    """Semantic role of a selected column.

    Values match the hint identifiers stored in saved query JSON.
    """

    TIME = "time"

    TRACE_ID = "trace_id"
    TRACE_SPAN_ID = "trace_span_id"
    TRACE_PARENT_SPAN_ID = "trace_parent_span_id"
    TRACE_SERVICE_NAME = "trace_service_name"
    TRACE_OPERATION_NAME = "trace_operation_name"
    TRACE_DURATION_TIME = "trace_duration_time"
    TRACE_TAGS = "trace_tags"
    TRACE_SERVICE_TAGS = "trace_service_tags"
    TRACE_STATUS_CODE = "trace_status_code"
    TRACE_STATUS_MESSAGE = "trace_status_message"
    TRACE_KIND = "trace_kind"
    TRACE_STATE = "trace_state"
    TRACE_INSTRUMENTATION_LIBRARY_NAME = "trace_instrumentation_library_name"
    TRACE_INSTRUMENTATION_LIBRARY_VERSION = "trace_instrumentation_library_version"
    TRACE_EVENTS_PREFIX = "trace_events_prefix"
    TRACE_LINKS_PREFIX = "trace_links_prefix"
