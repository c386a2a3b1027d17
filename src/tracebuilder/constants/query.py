"""Query option constants.

Filter operators, ordering directions and time units understood by the
consuming query layer. As Layer 0 constants, nothing here imports from the
rest of the package.
"""

from enum import Enum


class FilterOperator(str, Enum):
    """Filter operator enumeration.

    Values are the operator tokens stored in saved query JSON.
    """

    IS_ANYTHING = "IS ANYTHING"
    IS_EMPTY = "IS EMPTY"
    IS_NOT_EMPTY = "IS NOT EMPTY"
    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"
    EQUALS = "="
    NOT_EQUALS = "!="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    IN = "IN"
    NOT_IN = "NOT IN"
    WITH_IN_GRAFANA_TIME_RANGE = "WITH IN DASHBOARD TIME RANGE"
    OUTSIDE_GRAFANA_TIME_RANGE = "OUTSIDE DASHBOARD TIME RANGE"


class OrderByDirection(str, Enum):
    """Ordering direction."""

    ASC = "ASC"
    DESC = "DESC"


class FilterCondition(str, Enum):
    """How a filter combines with the filters before it."""

    AND = "AND"
    OR = "OR"


class TimeUnit(str, Enum):
    """Unit of a span duration column.

    Used by the consuming layer to convert durations to milliseconds.
    """

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"
