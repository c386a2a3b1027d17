"""Constants module for tracebuilder.

This module contains all constant values and enumerations used throughout
the package. As Layer 0 in the architecture, this module has no
dependencies on other tracebuilder modules.

Organization:
    - hints: Semantic column hints
    - query: Filter operators, ordering directions and time units
"""

from tracebuilder.constants.hints import ColumnHint
from tracebuilder.constants.query import (
    FilterCondition,
    FilterOperator,
    OrderByDirection,
    TimeUnit,
)

__all__ = [
    "ColumnHint",
    "FilterCondition",
    "FilterOperator",
    "OrderByDirection",
    "TimeUnit",
]
