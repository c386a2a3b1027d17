"""Query builder option types.

This module contains the configuration object managed by the defaulting
rules (``QueryBuilderOptions``), its parts, and the partial patch type
accepted by the store.
"""

from typing import Annotated, Any, List, Optional, Union

from pydantic import Discriminator, Field, Tag

from tracebuilder.constants import (
    ColumnHint,
    FilterCondition,
    FilterOperator,
    OrderByDirection,
    TimeUnit,
)
from tracebuilder.types.base import BuilderBaseModel


class SelectedColumn(BuilderBaseModel):
    """A physical column selected into the query.
    
    Attributes:
        name: Physical column name.
        hint: Semantic role of the column, if any.
        type: Backing column type. Absent until backfilled from the schema.
        alias: Optional output alias.
    """
    name: str
    hint: Optional[ColumnHint] = None
    type: Optional[str] = None
    alias: Optional[str] = None


class TableColumn(BuilderBaseModel):
    """A column of the active table as reported by the schema catalog."""
    name: str
    type: str = ""


class _FilterBase(BuilderBaseModel):
    type: str
    operator: FilterOperator
    filter_type: str = "custom"
    key: str = ""
    hint: Optional[ColumnHint] = None
    condition: FilterCondition = FilterCondition.AND


class DateFilterWithoutValue(_FilterBase):
    """Date filter whose bounds come from the dashboard time range."""
    type: str = "datetime"


class DateFilter(_FilterBase):
    """Date filter compared against an explicit date or expression."""
    type: str = "datetime"
    value: Union[str, int, float] = ""


class NullFilter(_FilterBase):
    """Filter on a non-date column whose operator takes no value (``IS NULL`` and friends)."""


class StringFilter(_FilterBase):
    type: str = "string"
    value: str = ""


class NumberFilter(_FilterBase):
    type: str = "Int64"
    value: Union[int, float] = 0


class BooleanFilter(_FilterBase):
    type: str = "bool"
    value: bool = False


class MultiFilter(_FilterBase):
    """Filter with a list operand, e.g. ``IN`` and ``NOT IN``."""
    type: str = "string"
    value: List[Union[bool, str, int, float]] = Field(default_factory=list)


_FILTER_TAGS = {
    DateFilterWithoutValue: "datetime",
    DateFilter: "date",
    NullFilter: "null",
    StringFilter: "string",
    NumberFilter: "number",
    BooleanFilter: "boolean",
    MultiFilter: "multi",
}

_TYPE_WRAPPERS = ("nullable(", "lowcardinality(")


def _is_date_type(type_name: str) -> bool:
    name = type_name.strip().lower()
    unwrapped = True
    while unwrapped:
        unwrapped = False
        for wrapper in _TYPE_WRAPPERS:
            if name.startswith(wrapper) and name.endswith(")"):
                name = name[len(wrapper):-1]
                unwrapped = True
    return name.startswith("date")


def _filter_kind(value: Any) -> str:
    """Pick the filter variant: date types by ``type``, everything else by value shape.

    Values are never coerced across kinds, so a filter keeps the exact
    operand it was saved or edited with.
    """
    if isinstance(value, _FilterBase):
        return _FILTER_TAGS[type(value)]

    type_name = str(value.get("type") or "")
    operand = value.get("value")

    if isinstance(operand, (list, tuple)):
        return "multi"
    if isinstance(operand, bool):
        return "boolean"
    if type_name and _is_date_type(type_name):
        return "datetime" if operand is None else "date"
    if operand is None:
        return "null" if type_name else "datetime"
    if isinstance(operand, str):
        return "string"
    return "number"


Filter = Annotated[
    Union[
        Annotated[DateFilterWithoutValue, Tag("datetime")],
        Annotated[DateFilter, Tag("date")],
        Annotated[NullFilter, Tag("null")],
        Annotated[StringFilter, Tag("string")],
        Annotated[NumberFilter, Tag("number")],
        Annotated[BooleanFilter, Tag("boolean")],
        Annotated[MultiFilter, Tag("multi")],
    ],
    Discriminator(_filter_kind),
]


class OrderBy(BuilderBaseModel):
    """Ordering entry.
    
    ``default`` marks entries installed automatically so the consuming layer
    can tell them apart from ordering the user chose.
    """
    name: str = ""
    hint: Optional[ColumnHint] = None
    dir: OrderByDirection = OrderByDirection.ASC
    default: bool = False


class BuilderOptionsMeta(BuilderBaseModel):
    """Auxiliary flags and values carried alongside the query options."""
    otel_enabled: Optional[bool] = None
    otel_version: Optional[str] = None
    trace_duration_unit: Optional[TimeUnit] = None
    flatten_nested: Optional[bool] = None
    trace_events_column_prefix: Optional[str] = None
    trace_links_column_prefix: Optional[str] = None
    use_json_attributes: Optional[bool] = None
    is_trace_id_mode: Optional[bool] = None
    trace_id: Optional[str] = None


class MetaPatch(BuilderOptionsMeta):
    """Partial ``meta`` update. Only explicitly set keys are merged."""


class QueryBuilderOptions(BuilderBaseModel):
    """The complete query configuration owned by the store."""
    database: str = ""
    table: str = ""
    columns: List[SelectedColumn] = Field(default_factory=list)
    filters: List[Filter] = Field(default_factory=list)
    order_by: List[OrderBy] = Field(default_factory=list)
    meta: BuilderOptionsMeta = Field(default_factory=BuilderOptionsMeta)

    def column_with_hint(self, hint: ColumnHint) -> Optional[SelectedColumn]:
        """Return the first selected column tagged with ``hint``."""
        return find_column_by_hint(self.columns, hint)


class BuilderOptionsPatch(BuilderBaseModel):
    """Partial configuration proposed by a defaulting rule or a user edit.
    
    Only fields explicitly set on the patch are applied. ``columns``,
    ``filters`` and ``order_by`` replace the current lists wholesale;
    ``meta`` is merged key by key.
    """
    database: Optional[str] = None
    table: Optional[str] = None
    columns: Optional[List[SelectedColumn]] = None
    filters: Optional[List[Filter]] = None
    order_by: Optional[List[OrderBy]] = None
    meta: Optional[MetaPatch] = None


def find_column_by_hint(columns: List[SelectedColumn], hint: ColumnHint) -> Optional[SelectedColumn]:
    """Return the first column in ``columns`` tagged with ``hint``."""
    return next((c for c in columns if c.hint == hint), None)
