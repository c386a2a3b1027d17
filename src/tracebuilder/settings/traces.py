"""Trace defaults configuration.

Per-datasource defaults used when a new trace query is created. When
``otel_enabled`` is set, the OpenTelemetry convention for ``otel_version``
takes precedence over the explicit column, unit and prefix values here.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from tracebuilder.constants import ColumnHint, TimeUnit
from tracebuilder.otel.versions import LATEST


class TraceSettings(BaseModel):
    """Trace query defaults."""

    default_database: str = Field(
        default="",
        description="Database for new trace queries. Falls back to the datasource default database when empty."
    )
    default_table: str = Field(
        default="",
        description="Table for new trace queries. Falls back to the datasource default table when empty."
    )

    otel_enabled: bool = Field(
        default=False,
        description="Use OpenTelemetry column conventions for new trace queries"
    )
    otel_version: Optional[str] = Field(
        default=None,
        description="OpenTelemetry convention version (e.g. '1.2.9' or 'latest'). Defaults to 'latest' when OTel is enabled."
    )

    duration_unit: TimeUnit = Field(
        default=TimeUnit.SECONDS,
        description="Unit of the span duration column"
    )
    flatten_nested: bool = Field(
        default=False,
        description="Whether nested event/link columns are stored flattened"
    )
    events_column_prefix: str = Field(
        default="Events",
        description="Column prefix of span events"
    )
    links_column_prefix: str = Field(
        default="Links",
        description="Column prefix of span links"
    )

    columns: Dict[ColumnHint, str] = Field(
        default_factory=dict,
        description="Explicit hint to column name mapping, used when OTel is disabled. "
                    "Declaration order is the column order of new queries."
    )

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: Dict[ColumnHint, str]) -> Dict[ColumnHint, str]:
        """Reject blank column names."""
        for hint, name in v.items():
            if not name or not name.strip():
                raise ValueError(f"Column name for hint '{ColumnHint(hint).value}' cannot be empty")
        return {hint: name.strip() for hint, name in v.items()}

    @model_validator(mode="after")
    def default_otel_version(self) -> "TraceSettings":
        """Use the latest convention when OTel is enabled without a version."""
        if self.otel_enabled and not self.otel_version:
            self.otel_version = LATEST
        return self
