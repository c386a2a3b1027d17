"""Type definitions for tracebuilder.

This module provides the base model and the query option types shared by
the store, the defaulting rules and the session.
"""

from .base import BuilderBaseModel
from .options import (
    BuilderOptionsMeta,
    BuilderOptionsPatch,
    BooleanFilter,
    DateFilter,
    DateFilterWithoutValue,
    Filter,
    MetaPatch,
    MultiFilter,
    NullFilter,
    NumberFilter,
    OrderBy,
    QueryBuilderOptions,
    SelectedColumn,
    StringFilter,
    TableColumn,
    find_column_by_hint,
)

__all__ = [
    # Base model
    'BuilderBaseModel',
    # Options
    'BuilderOptionsMeta',
    'BuilderOptionsPatch',
    'BooleanFilter',
    'DateFilter',
    'DateFilterWithoutValue',
    'Filter',
    'MetaPatch',
    'MultiFilter',
    'NullFilter',
    'NumberFilter',
    'OrderBy',
    'QueryBuilderOptions',
    'SelectedColumn',
    'StringFilter',
    'TableColumn',
    'find_column_by_hint',
]
