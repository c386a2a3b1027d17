"""Configuration store for tracebuilder.

The store owns the ``QueryBuilderOptions`` object. Defaulting rules and
user edits never modify it directly; they dispatch actions and the store
applies them through a pure reducer with an explicit per-field merge policy.
"""

from tracebuilder.store.actions import SetAllOptions, SetOptions, set_all_options, set_options
from tracebuilder.store.builder_options import BuilderOptionsStore
from tracebuilder.store.reducer import builder_options_reducer

__all__ = [
    "BuilderOptionsStore",
    "builder_options_reducer",
    "SetOptions",
    "SetAllOptions",
    "set_options",
    "set_all_options",
]
