"""Pure reducer for builder options.

Merge policy for ``SetOptions``:
    - ``database`` and ``table`` are replaced when present in the patch.
    - ``columns``, ``filters`` and ``order_by`` are replaced wholesale.
    - ``meta`` is merged key by key; only keys set on the patch change.
    - Fields explicitly set to ``None`` are ignored.
"""

from typing import Any, Dict

from tracebuilder.common.exceptions import invalid_action_error
from tracebuilder.store.actions import SetAllOptions, SetOptions
from tracebuilder.types.options import BuilderOptionsMeta, MetaPatch, QueryBuilderOptions

_LIST_FIELDS = ("columns", "filters", "order_by")


def _merge_meta(meta: BuilderOptionsMeta, patch: MetaPatch) -> BuilderOptionsMeta:
    updates = {key: getattr(patch, key) for key in patch.model_fields_set}
    return meta.model_copy(update=updates)


def builder_options_reducer(state: QueryBuilderOptions, action: Any) -> QueryBuilderOptions:
    """Return the configuration that results from applying ``action`` to ``state``.
    
    ``state`` is never mutated.
    
    Args:
        state: Current configuration
        action: ``SetOptions`` or ``SetAllOptions``
    
    Returns:
        New configuration
    
    Raises:
        BuilderError: If the action type is not supported
    """
    if isinstance(action, SetAllOptions):
        return action.options.model_copy(deep=True)

    if not isinstance(action, SetOptions):
        raise invalid_action_error(action)

    patch = action.patch
    updates: Dict[str, Any] = {}
    for field in patch.model_fields_set:
        value = getattr(patch, field)
        if value is None:
            continue
        if field == "meta":
            updates["meta"] = _merge_meta(state.meta, value)
        elif field in _LIST_FIELDS:
            updates[field] = list(value)
        else:
            updates[field] = value

    return state.model_copy(update=updates)
