"""Builder options store actions.

Actions are the only way to change the configuration held by
``BuilderOptionsStore``. ``set_options`` and ``set_all_options`` build them
from keyword arguments.
"""

from typing import Any, Optional

from tracebuilder.types.base import BuilderBaseModel
from tracebuilder.types.options import BuilderOptionsPatch, QueryBuilderOptions


class SetOptions(BuilderBaseModel):
    """Apply a partial configuration patch."""
    patch: BuilderOptionsPatch


class SetAllOptions(BuilderBaseModel):
    """Replace the whole configuration, e.g. when loading a saved query."""
    options: QueryBuilderOptions


def set_options(patch: Optional[BuilderOptionsPatch] = None, **fields: Any) -> SetOptions:
    """Build a ``SetOptions`` action.
    
    Args:
        patch: Ready-made patch. Mutually exclusive with ``fields``.
        **fields: Patch fields (``database``, ``table``, ``columns``,
            ``filters``, ``order_by``, ``meta``). ``meta`` may be a dict
            or a ``MetaPatch``.
    
    Returns:
        SetOptions action
    
    Example:
        >>> store.dispatch(set_options(table="spans", meta={"otel_enabled": True}))
    """
    if patch is not None and fields:
        raise ValueError("Pass either a patch or patch fields, not both")
    if patch is None:
        patch = BuilderOptionsPatch(**fields)
    return SetOptions(patch=patch)


def set_all_options(options: QueryBuilderOptions) -> SetAllOptions:
    """Build a ``SetAllOptions`` action."""
    return SetAllOptions(options=options)
