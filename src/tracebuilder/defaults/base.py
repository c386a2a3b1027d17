"""Shared pieces of the defaulting reactions.

A reaction is a small state machine reacting to a narrow slice of the
builder state. Its "already applied" state lives in ``SessionLatches``,
which the owning session creates and passes in, so reactions themselves
hold no state and one reaction object can serve any session.

Each evaluation has two phases, run back to back by the session:

1. ``prepare`` runs on every pass and may only invalidate latches
   (e.g. clear a latch when its trigger input changed).
2. ``run`` runs only when ``dependencies`` changed since the reaction last
   ran, and may dispatch at most one patch.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, List, Optional, Tuple

from tracebuilder.types.options import QueryBuilderOptions, TableColumn

Dispatch = Callable[[Any], None]


@dataclass
class SessionLatches:
    """Per-session "have I fired" flags of the four defaulting reactions."""

    did_set_defaults: bool = False
    did_set_otel_columns: bool = False
    did_populate_types: bool = False
    applied_default_filters: bool = False
    last_table: str = ""

    @classmethod
    def seed(cls, options: QueryBuilderOptions, is_new_query: bool) -> "SessionLatches":
        """Initial latch state for a session opened on ``options``.

        OTel columns count as already set when OTel is on at open time, and
        default filters count as already applied unless the query is new.
        """
        return cls(
            did_set_otel_columns=bool(options.meta.otel_enabled),
            applied_default_filters=not is_new_query,
            last_table=options.table or "",
        )


@dataclass(frozen=True)
class ReactionInputs:
    """Snapshot of everything a reaction may read."""

    options: QueryBuilderOptions
    schema: List[TableColumn] = field(default_factory=list)
    is_new_query: bool = False

    @property
    def table(self) -> str:
        return self.options.table

    @property
    def otel_enabled(self) -> bool:
        return bool(self.options.meta.otel_enabled)

    @property
    def otel_version(self) -> Optional[str]:
        return self.options.meta.otel_version

    @property
    def use_json_attributes(self) -> bool:
        return bool(self.options.meta.use_json_attributes)

    @property
    def is_trace_id_mode(self) -> bool:
        return bool(self.options.meta.is_trace_id_mode)


class Reaction(ABC):
    """Base class of a defaulting reaction."""

    name: ClassVar[str]

    def prepare(self, inputs: ReactionInputs, latches: SessionLatches) -> None:
        """Invalidate latches from the current inputs. Runs on every pass."""

    @abstractmethod
    def dependencies(self, inputs: ReactionInputs) -> Tuple[Any, ...]:
        """Values whose change makes the reaction re-run."""

    @abstractmethod
    def run(self, inputs: ReactionInputs, latches: SessionLatches, dispatch: Dispatch) -> None:
        """Evaluate the reaction, dispatching at most one patch."""
