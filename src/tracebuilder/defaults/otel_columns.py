"""OTel column population."""

from tracebuilder.defaults.base import Dispatch, Reaction, ReactionInputs, SessionLatches
from tracebuilder.logging import get_logger
from tracebuilder.protocols import ConventionRegistry
from tracebuilder.store import set_options
from tracebuilder.types.options import MetaPatch, SelectedColumn

logger = get_logger(__name__)


class OtelColumns(Reaction):
    """Sets the OTel trace columns when OTel gets enabled.

    Does not run if OTel was already enabled when the session opened, only
    when it is switched on. Switching it off re-arms the reaction. If the
    version does not resolve, nothing is dispatched and the reaction stays
    armed, so picking a known version later still populates the columns.

    The column list is replaced, not merged: enabling OTel means adopting
    its schema.
    """

    name = "otel_columns"

    def __init__(self, registry: ConventionRegistry):
        self.registry = registry

    def prepare(self, inputs: ReactionInputs, latches: SessionLatches) -> None:
        if not inputs.otel_enabled:
            latches.did_set_otel_columns = False

    def dependencies(self, inputs: ReactionInputs):
        return (inputs.otel_enabled, inputs.otel_version)

    def run(self, inputs: ReactionInputs, latches: SessionLatches, dispatch: Dispatch) -> None:
        if not inputs.otel_enabled or latches.did_set_otel_columns:
            return

        otel_config = self.registry.lookup(inputs.otel_version)
        if otel_config is None or not otel_config.trace_column_map:
            logger.debug(
                f"No OTel column map for version '{inputs.otel_version}', leaving columns unchanged",
                extra={"otel_version": inputs.otel_version},
            )
            return

        columns = [SelectedColumn(name=name, hint=hint) for hint, name in otel_config.trace_column_map.items()]

        dispatch(
            set_options(
                columns=columns,
                meta=MetaPatch(
                    trace_duration_unit=otel_config.trace_duration_unit,
                    flatten_nested=otel_config.flatten_nested,
                    trace_events_column_prefix=otel_config.trace_events_column_prefix,
                    trace_links_column_prefix=otel_config.trace_links_column_prefix,
                ),
            )
        )
        latches.did_set_otel_columns = True
        logger.debug(f"Populated OTel {otel_config.name} trace columns", extra={"otel_version": otel_config.name})
