"""Single-writer store for the query builder configuration."""

from typing import Any, Callable, List, Optional

from tracebuilder.logging import get_logger
from tracebuilder.store.reducer import builder_options_reducer
from tracebuilder.types.options import QueryBuilderOptions

logger = get_logger(__name__)

Observer = Callable[[QueryBuilderOptions], None]


class BuilderOptionsStore:
    """Holds the current ``QueryBuilderOptions`` and applies actions to it.
    
    ``dispatch`` is the only writer. Each dispatch is committed synchronously
    and atomically; observers are notified after the commit and only when the
    configuration actually changed.
    
    Implements the ``Observable`` protocol.
    
    Example:
        >>> store = BuilderOptionsStore()
        >>> unsubscribe = store.subscribe(lambda options: print(options.table))
        >>> store.dispatch(set_options(table="otel_traces"))
        otel_traces
    """
    
    def __init__(
        self,
        options: Optional[QueryBuilderOptions] = None,
        reducer: Callable[[QueryBuilderOptions, Any], QueryBuilderOptions] = builder_options_reducer,
    ):
        self._state = options if options is not None else QueryBuilderOptions()
        self._reducer = reducer
        self._observers: List[Observer] = []
        self.revision = 0

    @property
    def state(self) -> QueryBuilderOptions:
        """The committed configuration."""
        return self._state

    def dispatch(self, action: Any) -> bool:
        """Apply ``action`` and notify observers.
        
        Args:
            action: Store action (see ``tracebuilder.store.actions``)
        
        Returns:
            True if the configuration changed, False otherwise
        """
        next_state = self._reducer(self._state, action)
        if next_state == self._state:
            return False

        self._state = next_state
        self.revision += 1
        logger.debug(
            f"Committed {type(action).__name__} as revision {self.revision}",
            extra={"revision": self.revision},
        )
        self.notify(next_state)
        return True

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: QueryBuilderOptions) -> None:
        for observer in list(self._observers):
            observer(event)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Attach ``observer`` and return a callable that detaches it."""
        self.attach(observer)
        return lambda: self.detach(observer)
