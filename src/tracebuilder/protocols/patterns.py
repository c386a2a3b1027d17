"""Common pattern protocol definitions.

This module defines protocols for common design patterns that can be
implemented across various components in tracebuilder.
"""

from typing import Protocol, Any, Callable, runtime_checkable


@runtime_checkable
class Observable(Protocol):
    """Protocol for objects that support the observer pattern.
    
    This protocol defines the interface for components that can
    notify observers about state changes.
    """
    
    def attach(self, observer: Callable[[Any], None]) -> None:
        """Attach an observer to be notified of changes.
        
        Args:
            observer: Callable that will be invoked on changes
        """
        ...
    
    def detach(self, observer: Callable[[Any], None]) -> None:
        """Remove an observer.
        
        Args:
            observer: The observer to remove
        """
        ...
    
    def notify(self, event: Any) -> None:
        """Notify all observers of an event.
        
        Args:
            event: The event data to pass to observers
        """
        ...
