"""Event bus interface definitions.

The event bus decouples the order workflow from whoever displays its
progress. The workflow publishes every event an order records; the shell
(or a test) subscribes to the event types it cares about.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from orderflow.events.base import DomainEvent

# Type alias for simple function-based handlers
EventHandlerFunc = Callable[[DomainEvent], Any]


@runtime_checkable
class EventHandler(Protocol):
    """
    Protocol for objects that handle events.

    Example:
        >>> class ConsolePrinter:
        ...     def handle(self, event: DomainEvent) -> None:
        ...         print(event.describe())
    """

    def handle(self, event: DomainEvent) -> None: ...


class EventBus(ABC):
    """
    Abstract event bus for publishing and subscribing to domain events.

    Publishing is synchronous: ``publish`` returns after every handler has
    seen every event, in the order the events were given.

    Example:
        >>> event_bus = InMemoryEventBus()
        >>> event_bus.subscribe(PaymentFailed, show_error)
        >>> event_bus.subscribe_to_all_events(audit_log)
        >>> event_bus.publish(order.clear_uncommitted_events())
    """

    @abstractmethod
    def publish(self, events: list[DomainEvent]) -> None:
        """
        Publish events to all registered subscribers.

        Events are processed in order, and all handlers for each event
        are invoked before moving to the next event.

        Note:
            Handler errors are caught and logged but don't prevent other
            handlers from executing.
        """
        pass

    @abstractmethod
    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler | EventHandlerFunc,
    ) -> None:
        """
        Subscribe a handler to a specific event type.

        The handler also receives subclasses of ``event_type``; subscribing
        to ``OrderEvent`` receives every order event.
        """
        pass

    @abstractmethod
    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler | EventHandlerFunc,
    ) -> bool:
        """
        Unsubscribe a handler from a specific event type.

        Returns:
            True if the handler was found and removed, False otherwise
        """
        pass

    @abstractmethod
    def subscribe_to_all_events(self, handler: EventHandler | EventHandlerFunc) -> None:
        """Subscribe a handler to every event type (wildcard subscription)."""
        pass

    @abstractmethod
    def unsubscribe_from_all_events(self, handler: EventHandler | EventHandlerFunc) -> bool:
        """
        Remove a wildcard subscription.

        Returns:
            True if the handler was found and removed, False otherwise
        """
        pass
