"""
Base classes for event-recording aggregates.

Aggregates are the consistency boundaries of the domain. They change state
only by applying events, and they keep every event they record until the
caller collects it for publishing.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic
from uuid import UUID

from orderflow.events.base import DomainEvent
from orderflow.exceptions import EventVersionError, UnhandledEventError
from orderflow.types import TState

logger = logging.getLogger(__name__)


class AggregateRoot(Generic[TState], ABC):
    """
    Base class for aggregate roots.

    The generic parameter ``TState`` is the pydantic model holding the
    aggregate's state. State is None until the first event has been applied.

    Subclasses implement ``_apply(event)`` and record new events through
    ``_raise_event``. Every recorded event must carry the version returned by
    ``get_next_version()``.

    Attributes:
        aggregate_id: Unique identifier for this aggregate instance
        aggregate_type: Name of the aggregate type (subclasses override)
        version: Number of events applied so far
    """

    aggregate_type: str = "Unknown"

    # Populated per subclass by DeclarativeAggregate
    _event_handlers: dict[type[DomainEvent], str] = {}

    def __init__(self, aggregate_id: UUID) -> None:
        self._aggregate_id = aggregate_id
        self._version = 0
        self._uncommitted_events: list[DomainEvent] = []
        self._state: TState | None = None

    @property
    def aggregate_id(self) -> UUID:
        return self._aggregate_id

    @property
    def version(self) -> int:
        return self._version

    @property
    def state(self) -> TState | None:
        return self._state

    @property
    def uncommitted_events(self) -> list[DomainEvent]:
        """Events recorded but not yet collected, as a copy."""
        return self._uncommitted_events.copy()

    @property
    def has_uncommitted_events(self) -> bool:
        return bool(self._uncommitted_events)

    def apply_event(self, event: DomainEvent, is_new: bool = True) -> None:
        """
        Apply an event to the aggregate.

        A new event must be numbered exactly one past the current version and
        is kept for publishing. Replayed events (``is_new=False``) are applied
        as they come and are not kept.

        Raises:
            EventVersionError: If a new event's version is not current + 1
        """
        if is_new and event.aggregate_version != self._version + 1:
            raise EventVersionError(
                expected_version=self._version + 1,
                actual_version=event.aggregate_version,
                event_id=event.event_id,
                aggregate_id=self._aggregate_id,
            )

        self._apply(event)
        self._version = event.aggregate_version

        if is_new:
            self._uncommitted_events.append(event)
        logger.debug(
            "Applied %s to %s %s (version %d)",
            event.event_type,
            self.aggregate_type,
            self._aggregate_id,
            self._version,
            extra={"aggregate_id": str(self._aggregate_id), "replayed": not is_new},
        )

    @abstractmethod
    def _apply(self, event: DomainEvent) -> None:
        """Update state from one event."""

    def load_from_history(self, events: list[DomainEvent]) -> None:
        """Replay previously recorded events without recording them again."""
        for event in events:
            self.apply_event(event, is_new=False)

    def get_next_version(self) -> int:
        return self._version + 1

    def clear_uncommitted_events(self) -> list[DomainEvent]:
        """
        Clear and return all uncommitted events, oldest first.

        Used by the workflow to hand recorded events to the event bus.
        """
        events = self._uncommitted_events
        self._uncommitted_events = []
        return events

    def _raise_event(self, event: DomainEvent) -> None:
        self.apply_event(event, is_new=True)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"id={self._aggregate_id}, "
            f"version={self._version}, "
            f"uncommitted={len(self._uncommitted_events)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateRoot):
            return NotImplemented
        return self._aggregate_id == other._aggregate_id

    def __hash__(self) -> int:
        return hash(self._aggregate_id)


class DeclarativeAggregate(AggregateRoot[TState], ABC):
    """
    Aggregate whose event handlers are registered with ``@handles``.

    Every event an aggregate applies must have a handler; an event without
    one raises ``UnhandledEventError`` instead of being dropped.

    Example:
        >>> class Order(DeclarativeAggregate[OrderState]):
        ...     aggregate_type = "Order"
        ...
        ...     @handles(OrderCreated)
        ...     def _on_created(self, event: OrderCreated) -> None:
        ...         self._state = OrderState(order_id=self.aggregate_id, ...)
    """

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._event_handlers = {}
        for name in dir(cls):
            event_type = getattr(getattr(cls, name, None), "_handles_event_type", None)
            if event_type is not None:
                cls._event_handlers[event_type] = name

    def _apply(self, event: DomainEvent) -> None:
        handler_name = self._event_handlers.get(type(event))
        if handler_name is None:
            raise UnhandledEventError(
                event_type=type(event).__name__,
                event_id=event.event_id,
                handler_class=self.__class__.__name__,
                available_handlers=[et.__name__ for et in self._event_handlers],
            )
        getattr(self, handler_name)(event)


__all__ = [
    "AggregateRoot",
    "DeclarativeAggregate",
    "TState",
]
