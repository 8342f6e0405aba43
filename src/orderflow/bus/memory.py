"""In-memory event bus implementation.

Distributes domain events to handlers registered in the same process.
Dispatch is synchronous and happens in the publishing thread.
"""

import logging
import threading
from collections import defaultdict, deque

from orderflow.bus.interface import EventBus, EventHandler, EventHandlerFunc
from orderflow.events.base import DomainEvent
from orderflow.handlers.adapter import HandlerAdapter

logger = logging.getLogger(__name__)


class InMemoryEventBus(EventBus):
    """
    Synchronous in-process event bus.

    Subscriptions match event subclasses, so subscribing to ``OrderEvent``
    receives every order event. Wildcard handlers receive everything. A
    failing handler is logged and counted; the remaining handlers still run.

    The bus also keeps the events it has published, for tests and for
    replaying to a viewer that attaches late.

    Args:
        max_recorded: Keep at most this many published events, dropping the
                      oldest first. None keeps every event, which suits tests
                      but grows without bound in a long-running shell.

    Example:
        >>> bus = InMemoryEventBus(max_recorded=500)
        >>> bus.subscribe(OrderStateAnnounced, lambda e: print(e.describe()))
        >>> bus.publish(order.clear_uncommitted_events())
    """

    def __init__(self, max_recorded: int | None = None) -> None:
        if max_recorded is not None and max_recorded < 0:
            raise ValueError(f"max_recorded must be >= 0, got {max_recorded}")
        self._subscribers: dict[type[DomainEvent], list[HandlerAdapter]] = defaultdict(list)
        self._all_event_handlers: list[HandlerAdapter] = []
        self._lock = threading.RLock()
        self._published_events: deque[DomainEvent] = deque(maxlen=max_recorded)
        self._stats = {
            "events_published": 0,
            "handlers_invoked": 0,
            "handler_errors": 0,
        }

    def publish(self, events: list[DomainEvent]) -> None:
        """
        Deliver ``events`` one at a time, in order.

        Every handler sees an event before the next event is dispatched.
        """
        for event in events:
            self._dispatch_event(event)
            with self._lock:
                self._published_events.append(event)
                self._stats["events_published"] += 1

    def _dispatch_event(self, event: DomainEvent) -> None:
        event_name = type(event).__name__

        # Snapshot under the lock so handlers may subscribe while dispatching
        with self._lock:
            handlers = [
                adapter
                for subscribed_type, adapters in self._subscribers.items()
                if isinstance(event, subscribed_type)
                for adapter in adapters
            ]
            handlers.extend(self._all_event_handlers)

        logger.debug(
            "Dispatching %s to %d handler(s)",
            event_name,
            len(handlers),
            extra={
                "event_type": event_name,
                "event_id": str(event.event_id),
                "aggregate_id": str(event.aggregate_id),
            },
        )
        for adapter in handlers:
            self._safe_handle(adapter, event)

    def _safe_handle(self, adapter: HandlerAdapter, event: DomainEvent) -> None:
        try:
            adapter.handle(event)
        except Exception as e:
            with self._lock:
                self._stats["handler_errors"] += 1
            logger.error(
                "Handler %s failed processing %s: %s",
                adapter.name,
                type(event).__name__,
                e,
                exc_info=True,
                extra={
                    "handler": adapter.name,
                    "event_type": type(event).__name__,
                    "event_id": str(event.event_id),
                },
            )
        else:
            with self._lock:
                self._stats["handlers_invoked"] += 1

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler | EventHandlerFunc,
    ) -> None:
        adapter = HandlerAdapter(handler)
        with self._lock:
            self._subscribers[event_type].append(adapter)
        logger.info(
            "Registered handler %s for %s",
            adapter.name,
            event_type.__name__,
            extra={"handler": adapter.name, "event_type": event_type.__name__},
        )

    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler | EventHandlerFunc,
    ) -> bool:
        target = HandlerAdapter(handler)
        with self._lock:
            adapters = self._subscribers.get(event_type, [])
            if target not in adapters:
                return False
            adapters.remove(target)
        logger.info(
            "Unsubscribed handler %s from %s",
            target.name,
            event_type.__name__,
            extra={"handler": target.name, "event_type": event_type.__name__},
        )
        return True

    def subscribe_to_all_events(self, handler: EventHandler | EventHandlerFunc) -> None:
        adapter = HandlerAdapter(handler)
        with self._lock:
            self._all_event_handlers.append(adapter)
        logger.info("Registered wildcard handler %s", adapter.name, extra={"handler": adapter.name})

    def unsubscribe_from_all_events(self, handler: EventHandler | EventHandlerFunc) -> bool:
        target = HandlerAdapter(handler)
        with self._lock:
            if target not in self._all_event_handlers:
                return False
            self._all_event_handlers.remove(target)
        logger.info(
            "Unsubscribed wildcard handler %s", target.name, extra={"handler": target.name}
        )
        return True

    @property
    def published_events(self) -> list[DomainEvent]:
        """Recorded events, oldest first, as a copy."""
        with self._lock:
            return list(self._published_events)

    def clear_published_events(self) -> None:
        with self._lock:
            self._published_events.clear()

    def get_stats(self) -> dict[str, int]:
        """Return a copy of the publish and handler counters."""
        with self._lock:
            return dict(self._stats)
