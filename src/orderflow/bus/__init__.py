"""Event bus for delivering order events to their viewers."""

from orderflow.bus.interface import (
    EventBus,
    EventHandler,
    EventHandlerFunc,
)
from orderflow.bus.memory import InMemoryEventBus

__all__ = [
    "EventBus",
    "EventHandler",
    "EventHandlerFunc",
    "InMemoryEventBus",
]
