"""
Handler infrastructure.

- handles: Decorator marking aggregate methods that apply an event type
- HandlerAdapter: Normalizes callables and handle() objects for the event bus
"""

from orderflow.handlers.adapter import HandlerAdapter, get_handler_name
from orderflow.handlers.decorators import (
    get_handled_event_type,
    handles,
    is_event_handler,
)

__all__ = [
    "HandlerAdapter",
    "get_handled_event_type",
    "get_handler_name",
    "handles",
    "is_event_handler",
]
