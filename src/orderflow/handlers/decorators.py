"""
Event handler decorators.

This module contains the @handles decorator used by DeclarativeAggregate to
route recorded events to the methods that apply them.

Example:
    >>> from orderflow.handlers import handles
    >>>
    >>> class Order(DeclarativeAggregate[OrderState]):
    ...     @handles(OrderCreated)
    ...     def _on_created(self, event: OrderCreated) -> None:
    ...         ...
"""

from collections.abc import Callable
from typing import Any, TypeVar

from orderflow.events.base import DomainEvent

# Type variable for handler functions - preserves the exact type of the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handles(event_type: type[DomainEvent]) -> Callable[[F], F]:
    """
    Mark a method as the handler for a specific event type.

    The event type is attached to the function and discovered when the
    aggregate class is created.

    Args:
        event_type: The DomainEvent subclass this handler applies

    Returns:
        A decorator that marks and returns the original function
    """

    def decorator(func: F) -> F:
        func._handles_event_type = event_type  # type: ignore[attr-defined]
        return func

    return decorator


def get_handled_event_type(func: Callable[..., Any]) -> type[DomainEvent] | None:
    """
    Get the event type handled by a decorated function.

    Returns:
        The event type if decorated with @handles, None otherwise
    """
    return getattr(func, "_handles_event_type", None)


def is_event_handler(func: Callable[..., Any]) -> bool:
    """Check whether a function is decorated with @handles."""
    return get_handled_event_type(func) is not None
