"""
Handler adapter for normalizing event handlers.

The event bus accepts either plain callables or objects with a ``handle``
method. HandlerAdapter wraps both behind a single ``handle(event)`` call so
the bus never has to inspect handler types while dispatching.
"""

from collections.abc import Callable
from typing import Any

from orderflow.events.base import DomainEvent


def get_handler_name(handler: Any) -> str:
    """
    Get a descriptive name for a handler for logging and debugging.

    Args:
        handler: Any handler object (class instance, function, lambda)

    Returns:
        String name for the handler
    """
    if hasattr(handler, "__class__") and handler.__class__.__name__ not in (
        "function",
        "method",
        "builtin_function_or_method",
    ):
        return str(handler.__class__.__name__)
    elif hasattr(handler, "__qualname__"):
        return str(handler.__qualname__)
    elif hasattr(handler, "__name__"):
        return str(handler.__name__)
    else:
        return repr(handler)


class HandlerAdapter:
    """
    Adapter that gives every handler the same ``handle(event)`` interface.

    Accepts:
    - Objects with a ``handle(event)`` method
    - Plain callables taking the event

    Two adapters compare equal when they wrap the same original handler,
    which lets the bus unsubscribe by passing the original handler again.

    Attributes:
        original: The original unwrapped handler
        name: Descriptive name for logging
    """

    def __init__(self, handler: Any) -> None:
        """
        Initialize the adapter with a handler.

        Raises:
            TypeError: If handler doesn't have handle() method and isn't callable
        """
        self._original = handler
        self._name = get_handler_name(handler)

        handle_method = getattr(handler, "handle", None)
        if callable(handle_method):
            self._handle: Callable[[DomainEvent], Any] = handle_method
        elif callable(handler):
            self._handle = handler
        else:
            raise TypeError(
                f"Handler {self._name} must be callable or have a handle() method"
            )

    @property
    def original(self) -> Any:
        return self._original

    @property
    def name(self) -> str:
        return self._name

    def handle(self, event: DomainEvent) -> None:
        self._handle(event)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandlerAdapter):
            return NotImplemented
        return self._original is other._original or self._original == other._original

    def __repr__(self) -> str:
        return f"HandlerAdapter({self._name})"
