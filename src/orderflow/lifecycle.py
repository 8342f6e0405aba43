"""
Order lifecycle state machine.

An order moves through four states::

    NEW -> PROCESSING -> SHIPPED -> DELIVERED

The machine keeps a pointer to the state the *next* advance will announce.
Each advance announces that state and moves the pointer on, so one call both
narrates a state and transitions past it:

====  ===========  ============
call  announces    pointer after
====  ===========  ============
1     New          Processing
2     Processing   Shipped
3     Shipped      Delivered
4     Delivered    Delivered
====  ===========  ============

An order's visible status is the state most recently announced (New before
any advance). A fresh order is therefore Shipped after three advances and
Delivered after the fourth. DELIVERED is terminal: further advances announce
it again and change nothing.

Example:
    >>> from orderflow.lifecycle import OrderStatus, advance
    >>> step = advance(OrderStatus.NEW)
    >>> step.announced, step.next_state
    (<OrderStatus.NEW: 'new'>, <OrderStatus.PROCESSING: 'processing'>)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    """
    Fulfillment state of an order.

    Attributes:
        NEW: Order created, items may be added
        PROCESSING: Order accepted and being prepared
        SHIPPED: Order ready to be handed to the carrier
        DELIVERED: Order received by the customer (terminal)
    """

    NEW = "new"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"

    @property
    def label(self) -> str:
        """Display name of the state ("New", "Processing", ...)."""
        return self.value.capitalize()

    @property
    def is_terminal(self) -> bool:
        return self is OrderStatus.DELIVERED

    @property
    def next(self) -> OrderStatus:
        """The state that follows this one (DELIVERED follows itself)."""
        return _NEXT_STATE[self]


_NEXT_STATE: dict[OrderStatus, OrderStatus] = {
    OrderStatus.NEW: OrderStatus.PROCESSING,
    OrderStatus.PROCESSING: OrderStatus.SHIPPED,
    OrderStatus.SHIPPED: OrderStatus.DELIVERED,
    OrderStatus.DELIVERED: OrderStatus.DELIVERED,
}


@dataclass(frozen=True)
class Transition:
    """
    Result of a single lifecycle advance.

    Attributes:
        announced: The state announced by this advance; the order's visible
                   status afterwards
        next_state: Where the machine's pointer moved; the state the
                    following advance will announce
    """

    announced: OrderStatus
    next_state: OrderStatus

    @property
    def changed(self) -> bool:
        """False only for the idempotent DELIVERED -> DELIVERED step."""
        return self.announced is not self.next_state


def advance(machine_state: OrderStatus) -> Transition:
    """
    Compute one advance from the machine's current pointer.

    Never fails; advancing from DELIVERED yields DELIVERED.

    Args:
        machine_state: The state the machine points at

    Returns:
        Transition announcing ``machine_state`` and naming its successor
    """
    transition = Transition(announced=machine_state, next_state=machine_state.next)
    logger.debug(
        "Lifecycle advance announces %s, next %s",
        transition.announced.label,
        transition.next_state.label,
    )
    return transition


__all__ = [
    "OrderStatus",
    "Transition",
    "advance",
]
