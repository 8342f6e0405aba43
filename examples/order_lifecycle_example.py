"""
Order Lifecycle Example

Plays the part of the interactive shell: picks products from the catalog,
opens an order, and checks it out while printing every event it receives.

Three runs are shown:
- a successful checkout with forced-success policies
- a declined payment (nothing is shipped)
- a seeded run with the real 1-in-20 failure rates

Run with: python examples/order_lifecycle_example.py
"""

import logging

from orderflow import (
    AlwaysFail,
    AlwaysSucceed,
    Customer,
    DomainEvent,
    InMemoryEventBus,
    OrderFlowConfig,
    OrderFlowError,
    OrderWorkflow,
    PaymentFailure,
    default_catalog,
)

# Configure logging to see workflow decisions next to the shell output
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Shell side: a display handler
# =============================================================================


class ConsoleDisplay:
    """Prints the text of every event, as the shell would."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def handle(self, event: DomainEvent) -> None:
        text = event.describe()
        self.lines.append(text)
        print(f"   > {text}")


def build_bus() -> tuple[InMemoryEventBus, ConsoleDisplay]:
    bus = InMemoryEventBus(max_recorded=100)
    display = ConsoleDisplay()
    bus.subscribe_to_all_events(display)
    return bus, display


# =============================================================================
# Runs
# =============================================================================


def successful_checkout() -> None:
    print("\n1. Successful checkout")
    bus, _ = build_bus()
    workflow = OrderWorkflow(bus, payment_policy=AlwaysSucceed(), shipment_policy=AlwaysSucceed())
    catalog = default_catalog()

    order = workflow.open_order(Customer(name="Ada Lovelace", email="ada@example.com"))
    workflow.add_item(order, catalog.get("computer_set"))
    workflow.checkout(order, "credit_card")

    print()
    for line in order.describe():
        print(f"   {line}")


def declined_payment() -> None:
    print("\n2. Declined payment")
    bus, _ = build_bus()
    workflow = OrderWorkflow(bus, payment_policy=AlwaysFail(), shipment_policy=AlwaysSucceed())
    catalog = default_catalog()

    order = workflow.open_order(Customer(name="Grace Hopper", email="grace@example.com"))
    workflow.add_item(order, catalog.get("laptop"))
    workflow.add_item(order, catalog.get("mouse"))
    try:
        workflow.checkout(order, "paypal")
    except PaymentFailure as e:
        print(f"   Checkout aborted: {e} (order stays {order.status.label})")


def seeded_run(seed: int) -> None:
    print(f"\n3. Seeded run (seed={seed})")
    bus, display = build_bus()
    workflow = OrderWorkflow(bus, config=OrderFlowConfig(seed=seed))
    catalog = default_catalog()

    order = workflow.open_order(Customer(name="Alan Turing", email="alan@example.com"))
    for key in catalog.keys():
        workflow.add_item(order, catalog.get(key))
    try:
        workflow.checkout(order, "paypal")
    except OrderFlowError as e:
        logger.warning("Seeded run ended early: %s", e)
    print(f"   {len(display.lines)} events shown, final status {order.status.label}")


def main() -> None:
    print("=" * 60)
    print("Order Lifecycle Example")
    print("=" * 60)

    successful_checkout()
    declined_payment()
    seeded_run(seed=7)

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
