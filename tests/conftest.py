"""
Shared pytest fixtures for the orderflow library tests.

- Customer and order fixtures (customer, order, computer_set)
- Event bus fixtures (event_bus, recording_handler)
- Workflow fixtures (harness, catalog)
"""

from __future__ import annotations

import pytest

from orderflow.bus.memory import InMemoryEventBus
from orderflow.catalog import Catalog, default_catalog
from orderflow.customers import Customer
from orderflow.items import CompositeItem
from orderflow.order import Order
from orderflow.testing import OrderFlowTestHarness
from tests.fixtures import RecordingHandler, build_computer_set

# ============================================================================
# Domain fixtures
# ============================================================================


@pytest.fixture
def customer() -> Customer:
    """A customer with a fixed name and email."""
    return Customer(name="Ada Lovelace", email="ada@example.com")


@pytest.fixture
def computer_set() -> CompositeItem:
    """The 1150 Computer Set bundle."""
    return build_computer_set()


@pytest.fixture
def order(customer: Customer) -> Order:
    """A fresh, empty order in state New."""
    return Order(customer)


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog()


# ============================================================================
# Bus and workflow fixtures
# ============================================================================


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def recording_handler(event_bus: InMemoryEventBus) -> RecordingHandler:
    """A handler subscribed to every event on ``event_bus``."""
    handler = RecordingHandler()
    event_bus.subscribe_to_all_events(handler)
    return handler


@pytest.fixture
def harness() -> OrderFlowTestHarness:
    """Harness whose payments and shipments always succeed."""
    return OrderFlowTestHarness()
