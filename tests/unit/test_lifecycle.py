"""
Unit tests for the lifecycle state machine.
"""

import pytest

from orderflow.lifecycle import OrderStatus, Transition, advance


class TestOrderStatus:
    def test_labels(self) -> None:
        assert [s.label for s in OrderStatus] == ["New", "Processing", "Shipped", "Delivered"]

    def test_next_states(self) -> None:
        assert OrderStatus.NEW.next is OrderStatus.PROCESSING
        assert OrderStatus.PROCESSING.next is OrderStatus.SHIPPED
        assert OrderStatus.SHIPPED.next is OrderStatus.DELIVERED
        assert OrderStatus.DELIVERED.next is OrderStatus.DELIVERED

    def test_only_delivered_is_terminal(self) -> None:
        assert [s for s in OrderStatus if s.is_terminal] == [OrderStatus.DELIVERED]


class TestAdvance:
    @pytest.mark.parametrize(
        ("current", "expected_next"),
        [
            (OrderStatus.NEW, OrderStatus.PROCESSING),
            (OrderStatus.PROCESSING, OrderStatus.SHIPPED),
            (OrderStatus.SHIPPED, OrderStatus.DELIVERED),
            (OrderStatus.DELIVERED, OrderStatus.DELIVERED),
        ],
    )
    def test_announces_current_and_moves_to_next(
        self, current: OrderStatus, expected_next: OrderStatus
    ) -> None:
        assert advance(current) == Transition(announced=current, next_state=expected_next)

    def test_delivered_is_idempotent(self) -> None:
        transition = advance(OrderStatus.DELIVERED)
        assert not transition.changed

    def test_other_steps_change_state(self) -> None:
        assert all(advance(s).changed for s in OrderStatus if not s.is_terminal)

    def test_transition_is_immutable(self) -> None:
        transition = advance(OrderStatus.NEW)
        with pytest.raises(AttributeError):
            transition.announced = OrderStatus.SHIPPED  # type: ignore[misc]
