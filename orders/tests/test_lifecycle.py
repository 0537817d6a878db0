"""Unit tests for the order lifecycle rules (no database needed)."""
import pytest

from orders import lifecycle
from orders.lifecycle import ItemIntent
from orders.models import Order
from restaurant_api.exceptions import InvalidState, ValidationError


@pytest.mark.parametrize("status", lifecycle.STATUSES)
def test_set_status_accepts_every_known_status(status):
    order = Order(status=Order.Status.COMPLETED)
    lifecycle.set_status(order, status)
    assert order.status == status


def test_set_status_allows_jumping_backwards():
    order = Order(status=Order.Status.READY)
    lifecycle.set_status(order, 'pending')
    assert order.status == 'pending'


def test_set_status_rejects_unknown_value():
    order = Order(status=Order.Status.PENDING)
    with pytest.raises(ValidationError) as exc:
        lifecycle.set_status(order, 'served')
    assert 'status' in exc.value.errors
    assert order.status == Order.Status.PENDING


@pytest.mark.parametrize("status", ['pending', 'preparing', 'ready', 'cancelled'])
def test_cancel_from_non_completed_status(status):
    order = Order(status=status)
    lifecycle.cancel(order)
    assert order.status == Order.Status.CANCELLED


def test_cancel_completed_order_fails_and_keeps_status():
    order = Order(status=Order.Status.COMPLETED)
    with pytest.raises(InvalidState) as exc:
        lifecycle.cancel(order)
    assert exc.value.message == 'Completed orders cannot be cancelled'
    assert order.status == Order.Status.COMPLETED


@pytest.mark.parametrize("status", ['pending', 'preparing', 'ready'])
def test_open_orders_accept_item_changes(status):
    for intent in ItemIntent:
        lifecycle.guard_item_mutable(Order(status=status), intent)


@pytest.mark.parametrize("status", ['completed', 'cancelled'])
@pytest.mark.parametrize("intent, message", [
    (ItemIntent.ADD, 'Cannot add items to completed or cancelled orders'),
    (ItemIntent.MODIFY, 'Cannot modify items in completed or cancelled orders'),
    (ItemIntent.REMOVE, 'Cannot remove items from completed or cancelled orders'),
])
def test_closed_orders_reject_item_changes(status, intent, message):
    with pytest.raises(InvalidState) as exc:
        lifecycle.guard_item_mutable(Order(status=status), intent)
    assert exc.value.message == message
    assert exc.value.status_code == 400
