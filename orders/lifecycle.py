"""Order lifecycle rules.

Orders move ``pending -> preparing -> ready -> completed`` in practice, but the
generic status update accepts any known status; only cancellation has a guard
(completed orders stay completed). Once an order is completed or cancelled its
items are frozen.
"""
import enum

from restaurant_api.exceptions import InvalidState, ValidationError
from .models import Order

STATUSES = tuple(Order.Status.values)

TERMINAL_STATUSES = frozenset({Order.Status.COMPLETED, Order.Status.CANCELLED})


class ItemIntent(enum.Enum):
    ADD = 'add'
    MODIFY = 'modify'
    REMOVE = 'remove'


CLOSED_ORDER_MESSAGES = {
    ItemIntent.ADD: 'Cannot add items to completed or cancelled orders',
    ItemIntent.MODIFY: 'Cannot modify items in completed or cancelled orders',
    ItemIntent.REMOVE: 'Cannot remove items from completed or cancelled orders',
}


def validate_status(value, message='Validation Error'):
    if value not in STATUSES:
        raise ValidationError(message, errors={
            'status': [f'The selected status is invalid. Expected one of: {", ".join(STATUSES)}.']
        })
    return value


def set_status(order, new_status):
    """Move the order to any known status; no adjacency check."""
    order.status = validate_status(new_status)
    return order


def cancel(order):
    if order.status == Order.Status.COMPLETED:
        raise InvalidState('Completed orders cannot be cancelled')
    order.status = Order.Status.CANCELLED
    return order


def is_closed(order):
    return order.status in TERMINAL_STATUSES


def guard_item_mutable(order, intent=ItemIntent.MODIFY):
    if is_closed(order):
        raise InvalidState(CLOSED_ORDER_MESSAGES[intent])
