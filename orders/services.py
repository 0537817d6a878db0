"""Order and order item services.

Every read-modify-write runs in a transaction and row-locks what it changes,
so two requests touching the same order or item are applied one after the
other.
"""
import logging
import string

from django.db import IntegrityError, transaction
from django.utils.crypto import get_random_string

from restaurant_api.exceptions import ValidationError
from restaurant_api.repositories import apply_changes
from . import lifecycle
from .lifecycle import ItemIntent
from .models import Order, OrderItem

logger = logging.getLogger(__name__)

ORDER_NUMBER_PREFIX = 'ORD-'
ORDER_NUMBER_LENGTH = 8
ORDER_NUMBER_CHARS = string.ascii_uppercase + string.digits
ORDER_NUMBER_ATTEMPTS = 10


def validate_quantity(quantity):
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError(errors={'quantity': ['The quantity must be an integer of at least 1.']})
    return quantity


class OrderService:
    # Editable through the generic create/update; status goes through the lifecycle
    fields = ('user', 'table', 'order_type', 'subtotal', 'tax', 'discount', 'total', 'notes')

    def __init__(self, orders):
        self.orders = orders

    def list(self):
        return self.orders.all()

    def get(self, pk):
        return self.orders.get(pk)

    def by_status(self, status):
        lifecycle.validate_status(status, message='Invalid status parameter')
        return self.orders.by_status(status)

    def generate_order_number(self):
        for _ in range(ORDER_NUMBER_ATTEMPTS):
            candidate = ORDER_NUMBER_PREFIX + get_random_string(ORDER_NUMBER_LENGTH, ORDER_NUMBER_CHARS)
            if not self.orders.number_taken(candidate):
                return candidate
        raise RuntimeError('Could not generate a unique order number')

    def create(self, data):
        order = Order()
        apply_changes(order, data, self.fields)
        if 'status' in data:
            lifecycle.set_status(order, data['status'])
        for _ in range(ORDER_NUMBER_ATTEMPTS):
            order.order_number = self.generate_order_number()
            try:
                with transaction.atomic():
                    self.orders.add(order)
            except IntegrityError:
                # Another request inserted the same number after our check
                if not self.orders.number_taken(order.order_number):
                    raise
                logger.warning(f"Order number {order.order_number} taken concurrently, retrying")
                continue
            logger.info(f"Created order {order.order_number} (#{order.pk}) with status {order.status}")
            return order
        raise RuntimeError('Could not generate a unique order number')

    def update(self, pk, data):
        with transaction.atomic():
            order = self.orders.get_for_update(pk)
            changed = apply_changes(order, data, self.fields)
            if 'status' in data:
                lifecycle.set_status(order, data['status'])
                changed.append('status')
            return self.orders.save(order, update_fields=changed)

    def set_status(self, pk, status):
        with transaction.atomic():
            order = self.orders.get_for_update(pk)
            previous = order.status
            lifecycle.set_status(order, status)
            self.orders.save(order, update_fields=['status'])
        logger.info(f"Order #{order.pk} status {previous} -> {order.status}")
        return order

    def cancel(self, pk):
        with transaction.atomic():
            order = self.orders.get_for_update(pk)
            lifecycle.cancel(order)
            self.orders.save(order, update_fields=['status'])
        logger.info(f"Order #{order.pk} cancelled")
        return order


class OrderItemService:
    """Keeps item subtotals consistent and refuses changes to closed orders.

    ``unit_price`` is copied from the product when the item is created and is
    never re-read afterwards; ``subtotal`` is always ``unit_price * quantity``.
    """

    fields = ('quantity', 'notes')

    def __init__(self, orders, items, products):
        self.orders = orders
        self.items = items
        self.products = products

    def list(self):
        return self.items.all()

    def get(self, pk):
        return self.items.get(pk)

    def by_order(self, order_id):
        self.orders.get(order_id)
        return self.items.by_order(order_id)

    def _build_item(self, order, product, quantity, notes=None):
        item = OrderItem(
            order=order,
            product=product,
            quantity=quantity,
            unit_price=product.price,
            notes=notes,
        )
        item.calculate_subtotal()
        return self.items.add(item)

    def create(self, order_id, product_id, quantity, notes=None):
        with transaction.atomic():
            order = self.orders.get_for_update(order_id)
            product = self.products.get(product_id)
            validate_quantity(quantity)
            lifecycle.guard_item_mutable(order, ItemIntent.ADD)
            item = self._build_item(order, product, quantity, notes)
        logger.info(f"Added item #{item.pk} ({quantity} x product #{product.pk}) to order #{order.pk}")
        return item

    def update(self, pk, data):
        with transaction.atomic():
            item = self.items.get_for_update(pk)
            order = self.orders.get_for_update(item.order_id)
            if 'quantity' in data:
                validate_quantity(data['quantity'])
            lifecycle.guard_item_mutable(order, ItemIntent.MODIFY)
            changed = apply_changes(item, data, self.fields)
            if 'quantity' in changed:
                item.calculate_subtotal()
                changed.append('subtotal')
            return self.items.save(item, update_fields=changed)

    def update_quantity(self, pk, quantity):
        with transaction.atomic():
            item = self.items.get_for_update(pk)
            order = self.orders.get_for_update(item.order_id)
            validate_quantity(quantity)
            lifecycle.guard_item_mutable(order, ItemIntent.MODIFY)
            item.quantity = quantity
            item.calculate_subtotal()
            return self.items.save(item, update_fields=['quantity', 'subtotal'])

    def bulk_add(self, order_id, entries):
        """Add several items at once.

        Entries whose product cannot be found are skipped; the rest of the
        batch is still added.
        """
        for entry in entries:
            validate_quantity(entry['quantity'])

        added = []
        with transaction.atomic():
            order = self.orders.get_for_update(order_id)
            lifecycle.guard_item_mutable(order, ItemIntent.ADD)
            for entry in entries:
                product = self.products.find(entry['product_id'])
                if product is None:
                    logger.info(f"Bulk add to order #{order.pk}: skipped unknown product #{entry['product_id']}")
                    continue
                added.append(self._build_item(order, product, entry['quantity'], entry.get('notes')))
        logger.info(f"Bulk added {len(added)} of {len(entries)} items to order #{order.pk}")
        return added

    def delete(self, pk):
        with transaction.atomic():
            item = self.items.get_for_update(pk)
            order = self.orders.get_for_update(item.order_id)
            lifecycle.guard_item_mutable(order, ItemIntent.REMOVE)
            self.items.delete(item)
        logger.info(f"Removed item #{pk} from order #{item.order_id}")
