"""Repositories for orders and order items, backed by the Django ORM."""
from restaurant_api.repositories import ModelRepository
from .models import Order, OrderItem


class OrderRepository(ModelRepository):
    model = Order
    not_found_message = 'Order not found'

    def all(self):
        return Order.objects.select_related('user')

    def by_status(self, status):
        return self.all().filter(status=status)

    def number_taken(self, order_number):
        return Order.objects.filter(order_number=order_number).exists()


class OrderItemRepository(ModelRepository):
    model = OrderItem
    not_found_message = 'Order item not found'

    def all(self):
        return OrderItem.objects.select_related('order', 'product')

    def by_order(self, order_id):
        return OrderItem.objects.filter(order_id=order_id).select_related('product')
