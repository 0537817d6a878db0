"""Factories wiring order services to their repositories."""
from catalog.repositories import ProductRepository
from .repositories import OrderRepository, OrderItemRepository
from .services import OrderService, OrderItemService


def get_order_service():
    return OrderService(OrderRepository())


def get_order_item_service():
    return OrderItemService(OrderRepository(), OrderItemRepository(), ProductRepository())
