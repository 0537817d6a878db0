"""Shared fixtures: an API client, a staff user and a small catalog."""
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from authentication.models import CustomUser
from catalog.models import Category, Product
from orders.models import Order


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploaded images out of the project tree."""
    settings.MEDIA_ROOT = tmp_path / 'media'
    return settings.MEDIA_ROOT


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return CustomUser.objects.create_user(
        email='waiter@example.com',
        password='S3cure-pass!',
        first_name='Sam',
        last_name='Waiter',
    )


@pytest.fixture
def category(db):
    return Category.objects.create(name='Mains', description='Main dishes')


@pytest.fixture
def product(category):
    return Product.objects.create(category=category, name='Burger', price=Decimal('15.50'))


@pytest.fixture
def make_order(user):
    def _make(status=Order.Status.PENDING, **extra):
        fields = dict(
            order_number=f'ORD-T{Order.objects.count():07d}',
            user=user,
            order_type=Order.OrderType.DINE_IN,
            status=status,
            subtotal=Decimal('0.00'),
            tax=Decimal('0.00'),
            total=Decimal('0.00'),
        )
        fields.update(extra)
        return Order.objects.create(**fields)
    return _make


@pytest.fixture
def order(make_order):
    return make_order()
