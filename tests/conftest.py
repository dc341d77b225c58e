"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def order_repository():
    """Django-backed order repository."""
    from apps.orders.infrastructure.repositories import DjangoOrderRepository
    return DjangoOrderRepository()


@pytest.fixture
def make_order():
    """Factory for unsaved orders with sensible defaults."""
    from apps.orders.domain.entities.order import Order
    from apps.orders.domain.value_objects.order_number import OrderNumber

    def _make_order(**overrides):
        fields = {
            'customer_id': 1,
            'order_number': OrderNumber.generate(),
            'saddle_specifications': {'model': 'Dressage Pro', 'tree': 'medium'},
            'total_amount': Decimal('1000.00'),
        }
        fields.update(overrides)
        return Order(**fields)

    return _make_order


@pytest.fixture
def saved_order(order_repository, make_order):
    """Factory that persists an order and returns the stored copy."""

    def _saved_order(**overrides):
        return order_repository.save(make_order(**overrides))

    return _saved_order
