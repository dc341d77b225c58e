"""
Shared plumbing for order use cases.
"""
from dataclasses import dataclass

from ...domain.entities.order import Order
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository


@dataclass
class OrderUseCaseMixin:
    """Loads orders through the repository, raising when they are missing."""

    order_repository: OrderRepository

    def _get_order(self, order_id: int) -> Order:
        order = self.order_repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order
