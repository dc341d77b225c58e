"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from ..entities.order import Order
from ..value_objects.order_status import OrderStatus

if TYPE_CHECKING:
    from apps.orders.application.dtos.order_search_dto import OrderSearchCriteria


class OrderRepository(ABC):
    """Abstract repository for Order aggregate."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Insert a new order or update an existing one.

        Raises ``ConcurrentOrderModificationError`` when the stored version
        no longer matches ``order.version``.
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: int) -> Optional[Order]:
        """Find an order by ID."""
        pass

    @abstractmethod
    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        """Find an order by order number."""
        pass

    @abstractmethod
    def exists_by_order_number(self, order_number: str) -> bool:
        pass

    @abstractmethod
    def find_all(
        self,
        customer_id: Optional[int] = None,
        fitter_id: Optional[int] = None,
        factory_id: Optional[int] = None,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        """Find orders with optional filters, newest first."""
        pass

    @abstractmethod
    def count(
        self,
        customer_id: Optional[int] = None,
        fitter_id: Optional[int] = None,
        factory_id: Optional[int] = None,
        status: Optional[OrderStatus] = None,
    ) -> int:
        pass

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Soft delete an order."""
        pass

    @abstractmethod
    def find_overdue(self) -> List[Order]:
        """Open orders whose estimated delivery date has passed."""
        pass

    @abstractmethod
    def find_for_production(self, limit: Optional[int] = None) -> List[Order]:
        """Confirmed and in-production orders, urgent first, then oldest."""
        pass

    @abstractmethod
    def find_requiring_deposit(self) -> List[Order]:
        """Open orders with a balance owing, largest balance first."""
        pass

    @abstractmethod
    def find_urgent(self) -> List[Order]:
        """Urgent and critical orders, newest first."""
        pass

    @abstractmethod
    def find_in_production(self) -> List[Order]:
        pass

    @abstractmethod
    def get_order_stats(self) -> Dict:
        """Totals over every live order: counts, average value, per-status counts."""
        pass

    @abstractmethod
    def get_customer_summary(self, customer_id: int) -> Dict:
        """Number of live orders for a customer and their summed total."""
        pass

    @abstractmethod
    def search(self, criteria: 'OrderSearchCriteria') -> Tuple[List[Order], int]:
        """Return one page of matching orders and the total match count."""
        pass

    @abstractmethod
    def get_suggestions(self, field: str, query: str, limit: int = 10) -> List[str]:
        """Distinct values of ``field`` containing ``query``, ascending."""
        pass

    @abstractmethod
    def get_search_stats(self, criteria: 'OrderSearchCriteria') -> Dict:
        """Aggregates over every order matching ``criteria``."""
        pass
