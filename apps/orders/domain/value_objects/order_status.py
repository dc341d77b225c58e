"""
Order status value object.
"""
from enum import Enum
from typing import Dict, FrozenSet, List

from ..exceptions import InvalidOrderStatusError


class OrderStatus(str, Enum):
    """Status of an order in the saddle manufacturing workflow."""
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    IN_PRODUCTION = 'in_production'
    QUALITY_CONTROL = 'quality_control'
    READY_FOR_SHIPPING = 'ready_for_shipping'
    SHIPPED = 'shipped'
    SHIPPED_TO_CUSTOMER = 'shipped_to_customer'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'
    RETURNED = 'returned'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value) -> 'OrderStatus':
        """Parse a status literal, ignoring case."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value:
            raise InvalidOrderStatusError(value, cls.values())
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidOrderStatusError(value, cls.values()) from None

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def choices(cls) -> List[tuple]:
        """Django-style (value, label) pairs."""
        return [(member.value, member.display_name) for member in cls]

    def can_transition_to(self, new_status: 'OrderStatus') -> bool:
        """Check if the transition table allows moving to ``new_status``."""
        return new_status in _TRANSITIONS[self]

    def possible_transitions(self) -> List['OrderStatus']:
        """Statuses reachable in one step, in declaration order."""
        return [status for status in OrderStatus if status in _TRANSITIONS[self]]

    def is_final(self) -> bool:
        """Delivered, cancelled and returned orders are complete."""
        return self in _FINAL_STATUSES

    def is_in_production(self) -> bool:
        return self in (OrderStatus.IN_PRODUCTION, OrderStatus.QUALITY_CONTROL)

    def can_be_cancelled(self) -> bool:
        """Shipped orders must be delivered or returned instead of cancelled."""
        return not self.is_final() and self is not OrderStatus.SHIPPED

    @property
    def display_name(self) -> str:
        return " ".join(word.capitalize() for word in self.value.split("_"))


_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({
        OrderStatus.CONFIRMED,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.CONFIRMED: frozenset({
        OrderStatus.IN_PRODUCTION,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.IN_PRODUCTION: frozenset({
        OrderStatus.QUALITY_CONTROL,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.QUALITY_CONTROL: frozenset({
        OrderStatus.READY_FOR_SHIPPING,
        OrderStatus.IN_PRODUCTION,  # rework after a failed inspection
        OrderStatus.CANCELLED,
    }),
    OrderStatus.READY_FOR_SHIPPING: frozenset({
        OrderStatus.SHIPPED,
        OrderStatus.CANCELLED,
    }),
    OrderStatus.SHIPPED: frozenset({
        OrderStatus.SHIPPED_TO_CUSTOMER,
        OrderStatus.DELIVERED,
        OrderStatus.RETURNED,
    }),
    OrderStatus.SHIPPED_TO_CUSTOMER: frozenset({
        OrderStatus.DELIVERED,
        OrderStatus.RETURNED,
    }),
    OrderStatus.DELIVERED: frozenset({
        OrderStatus.RETURNED,
    }),
    OrderStatus.CANCELLED: frozenset(),
    OrderStatus.RETURNED: frozenset(),
}

_FINAL_STATUSES = frozenset({
    OrderStatus.DELIVERED,
    OrderStatus.CANCELLED,
    OrderStatus.RETURNED,
})
