"""
Order priority value object.
"""
from enum import Enum
from typing import List

from ..exceptions import InvalidOrderPriorityError


class OrderPriority(str, Enum):
    """Production scheduling priority; higher weight is built first."""
    LOW = 'low'
    NORMAL = 'normal'
    HIGH = 'high'
    URGENT = 'urgent'
    CRITICAL = 'critical'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value) -> 'OrderPriority':
        """Parse a priority literal, ignoring case."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value:
            raise InvalidOrderPriorityError(value, cls.values())
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidOrderPriorityError(value, cls.values()) from None

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def choices(cls) -> List[tuple]:
        return [(member.value, member.display_name) for member in cls]

    @property
    def weight(self) -> int:
        return _WEIGHTS[self]

    @property
    def color_code(self) -> str:
        """Hex colour used by the order tables."""
        return _COLORS[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def is_higher_than(self, other: 'OrderPriority') -> bool:
        return self.weight > other.weight

    def is_lower_than(self, other: 'OrderPriority') -> bool:
        return self.weight < other.weight

    def is_urgent(self) -> bool:
        """Only urgent and critical orders jump the queue; high does not."""
        return self in (OrderPriority.URGENT, OrderPriority.CRITICAL)


_WEIGHTS = {
    OrderPriority.LOW: 1,
    OrderPriority.NORMAL: 2,
    OrderPriority.HIGH: 3,
    OrderPriority.URGENT: 4,
    OrderPriority.CRITICAL: 5,
}

_COLORS = {
    OrderPriority.LOW: '#28a745',
    OrderPriority.NORMAL: '#007bff',
    OrderPriority.HIGH: '#ffc107',
    OrderPriority.URGENT: '#fd7e14',
    OrderPriority.CRITICAL: '#dc3545',
}
