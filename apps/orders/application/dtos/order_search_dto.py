"""
Order search DTOs.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from shared.domain import ValidationError
from ...domain.value_objects.order_priority import OrderPriority
from ...domain.value_objects.order_status import OrderStatus
from .order_dto import OrderDTO

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
MIN_SUGGESTION_LENGTH = 2
DEFAULT_SUGGESTION_LIMIT = 10

# Accepted sort keys mapped to model fields. Anything else is rejected.
SORTABLE_FIELDS = {
    'created_at': 'created_at',
    'createdAt': 'created_at',
    'updated_at': 'updated_at',
    'updatedAt': 'updated_at',
    'order_number': 'order_number',
    'orderNumber': 'order_number',
    'total_amount': 'total_amount',
    'totalAmount': 'total_amount',
    'estimated_delivery_date': 'estimated_delivery_date',
    'estimatedDeliveryDate': 'estimated_delivery_date',
    'customer_name': 'customer_name',
    'customerName': 'customer_name',
}

SUGGESTION_FIELDS = {
    'customer': 'customer_name',
    'order_number': 'order_number',
    'orderNumber': 'order_number',
}

_FILTER_FIELDS = (
    'customer', 'order_id', 'order_number', 'seat_size_id', 'is_urgent',
    'saddle_id', 'fitter_id', 'factory_id', 'customer_id', 'status',
    'priority', 'date_from', 'date_to',
)


@dataclass
class OrderSearchCriteria:
    """Flat set of optional search filters plus paging and sorting.

    Every filter that is not ``None`` is combined with AND. ``limit`` above
    ``MAX_PAGE_SIZE`` is clamped rather than rejected.
    """
    customer: Optional[str] = None
    order_id: Optional[int] = None
    order_number: Optional[str] = None
    seat_size_id: Optional[str] = None
    is_urgent: Optional[bool] = None
    saddle_id: Optional[int] = None
    fitter_id: Optional[int] = None
    factory_id: Optional[int] = None
    customer_id: Optional[int] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    sort_by: str = 'created_at'
    sort_order: str = 'desc'

    def __post_init__(self):
        if self.page is None:
            self.page = 1
        if self.limit is None:
            self.limit = DEFAULT_PAGE_SIZE
        if self.page < 1:
            raise ValidationError("Page must be at least 1", field="page")
        if self.limit < 1:
            raise ValidationError("Limit must be at least 1", field="limit")
        self.limit = min(self.limit, MAX_PAGE_SIZE)

        sort_by = self.sort_by or 'created_at'
        if sort_by not in SORTABLE_FIELDS:
            raise ValidationError(
                f"Cannot sort by '{sort_by}'. Sortable fields: {', '.join(sorted(set(SORTABLE_FIELDS.values())))}",
                field="sort_by",
            )
        self.sort_by = SORTABLE_FIELDS[sort_by]

        sort_order = (self.sort_order or 'desc').lower()
        if sort_order not in ('asc', 'desc'):
            raise ValidationError("Sort order must be 'asc' or 'desc'", field="sort_order")
        self.sort_order = sort_order

        if self.status:
            self.status = OrderStatus.from_string(self.status).value
        if self.priority:
            self.priority = OrderPriority.from_string(self.priority).value

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def ordering(self) -> str:
        """ORM ordering expression for the whitelisted sort field."""
        prefix = '-' if self.sort_order == 'desc' else ''
        return f"{prefix}{self.sort_by}"

    def has_search_criteria(self) -> bool:
        return any(getattr(self, name) not in (None, '') for name in _FILTER_FIELDS)

    def summary(self) -> Dict[str, Any]:
        """Non-empty criteria for log lines."""
        summary = {
            name: getattr(self, name)
            for name in _FILTER_FIELDS
            if getattr(self, name) not in (None, '')
        }
        summary['page'] = self.page
        summary['limit'] = self.limit
        return summary


@dataclass
class OrderSearchResult:
    """One page of search results."""
    items: List[OrderDTO]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


@dataclass
class OrderSearchStats:
    """Aggregates over the filtered order set."""
    total_matching: int
    urgent_count: int
    status_breakdown: Dict[str, int] = field(default_factory=dict)
    average_value: float = 0.0
