"""
Order DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ...domain.entities.order import Order


@dataclass
class OrderCreateDTO:
    """DTO for creating an order."""
    customer_id: int
    total_amount: Decimal
    saddle_specifications: Dict[str, Any] = field(default_factory=dict)
    order_number: Optional[str] = None
    special_instructions: Optional[str] = None
    estimated_delivery_date: Optional[datetime] = None
    priority: Optional[str] = None
    fitter_id: Optional[int] = None
    factory_id: Optional[int] = None
    customer_name: Optional[str] = None
    seat_sizes: Optional[List[str]] = None
    saddle_id: Optional[int] = None


@dataclass
class ChangeOrderStatusDTO:
    order_id: int
    status: str


@dataclass
class UpdateOrderPriorityDTO:
    order_id: int
    priority: str


@dataclass
class RecordDepositPaymentDTO:
    order_id: int
    amount: Decimal


@dataclass
class CancelOrderDTO:
    order_id: int
    reason: str


@dataclass
class AssignOrderDTO:
    """DTO for assigning a fitter and/or a factory."""
    order_id: int
    fitter_id: Optional[int] = None
    factory_id: Optional[int] = None


@dataclass
class UpdateOrderDetailsDTO:
    """DTO for partial updates; ``None`` leaves a field untouched."""
    order_id: int
    measurements: Optional[Dict[str, Any]] = None
    estimated_delivery_date: Optional[datetime] = None
    seat_sizes: Optional[List[str]] = None
    customer_name: Optional[str] = None
    saddle_id: Optional[int] = None


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: int
    customer_id: int
    order_number: str
    status: str
    status_display: str
    priority: str
    priority_display: str
    priority_color: str
    fitter_id: Optional[int]
    factory_id: Optional[int]
    saddle_specifications: Dict[str, Any]
    special_instructions: Optional[str]
    estimated_delivery_date: Optional[datetime]
    actual_delivery_date: Optional[datetime]
    total_amount: Decimal
    deposit_paid: Decimal
    balance_owing: Decimal
    measurements: Optional[Dict[str, Any]]
    is_urgent: bool
    seat_sizes: Optional[List[str]]
    customer_name: Optional[str]
    saddle_id: Optional[int]
    is_overdue: bool
    days_until_delivery: Optional[int]
    requires_deposit: bool
    payment_percentage: Decimal
    possible_transitions: List[str]
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            order_number=order.order_number.value,
            status=order.status.value,
            status_display=order.status.display_name,
            priority=order.priority.value,
            priority_display=order.priority.display_name,
            priority_color=order.priority.color_code,
            fitter_id=order.fitter_id,
            factory_id=order.factory_id,
            saddle_specifications=dict(order.saddle_specifications),
            special_instructions=order.special_instructions,
            estimated_delivery_date=order.estimated_delivery_date,
            actual_delivery_date=order.actual_delivery_date,
            total_amount=order.total_amount,
            deposit_paid=order.deposit_paid,
            balance_owing=order.balance_owing,
            measurements=dict(order.measurements) if order.measurements is not None else None,
            is_urgent=order.is_urgent,
            seat_sizes=list(order.seat_sizes) if order.seat_sizes else None,
            customer_name=order.customer_name,
            saddle_id=order.saddle_id,
            is_overdue=order.is_overdue(),
            days_until_delivery=order.get_days_until_delivery(),
            requires_deposit=order.requires_deposit(),
            payment_percentage=order.get_payment_percentage().quantize(Decimal('0.01')),
            possible_transitions=[status.value for status in order.status.possible_transitions()],
            version=order.version,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
