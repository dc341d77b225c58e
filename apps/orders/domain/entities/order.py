"""
Order entity (Aggregate Root).
"""
import copy
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from shared.domain import AggregateRoot, ValidationError, utc_now
from ..value_objects.order_status import OrderStatus
from ..value_objects.order_priority import OrderPriority
from ..value_objects.order_number import OrderNumber
from ..exceptions import (
    DepositExceedsTotalError,
    InvalidOrderStateError,
    InvalidStatusTransitionError,
)

# Share of the total that must be paid before production readiness is assumed.
DEPOSIT_RATIO = Decimal('0.3')


def _to_decimal(value, field_name: str) -> Decimal:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number", field=field_name)
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except InvalidOperation:
            raise ValidationError(f"{field_name} must be a number", field=field_name) from None
    # NaN and infinities do not compare
    if not value.is_finite():
        raise ValidationError(f"{field_name} must be a finite number", field=field_name)
    return value


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(eq=False)
class Order(AggregateRoot):
    """A saddle manufacturing order."""
    customer_id: int
    order_number: OrderNumber
    total_amount: Decimal
    saddle_specifications: Dict[str, Any] = field(default_factory=dict)
    status: OrderStatus = OrderStatus.PENDING
    priority: OrderPriority = OrderPriority.NORMAL
    fitter_id: Optional[int] = None
    factory_id: Optional[int] = None
    special_instructions: Optional[str] = None
    estimated_delivery_date: Optional[datetime] = None
    actual_delivery_date: Optional[datetime] = None
    deposit_paid: Decimal = Decimal('0')
    balance_owing: Optional[Decimal] = None
    measurements: Optional[Dict[str, Any]] = None
    is_urgent: Optional[bool] = None
    seat_sizes: Optional[List[str]] = None
    customer_name: Optional[str] = None
    saddle_id: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.order_number, str):
            self.order_number = OrderNumber(value=self.order_number)
        self.status = OrderStatus.from_string(self.status)
        self.priority = OrderPriority.from_string(self.priority)
        self.total_amount = _to_decimal(self.total_amount, "total_amount")
        self.deposit_paid = _to_decimal(self.deposit_paid, "deposit_paid")
        if self.balance_owing is None:
            self.balance_owing = self.total_amount - self.deposit_paid
        else:
            self.balance_owing = _to_decimal(self.balance_owing, "balance_owing")
        if self.is_urgent is None:
            self.is_urgent = self.priority.is_urgent()
        self._validate_business_rules()

    @classmethod
    def create(
        cls,
        customer_id: int,
        order_number,
        saddle_specifications: Dict[str, Any],
        total_amount,
        special_instructions: Optional[str] = None,
        estimated_delivery_date: Optional[datetime] = None,
    ) -> 'Order':
        """Factory method to create a new pending order with nothing paid."""
        return cls(
            customer_id=customer_id,
            order_number=order_number,
            saddle_specifications=dict(saddle_specifications or {}),
            total_amount=total_amount,
            special_instructions=special_instructions or None,
            estimated_delivery_date=estimated_delivery_date,
            status=OrderStatus.PENDING,
            priority=OrderPriority.NORMAL,
            deposit_paid=Decimal('0'),
            is_urgent=False,
        )

    # Assignment

    def assign_fitter(self, fitter_id: int) -> None:
        """Assign the order to a fitter."""
        self._ensure_not_final("assign fitter to", "Cannot assign fitter to completed order")
        self._ensure_positive_id(fitter_id, "fitter_id", "Valid fitter ID is required")
        self.fitter_id = fitter_id
        self._changed()

    def assign_factory(self, factory_id: int) -> None:
        """Assign the order to a factory."""
        self._ensure_not_final("assign factory to", "Cannot assign factory to completed order")
        self._ensure_positive_id(factory_id, "factory_id", "Valid factory ID is required")
        self.factory_id = factory_id
        self._changed()

    # Workflow

    def change_status(self, new_status: OrderStatus) -> None:
        """Move to ``new_status`` if the transition table allows it."""
        new_status = OrderStatus.from_string(new_status)
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransitionError(self.status.value, new_status.value)

        self.status = new_status
        if new_status is OrderStatus.DELIVERED and self.actual_delivery_date is None:
            self.actual_delivery_date = utc_now()
        self._changed()

    def update_priority(self, new_priority: OrderPriority) -> None:
        new_priority = OrderPriority.from_string(new_priority)
        self._ensure_not_final("change priority of", "Cannot change priority of completed order")
        self.priority = new_priority
        self.is_urgent = new_priority.is_urgent()
        self._changed()

    def cancel(self, reason: str) -> None:
        """Cancel the order.

        Gated by ``OrderStatus.can_be_cancelled`` rather than the transition
        table. The reason is kept in the special instructions.
        """
        if not self.status.can_be_cancelled():
            raise InvalidStatusTransitionError(
                self.status.value,
                OrderStatus.CANCELLED.value,
                message=f"Order cannot be cancelled in {self.status.value} status",
            )
        if not isinstance(reason, str) or not reason.strip():
            raise ValidationError("Cancellation reason is required", field="reason")

        self.status = OrderStatus.CANCELLED
        note = f"Cancellation reason: {reason.strip()}"
        self.special_instructions = f"{self.special_instructions or ''}\n\n{note}".strip()
        self._changed()

    # Payments

    def record_deposit_payment(self, amount) -> None:
        amount = _to_decimal(amount, "amount")
        if amount <= 0:
            raise ValidationError("Deposit amount must be positive", field="amount")
        if self.deposit_paid + amount > self.total_amount:
            raise DepositExceedsTotalError(self.deposit_paid, amount, self.total_amount)

        self.deposit_paid += amount
        self.balance_owing = self.total_amount - self.deposit_paid
        self._changed()

    # Details

    def update_measurements(self, measurements: Dict[str, Any]) -> None:
        self._ensure_not_final("update measurements for", "Cannot update measurements for completed order")
        if not isinstance(measurements, dict):
            raise ValidationError("Measurements must be a mapping", field="measurements")
        self.measurements = copy.deepcopy(dict(measurements))
        self._changed()

    def update_estimated_delivery_date(self, date: datetime) -> None:
        self._ensure_not_final("update delivery date for", "Cannot update delivery date for completed order")
        if not isinstance(date, datetime):
            raise ValidationError(
                "Estimated delivery date must be a date and time",
                field="estimated_delivery_date",
            )
        date = _as_aware(date)
        if date <= utc_now():
            raise ValidationError(
                "Estimated delivery date must be in the future",
                field="estimated_delivery_date",
            )
        self.estimated_delivery_date = date
        self._changed()

    def update_seat_sizes(self, seat_sizes: Optional[List[str]]) -> None:
        self.seat_sizes = list(seat_sizes) if seat_sizes else None
        self._changed()

    def update_customer_name(self, customer_name: Optional[str]) -> None:
        """Denormalised copy of the customer's name used by search."""
        self.customer_name = customer_name or None
        self._changed()

    def update_saddle_id(self, saddle_id: int) -> None:
        self._ensure_positive_id(saddle_id, "saddle_id", "Valid saddle ID is required")
        self.saddle_id = saddle_id
        self._changed()

    # Derived values

    def is_overdue(self) -> bool:
        if self.estimated_delivery_date is None or self.status.is_final():
            return False
        return utc_now() > _as_aware(self.estimated_delivery_date)

    def get_days_until_delivery(self) -> Optional[int]:
        if self.estimated_delivery_date is None or self.status.is_final():
            return None
        delta = _as_aware(self.estimated_delivery_date) - utc_now()
        return math.ceil(delta.total_seconds() / 86400)

    def requires_deposit(self) -> bool:
        return self.deposit_paid < self.total_amount * DEPOSIT_RATIO

    def get_payment_percentage(self) -> Decimal:
        if self.total_amount > 0:
            return self.deposit_paid / self.total_amount * 100
        return Decimal('0')

    # Internals

    def _changed(self) -> None:
        self.touch()
        self._validate_business_rules()

    def _ensure_not_final(self, operation: str, message: str) -> None:
        if self.status.is_final():
            raise InvalidOrderStateError(operation, self.status.value, message=message)

    @staticmethod
    def _ensure_positive_id(value, field_name: str, message: str) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValidationError(message, field=field_name)

    def _validate_business_rules(self) -> None:
        if isinstance(self.customer_id, bool) or not isinstance(self.customer_id, int) or self.customer_id <= 0:
            raise ValidationError("Customer ID is required", field="customer_id")
        if self.total_amount <= 0:
            raise ValidationError("Total amount must be positive", field="total_amount")
        if self.deposit_paid < 0:
            raise ValidationError("Deposit cannot be negative", field="deposit_paid")
        if self.balance_owing < 0:
            raise ValidationError("Balance owing cannot be negative", field="balance_owing")
