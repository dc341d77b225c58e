"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    InvalidOperationError,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier):
        super().__init__(entity_name="Order", entity_id=str(identifier), code="ORDER_NOT_FOUND")
        self.identifier = identifier


class InvalidOrderNumberError(ValidationError):
    """Raised when an order number is empty."""

    def __init__(self, value):
        super().__init__(message="Order number is required", field="order_number")
        self.value = value


class InvalidEnumValueError(ValidationError):
    """Raised when a string does not name a known enum member."""

    def __init__(self, kind: str, value, valid_values):
        super().__init__(
            message=f"Invalid {kind}: '{value}'. Valid values: {', '.join(valid_values)}",
            field=kind.replace(" ", "_"),
            code="INVALID_ENUM_VALUE",
        )
        self.value = value
        self.valid_values = list(valid_values)


class InvalidOrderStatusError(InvalidEnumValueError):
    """Raised when a status string is unknown."""

    def __init__(self, value, valid_values):
        super().__init__("order status", value, valid_values)


class InvalidOrderPriorityError(InvalidEnumValueError):
    """Raised when a priority string is unknown."""

    def __init__(self, value, valid_values):
        super().__init__("order priority", value, valid_values)


class DepositExceedsTotalError(ValidationError):
    """Raised when a deposit would push the paid amount over the order total."""

    def __init__(self, deposit_paid, amount, total_amount):
        super().__init__(
            message=(
                f"Deposit amount exceeds total order value: "
                f"{deposit_paid} + {amount} > {total_amount}"
            ),
            field="amount",
        )
        self.deposit_paid = deposit_paid
        self.amount = amount
        self.total_amount = total_amount


class InvalidOrderStateError(InvalidOperationError):
    """Raised when an order operation is invalid for the current state."""

    def __init__(self, operation: str, current_state: str, message: str = None):
        super().__init__(
            message=message or f"Cannot {operation} order in '{current_state}' state",
            operation=operation,
            state=current_state,
            code="INVALID_ORDER_STATE",
        )


class InvalidStatusTransitionError(InvalidOrderStateError):
    """Raised when a status change is not allowed by the transition table."""

    def __init__(self, from_status: str, to_status: str, message: str = None):
        super().__init__(
            operation="change status",
            current_state=from_status,
            message=message or f"Invalid status transition from {from_status} to {to_status}",
        )
        self.code = "INVALID_STATUS_TRANSITION"
        self.from_status = from_status
        self.to_status = to_status


class DuplicateOrderNumberError(ConflictError):
    """Raised when an order number already exists."""

    def __init__(self, order_number: str):
        super().__init__(
            message=f"Order with number '{order_number}' already exists",
            code="DUPLICATE_ORDER_NUMBER"
        )
        self.order_number = order_number


class ConcurrentOrderModificationError(ConflictError):
    """Raised when an order was changed by another request since it was loaded."""

    def __init__(self, order_id: int, expected_version: int):
        super().__init__(
            message=(
                f"Order #{order_id} was modified by another request "
                f"(expected version {expected_version}). Reload and try again."
            ),
            code="CONCURRENT_MODIFICATION"
        )
        self.order_id = order_id
        self.expected_version = expected_version


class OrderSearchError(DomainException):
    """Raised when an order search cannot be executed by the storage layer."""

    def __init__(self, message: str):
        super().__init__(message=f"Order search failed: {message}", code="SEARCH_FAILED")
