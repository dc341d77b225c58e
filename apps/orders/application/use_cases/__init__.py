# Use cases
from .create_order import CreateOrderUseCase
from .change_order_status import ChangeOrderStatusUseCase
from .update_order_priority import UpdateOrderPriorityUseCase
from .record_deposit_payment import RecordDepositPaymentUseCase
from .cancel_order import CancelOrderUseCase
from .assign_order import AssignOrderUseCase
from .update_order_details import UpdateOrderDetailsUseCase

__all__ = [
    'CreateOrderUseCase',
    'ChangeOrderStatusUseCase',
    'UpdateOrderPriorityUseCase',
    'RecordDepositPaymentUseCase',
    'CancelOrderUseCase',
    'AssignOrderUseCase',
    'UpdateOrderDetailsUseCase',
]
