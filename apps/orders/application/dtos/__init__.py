from .order_dto import (
    OrderCreateDTO,
    ChangeOrderStatusDTO,
    UpdateOrderPriorityDTO,
    RecordDepositPaymentDTO,
    CancelOrderDTO,
    AssignOrderDTO,
    UpdateOrderDetailsDTO,
    OrderDTO,
)
from .order_search_dto import OrderSearchCriteria, OrderSearchResult, OrderSearchStats

__all__ = [
    'OrderCreateDTO',
    'ChangeOrderStatusDTO',
    'UpdateOrderPriorityDTO',
    'RecordDepositPaymentDTO',
    'CancelOrderDTO',
    'AssignOrderDTO',
    'UpdateOrderDetailsDTO',
    'OrderDTO',
    'OrderSearchCriteria',
    'OrderSearchResult',
    'OrderSearchStats',
]
