# Serializers
from .order_serializer import (
    OrderSerializer,
    OrderCreateSerializer,
    OrderDetailsUpdateSerializer,
    OrderStatusChangeSerializer,
    OrderPriorityUpdateSerializer,
    DepositPaymentSerializer,
    OrderCancelSerializer,
    OrderAssignmentSerializer,
    OrderCommandResultSerializer,
)
from .order_search_serializer import (
    OrderSearchQuerySerializer,
    OrderSuggestionQuerySerializer,
    OrderSearchResultSerializer,
    OrderSearchStatsSerializer,
    OrderListQuerySerializer,
    ProductionQueueQuerySerializer,
    OrderStatsSerializer,
    CustomerOrderSummarySerializer,
)

__all__ = [
    'OrderSerializer',
    'OrderCreateSerializer',
    'OrderDetailsUpdateSerializer',
    'OrderStatusChangeSerializer',
    'OrderPriorityUpdateSerializer',
    'DepositPaymentSerializer',
    'OrderCancelSerializer',
    'OrderAssignmentSerializer',
    'OrderCommandResultSerializer',
    'OrderSearchQuerySerializer',
    'OrderSuggestionQuerySerializer',
    'OrderSearchResultSerializer',
    'OrderSearchStatsSerializer',
    'OrderListQuerySerializer',
    'ProductionQueueQuerySerializer',
    'OrderStatsSerializer',
    'CustomerOrderSummarySerializer',
]
