"""
Order search serializers.
"""
from rest_framework import serializers

from ...application.dtos.order_search_dto import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SUGGESTION_LIMIT,
    MAX_PAGE_SIZE,
    OrderSearchCriteria,
)
from .order_serializer import OrderSerializer


class OrderSearchQuerySerializer(serializers.Serializer):
    """Query string of the search and stats endpoints.

    Ids and flags are type-checked here, so malformed values never reach
    the query builder. ``limit`` above the maximum is clamped later, not
    rejected.
    """
    customer = serializers.CharField(required=False, allow_blank=True)
    order_id = serializers.IntegerField(required=False, min_value=1)
    order_number = serializers.CharField(required=False, allow_blank=True, max_length=50)
    seat_size_id = serializers.CharField(required=False, allow_blank=True, max_length=50)
    is_urgent = serializers.BooleanField(required=False, allow_null=True, default=None)
    saddle_id = serializers.IntegerField(required=False, min_value=1)
    fitter_id = serializers.IntegerField(required=False, min_value=1)
    factory_id = serializers.IntegerField(required=False, min_value=1)
    customer_id = serializers.IntegerField(required=False, min_value=1)
    status = serializers.CharField(required=False, allow_blank=True)
    priority = serializers.CharField(required=False, allow_blank=True)
    date_from = serializers.DateTimeField(required=False)
    date_to = serializers.DateTimeField(required=False)
    page = serializers.IntegerField(required=False, default=1)
    limit = serializers.IntegerField(
        required=False,
        default=DEFAULT_PAGE_SIZE,
        help_text=f"Page size, at most {MAX_PAGE_SIZE}",
    )
    sort_by = serializers.CharField(required=False, default='created_at')
    sort_order = serializers.CharField(required=False, default='desc')

    def to_criteria(self) -> OrderSearchCriteria:
        data = {key: value for key, value in self.validated_data.items() if value != ''}
        return OrderSearchCriteria(**data)


class OrderSuggestionQuerySerializer(serializers.Serializer):
    field = serializers.CharField()
    query = serializers.CharField(allow_blank=True, required=False, default='')
    limit = serializers.IntegerField(required=False, min_value=1, max_value=50, default=DEFAULT_SUGGESTION_LIMIT)


class OrderSearchResultSerializer(serializers.Serializer):
    """Search result envelope."""
    items = OrderSerializer(many=True, read_only=True)
    total = serializers.IntegerField(read_only=True)
    page = serializers.IntegerField(read_only=True)
    limit = serializers.IntegerField(read_only=True)
    total_pages = serializers.IntegerField(read_only=True)
    has_next = serializers.BooleanField(read_only=True)
    has_prev = serializers.BooleanField(read_only=True)


class OrderSearchStatsSerializer(serializers.Serializer):
    total_matching = serializers.IntegerField(read_only=True)
    urgent_count = serializers.IntegerField(read_only=True)
    status_breakdown = serializers.DictField(child=serializers.IntegerField(), read_only=True)
    average_value = serializers.FloatField(read_only=True)


class OrderListQuerySerializer(serializers.Serializer):
    """Filters accepted by the plain order list."""
    customer_id = serializers.IntegerField(required=False, min_value=1)
    fitter_id = serializers.IntegerField(required=False, min_value=1)
    factory_id = serializers.IntegerField(required=False, min_value=1)
    status = serializers.CharField(required=False, allow_blank=True)


class ProductionQueueQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, min_value=1, max_value=MAX_PAGE_SIZE)


class OrderStatsSerializer(serializers.Serializer):
    """Dashboard totals over all live orders."""
    total_orders = serializers.IntegerField(read_only=True)
    urgent_orders = serializers.IntegerField(read_only=True)
    overdue_orders = serializers.IntegerField(read_only=True)
    average_value = serializers.FloatField(read_only=True)
    status_counts = serializers.DictField(child=serializers.IntegerField(), read_only=True)


class CustomerOrderSummarySerializer(serializers.Serializer):
    customer_id = serializers.IntegerField(read_only=True)
    order_count = serializers.IntegerField(read_only=True)
    total_value = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
