"""
Orders admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.order_model import OrderModel


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model."""
    list_display = (
        'order_number', 'customer_id', 'customer_name', 'status', 'priority',
        'is_urgent', 'total_amount', 'balance_owing', 'created_at',
    )
    list_filter = ('status', 'priority', 'is_urgent', 'created_at')
    search_fields = ('order_number', 'customer_name')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'order_number', 'version', 'created_at', 'updated_at', 'deleted_at')
