"""
Order Django ORM models.
"""
from django.db import models
from django.utils import timezone

from ...domain.value_objects.order_priority import OrderPriority
from ...domain.value_objects.order_status import OrderStatus


class OrderModel(models.Model):
    """Order model.

    ``customer_name``, ``seat_sizes`` and ``saddle_id`` are denormalised so
    the search screen can filter a single table.
    """

    customer_id = models.PositiveIntegerField(db_index=True)
    order_number = models.CharField(max_length=50, unique=True)
    status = models.CharField(
        max_length=30,
        choices=OrderStatus.choices(),
        default=OrderStatus.PENDING.value,
        db_index=True,
    )
    priority = models.CharField(
        max_length=20,
        choices=OrderPriority.choices(),
        default=OrderPriority.NORMAL.value,
        db_index=True,
    )
    fitter_id = models.PositiveIntegerField(null=True, blank=True, db_index=True)
    factory_id = models.PositiveIntegerField(null=True, blank=True, db_index=True)
    saddle_specifications = models.JSONField(default=dict, blank=True)
    special_instructions = models.TextField(null=True, blank=True)
    estimated_delivery_date = models.DateTimeField(null=True, blank=True, db_index=True)
    actual_delivery_date = models.DateTimeField(null=True, blank=True)

    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    deposit_paid = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    balance_owing = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    measurements = models.JSONField(null=True, blank=True)
    seat_sizes = models.JSONField(null=True, blank=True)
    customer_name = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    saddle_id = models.PositiveIntegerField(null=True, blank=True, db_index=True)
    is_urgent = models.BooleanField(default=False, db_index=True)

    # Optimistic lock counter, bumped on every update
    version = models.PositiveIntegerField(default=1)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['fitter_id', 'created_at'], name='orders_fitter_created_idx'),
            models.Index(fields=['saddle_id', 'created_at'], name='orders_saddle_created_idx'),
        ]

    def __str__(self):
        return self.order_number

    @property
    def is_deleted(self) -> bool:
        """Check if order is soft deleted."""
        return self.deleted_at is not None
