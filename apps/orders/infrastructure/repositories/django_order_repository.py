"""
Django ORM implementation of OrderRepository.
"""
import logging
from typing import Dict, List, Optional, Tuple

from django.db import DatabaseError, IntegrityError, connection, transaction
from django.db.models import Avg, BooleanField, Count, DecimalField, F, Q, QuerySet, Sum, Value
from django.db.models.expressions import RawSQL
from django.db.models.functions import Coalesce
from django.utils import timezone

from ...application.dtos.order_search_dto import OrderSearchCriteria
from ...domain.entities.order import Order
from ...domain.exceptions import (
    ConcurrentOrderModificationError,
    DuplicateOrderNumberError,
    OrderNotFoundError,
    OrderSearchError,
)
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.order_number import OrderNumber
from ...domain.value_objects.order_status import OrderStatus
from ..models.order_model import OrderModel

logger = logging.getLogger(__name__)

FINAL_STATUSES = [
    OrderStatus.DELIVERED.value,
    OrderStatus.CANCELLED.value,
    OrderStatus.RETURNED.value,
]
PRODUCTION_STATUSES = [
    OrderStatus.CONFIRMED.value,
    OrderStatus.IN_PRODUCTION.value,
    OrderStatus.QUALITY_CONTROL.value,
]


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def _live(self) -> QuerySet:
        return OrderModel.objects.filter(deleted_at__isnull=True)

    def save(self, order: Order) -> Order:
        """Save an order entity."""
        fields = self._to_fields(order)
        try:
            with transaction.atomic():
                if order.is_new:
                    model = OrderModel.objects.create(
                        created_at=order.created_at,
                        version=1,
                        **fields,
                    )
                else:
                    updated = (
                        self._live()
                        .filter(id=order.id, version=order.version)
                        .update(version=F('version') + 1, **fields)
                    )
                    if not updated:
                        if self._live().filter(id=order.id).exists():
                            raise ConcurrentOrderModificationError(order.id, order.version)
                        raise OrderNotFoundError(order.id)
                    model = OrderModel.objects.get(id=order.id)
        except IntegrityError as e:
            if OrderModel.objects.filter(order_number=order.order_number.value).exclude(id=order.id).exists():
                raise DuplicateOrderNumberError(order.order_number.value) from e
            logger.error(f"Failed to save order {order.order_number}: {e}", exc_info=True)
            raise

        logger.debug(f"Saved order #{model.id} ({model.order_number}) at version {model.version}")
        return self._to_entity(model)

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """Find an order by ID."""
        try:
            model = self._live().get(id=order_id)
            return self._to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        """Find an order by order number."""
        try:
            model = self._live().get(order_number=order_number)
            return self._to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def exists_by_order_number(self, order_number: str) -> bool:
        # Soft-deleted rows still hold the unique constraint
        return OrderModel.objects.filter(order_number=order_number).exists()

    def find_all(
        self,
        customer_id: Optional[int] = None,
        fitter_id: Optional[int] = None,
        factory_id: Optional[int] = None,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        """Find all orders with optional filters."""
        queryset = self._filter(customer_id, fitter_id, factory_id, status)
        models = queryset.order_by('-created_at', '-id')[offset:offset + limit]
        return [self._to_entity(model) for model in models]

    def count(
        self,
        customer_id: Optional[int] = None,
        fitter_id: Optional[int] = None,
        factory_id: Optional[int] = None,
        status: Optional[OrderStatus] = None,
    ) -> int:
        """Count orders."""
        return self._filter(customer_id, fitter_id, factory_id, status).count()

    def delete(self, order_id: int) -> bool:
        """Delete an order (soft delete)."""
        deleted = self._live().filter(id=order_id).update(
            deleted_at=timezone.now(),
            version=F('version') + 1,
        )
        if deleted:
            logger.info(f"Order #{order_id} soft deleted")
        return deleted > 0

    def find_overdue(self) -> List[Order]:
        models = (
            self._live()
            .filter(estimated_delivery_date__lt=timezone.now())
            .exclude(status__in=FINAL_STATUSES)
            .order_by('estimated_delivery_date')
        )
        return [self._to_entity(model) for model in models]

    def find_for_production(self, limit: Optional[int] = None) -> List[Order]:
        queryset = (
            self._live()
            .filter(status__in=PRODUCTION_STATUSES)
            .order_by('-is_urgent', 'created_at')
        )
        if limit:
            queryset = queryset[:limit]
        return [self._to_entity(model) for model in queryset]

    def find_requiring_deposit(self) -> List[Order]:
        models = (
            self._live()
            .filter(balance_owing__gt=0)
            .exclude(status__in=FINAL_STATUSES)
            .order_by('-balance_owing')
        )
        return [self._to_entity(model) for model in models]

    def find_urgent(self) -> List[Order]:
        models = self._live().filter(is_urgent=True).order_by('-created_at', '-id')
        return [self._to_entity(model) for model in models]

    def find_in_production(self) -> List[Order]:
        models = (
            self._live()
            .filter(status=OrderStatus.IN_PRODUCTION.value)
            .order_by('-created_at', '-id')
        )
        return [self._to_entity(model) for model in models]

    def get_order_stats(self) -> Dict:
        """Counts, average value and per-status totals over all live orders."""
        queryset = self._live()
        overdue_orders = (
            queryset.filter(estimated_delivery_date__lt=timezone.now())
            .exclude(status__in=FINAL_STATUSES)
            .count()
        )
        average = queryset.aggregate(average=Avg('total_amount'))['average']
        status_rows = queryset.order_by().values('status').annotate(count=Count('id'))

        return {
            'total_orders': queryset.count(),
            'urgent_orders': queryset.filter(is_urgent=True).count(),
            'overdue_orders': overdue_orders,
            'average_value': float(average) if average is not None else 0.0,
            'status_counts': {row['status']: row['count'] for row in status_rows},
        }

    def get_customer_summary(self, customer_id: int) -> Dict:
        summary = self._live().filter(customer_id=customer_id).aggregate(
            order_count=Count('id'),
            total_value=Coalesce(
                Sum('total_amount'),
                Value(0),
                output_field=DecimalField(max_digits=14, decimal_places=2),
            ),
        )
        return {
            'customer_id': customer_id,
            'order_count': summary['order_count'],
            'total_value': summary['total_value'],
        }

    # Search

    def search(self, criteria: OrderSearchCriteria) -> Tuple[List[Order], int]:
        """Search orders by the given criteria."""
        try:
            queryset = self._build_search_queryset(criteria)
            total = queryset.count()
            start = criteria.offset
            models = queryset.order_by(criteria.ordering, '-id')[start:start + criteria.limit]
            return [self._to_entity(model) for model in models], total
        except DatabaseError as e:
            raise OrderSearchError(str(e)) from e

    def get_suggestions(self, field: str, query: str, limit: int = 10) -> List[str]:
        """Distinct values of a text column containing the query."""
        try:
            values = (
                self._live()
                .filter(**{f"{field}__icontains": query})
                .exclude(**{f"{field}__isnull": True})
                .order_by(field)
                .values_list(field, flat=True)
                .distinct()[:limit]
            )
            return [value for value in values if value]
        except DatabaseError as e:
            raise OrderSearchError(str(e)) from e

    def get_search_stats(self, criteria: OrderSearchCriteria) -> Dict:
        """Count, urgency, status breakdown and average value of matching orders."""
        try:
            queryset = self._build_search_queryset(criteria)
            total_matching = queryset.count()
            urgent_count = queryset.filter(is_urgent=True).count()
            status_rows = (
                queryset.order_by()
                .values('status')
                .annotate(count=Count('id'))
            )
            status_breakdown = {row['status']: row['count'] for row in status_rows}
            average = queryset.aggregate(average=Avg('total_amount'))['average']
        except DatabaseError as e:
            raise OrderSearchError(str(e)) from e

        return {
            'total_matching': total_matching,
            'urgent_count': urgent_count,
            'status_breakdown': status_breakdown,
            'average_value': float(average) if average is not None else 0.0,
        }

    def _build_search_queryset(self, criteria: OrderSearchCriteria) -> QuerySet:
        """Translate the criteria into AND-ed filters over live orders."""
        queryset = self._live()

        if criteria.customer:
            queryset = queryset.filter(customer_name__icontains=criteria.customer)
        if criteria.order_id is not None:
            queryset = queryset.filter(id=criteria.order_id)
        if criteria.order_number:
            queryset = queryset.filter(order_number=criteria.order_number)
        if criteria.seat_size_id:
            queryset = queryset.filter(self._seat_size_condition(criteria.seat_size_id))
        if criteria.is_urgent is not None:
            queryset = queryset.filter(is_urgent=criteria.is_urgent)
        if criteria.saddle_id is not None:
            queryset = queryset.filter(saddle_id=criteria.saddle_id)
        if criteria.fitter_id is not None:
            queryset = queryset.filter(fitter_id=criteria.fitter_id)
        if criteria.factory_id is not None:
            queryset = queryset.filter(factory_id=criteria.factory_id)
        if criteria.customer_id is not None:
            queryset = queryset.filter(customer_id=criteria.customer_id)
        if criteria.status:
            queryset = queryset.filter(status=criteria.status)
        if criteria.priority:
            queryset = queryset.filter(priority=criteria.priority)
        if criteria.date_from:
            queryset = queryset.filter(created_at__gte=criteria.date_from)
        if criteria.date_to:
            queryset = queryset.filter(created_at__lte=criteria.date_to)

        return queryset

    @staticmethod
    def _seat_size_condition(seat_size_id: str):
        """Match orders whose seat_sizes list holds exactly the given id."""
        if connection.vendor == 'sqlite':
            # No JSON containment lookup; compare each array element
            table = connection.ops.quote_name(OrderModel._meta.db_table)
            return RawSQL(
                f"EXISTS (SELECT 1 FROM json_each({table}.seat_sizes) WHERE json_each.value = %s)",
                [seat_size_id],
                output_field=BooleanField(),
            )
        return Q(seat_sizes__contains=[seat_size_id])

    def _filter(
        self,
        customer_id: Optional[int],
        fitter_id: Optional[int],
        factory_id: Optional[int],
        status: Optional[OrderStatus],
    ) -> QuerySet:
        queryset = self._live()
        if customer_id is not None:
            queryset = queryset.filter(customer_id=customer_id)
        if fitter_id is not None:
            queryset = queryset.filter(fitter_id=fitter_id)
        if factory_id is not None:
            queryset = queryset.filter(factory_id=factory_id)
        if status is not None:
            queryset = queryset.filter(status=OrderStatus.from_string(status).value)
        return queryset

    @staticmethod
    def _to_fields(order: Order) -> Dict:
        return {
            'customer_id': order.customer_id,
            'order_number': order.order_number.value,
            'status': order.status.value,
            'priority': order.priority.value,
            'fitter_id': order.fitter_id,
            'factory_id': order.factory_id,
            'saddle_specifications': order.saddle_specifications or {},
            'special_instructions': order.special_instructions,
            'estimated_delivery_date': order.estimated_delivery_date,
            'actual_delivery_date': order.actual_delivery_date,
            'total_amount': order.total_amount,
            'deposit_paid': order.deposit_paid,
            'balance_owing': order.balance_owing,
            'measurements': order.measurements,
            'seat_sizes': order.seat_sizes or None,
            'customer_name': order.customer_name,
            'saddle_id': order.saddle_id,
            'is_urgent': order.is_urgent,
            'updated_at': order.updated_at,
        }

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        return Order(
            id=model.id,
            customer_id=model.customer_id,
            order_number=OrderNumber(value=model.order_number),
            status=model.status,
            priority=model.priority,
            fitter_id=model.fitter_id,
            factory_id=model.factory_id,
            saddle_specifications=model.saddle_specifications or {},
            special_instructions=model.special_instructions,
            estimated_delivery_date=model.estimated_delivery_date,
            actual_delivery_date=model.actual_delivery_date,
            total_amount=model.total_amount,
            deposit_paid=model.deposit_paid,
            balance_owing=model.balance_owing,
            measurements=model.measurements,
            is_urgent=model.is_urgent,
            seat_sizes=model.seat_sizes or None,
            customer_name=model.customer_name,
            saddle_id=model.saddle_id,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
