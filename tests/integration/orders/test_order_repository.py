"""
Integration tests for the Django order repository.
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from apps.orders.domain.exceptions import (
    ConcurrentOrderModificationError,
    DuplicateOrderNumberError,
    OrderNotFoundError,
)
from apps.orders.domain.value_objects.order_priority import OrderPriority
from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.orders.infrastructure.models import OrderModel

pytestmark = pytest.mark.django_db


def _now():
    return datetime.now(timezone.utc)


class TestSave:

    def test_insert_assigns_id_and_version(self, order_repository, make_order):
        order = make_order(customer_name='Ann Hunter', seat_sizes=['17'], saddle_id=9)

        saved = order_repository.save(order)

        assert saved.id > 0
        assert saved.version == 1
        assert saved.customer_name == 'Ann Hunter'
        assert saved.seat_sizes == ['17']
        assert saved.balance_owing == Decimal('1000.00')

    def test_update_bumps_version(self, order_repository, saved_order):
        order = saved_order()
        order.record_deposit_payment(Decimal('250'))

        updated = order_repository.save(order)

        assert updated.version == 2
        assert updated.deposit_paid == Decimal('250.00')
        assert updated.balance_owing == Decimal('750.00')
        stored = OrderModel.objects.get(id=order.id)
        assert stored.version == 2

    def test_stale_copy_is_rejected(self, order_repository, saved_order):
        order = saved_order()
        first = order_repository.find_by_id(order.id)
        second = order_repository.find_by_id(order.id)

        first.record_deposit_payment(Decimal('600'))
        order_repository.save(first)

        second.record_deposit_payment(Decimal('600'))
        with pytest.raises(ConcurrentOrderModificationError):
            order_repository.save(second)

        assert order_repository.find_by_id(order.id).deposit_paid == Decimal('600.00')

    def test_duplicate_order_number(self, order_repository, make_order):
        order_repository.save(make_order(order_number='ORD-DUP'))

        with pytest.raises(DuplicateOrderNumberError):
            order_repository.save(make_order(order_number='ORD-DUP'))

    def test_saving_a_deleted_order_fails(self, order_repository, saved_order):
        order = saved_order()
        order_repository.delete(order.id)

        order.assign_fitter(3)
        with pytest.raises(OrderNotFoundError):
            order_repository.save(order)

    def test_round_trip_preserves_enums(self, order_repository, make_order):
        saved = order_repository.save(make_order(priority=OrderPriority.CRITICAL, status='confirmed'))
        loaded = order_repository.find_by_order_number(saved.order_number.value)

        assert loaded.status is OrderStatus.CONFIRMED
        assert loaded.priority is OrderPriority.CRITICAL
        assert loaded.is_urgent is True


class TestQueries:

    def test_find_all_filters_and_count(self, order_repository, saved_order):
        saved_order(customer_id=1, fitter_id=5)
        saved_order(customer_id=1)
        saved_order(customer_id=2, fitter_id=5)

        assert order_repository.count(customer_id=1) == 2
        assert order_repository.count(fitter_id=5) == 2
        assert len(order_repository.find_all(customer_id=1, fitter_id=5)) == 1
        assert len(order_repository.find_all(limit=2)) == 2

    def test_find_all_by_status(self, order_repository, saved_order):
        saved_order(status=OrderStatus.SHIPPED)
        saved_order()

        shipped = order_repository.find_all(status='SHIPPED')
        assert [order.status for order in shipped] == [OrderStatus.SHIPPED]

    def test_soft_delete(self, order_repository, saved_order):
        order = saved_order()

        assert order_repository.delete(order.id) is True
        assert order_repository.find_by_id(order.id) is None
        assert order_repository.count() == 0
        assert order_repository.delete(order.id) is False
        # The number stays reserved
        assert order_repository.exists_by_order_number(order.order_number.value)
        assert OrderModel.objects.get(id=order.id).is_deleted

    def test_find_overdue(self, order_repository, saved_order):
        late = saved_order(estimated_delivery_date=_now() - timedelta(days=2))
        later = saved_order(estimated_delivery_date=_now() - timedelta(days=5))
        saved_order(estimated_delivery_date=_now() + timedelta(days=5))
        saved_order(
            estimated_delivery_date=_now() - timedelta(days=3),
            status=OrderStatus.DELIVERED,
        )

        overdue = order_repository.find_overdue()

        assert [order.id for order in overdue] == [later.id, late.id]

    def test_production_queue_puts_urgent_first(self, order_repository, saved_order):
        base = _now() - timedelta(days=10)
        oldest = saved_order(status=OrderStatus.CONFIRMED, created_at=base)
        newer = saved_order(status=OrderStatus.QUALITY_CONTROL, created_at=base + timedelta(days=1))
        urgent = saved_order(
            status=OrderStatus.IN_PRODUCTION,
            priority=OrderPriority.URGENT,
            created_at=base + timedelta(days=2),
        )
        saved_order(status=OrderStatus.PENDING, created_at=base - timedelta(days=1))
        saved_order(status=OrderStatus.SHIPPED, priority=OrderPriority.CRITICAL)

        queue = order_repository.find_for_production()

        assert [order.id for order in queue] == [urgent.id, oldest.id, newer.id]
        assert len(order_repository.find_for_production(limit=1)) == 1

    def test_requiring_deposit(self, order_repository, saved_order):
        small = saved_order(total_amount=Decimal('500'))
        large = saved_order(total_amount=Decimal('2000'))
        saved_order(total_amount=Decimal('300'), deposit_paid=Decimal('300'))
        saved_order(total_amount=Decimal('900'), status=OrderStatus.CANCELLED)

        pending = order_repository.find_requiring_deposit()

        assert [order.id for order in pending] == [large.id, small.id]


class TestReporting:

    def test_find_urgent_newest_first(self, order_repository, saved_order):
        base = _now() - timedelta(days=3)
        older = saved_order(priority=OrderPriority.URGENT, created_at=base)
        newer = saved_order(priority=OrderPriority.CRITICAL, created_at=base + timedelta(days=1))
        saved_order(priority=OrderPriority.HIGH)
        deleted = saved_order(priority=OrderPriority.URGENT)
        order_repository.delete(deleted.id)

        assert [order.id for order in order_repository.find_urgent()] == [newer.id, older.id]

    def test_find_in_production(self, order_repository, saved_order):
        building = saved_order(status=OrderStatus.IN_PRODUCTION)
        saved_order(status=OrderStatus.CONFIRMED)
        saved_order(status=OrderStatus.QUALITY_CONTROL)

        assert [order.id for order in order_repository.find_in_production()] == [building.id]

    def test_order_stats(self, order_repository, saved_order):
        saved_order(total_amount=Decimal('1000'), priority=OrderPriority.URGENT)
        saved_order(
            total_amount=Decimal('2000'),
            status=OrderStatus.CONFIRMED,
            estimated_delivery_date=_now() - timedelta(days=1),
        )
        saved_order(
            total_amount=Decimal('3000'),
            status=OrderStatus.DELIVERED,
            estimated_delivery_date=_now() - timedelta(days=1),
        )
        deleted = saved_order(total_amount=Decimal('9000'))
        order_repository.delete(deleted.id)

        stats = order_repository.get_order_stats()

        assert stats['total_orders'] == 3
        assert stats['urgent_orders'] == 1
        assert stats['overdue_orders'] == 1
        assert stats['average_value'] == pytest.approx(2000.0)
        assert stats['status_counts'] == {'pending': 1, 'confirmed': 1, 'delivered': 1}

    def test_order_stats_without_orders(self, order_repository):
        stats = order_repository.get_order_stats()

        assert stats['total_orders'] == 0
        assert stats['average_value'] == 0.0
        assert stats['status_counts'] == {}

    def test_customer_summary(self, order_repository, saved_order):
        saved_order(customer_id=8, total_amount=Decimal('1000.50'))
        saved_order(customer_id=8, total_amount=Decimal('499.50'))
        saved_order(customer_id=9, total_amount=Decimal('700'))
        deleted = saved_order(customer_id=8, total_amount=Decimal('50'))
        order_repository.delete(deleted.id)

        summary = order_repository.get_customer_summary(8)

        assert summary['order_count'] == 2
        assert summary['total_value'] == Decimal('1500.00')

    def test_customer_summary_without_orders(self, order_repository):
        summary = order_repository.get_customer_summary(404)

        assert summary == {'customer_id': 404, 'order_count': 0, 'total_value': Decimal('0')}
