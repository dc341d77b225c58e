"""
Integration tests for order search, suggestions and statistics.
"""
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest import mock

import pytest
from django.db import DatabaseError
from django.db.models.query import ValuesIterable

from apps.orders.application.dtos import OrderSearchCriteria
from apps.orders.application.services import OrderSearchService
from apps.orders.domain.exceptions import OrderSearchError
from apps.orders.domain.value_objects.order_priority import OrderPriority
from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.orders.infrastructure.repositories import DjangoOrderRepository
from shared.domain import ValidationError

pytestmark = pytest.mark.django_db


@pytest.fixture
def search_service(order_repository):
    return OrderSearchService(order_repository)


@pytest.fixture
def catalogue(saved_order):
    """A small spread of orders across customers, statuses and sizes."""
    base = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
    return {
        'smith': saved_order(
            customer_id=1, customer_name='Anna Smith', order_number='ORD-A1',
            seat_sizes=['17', '17.5'], fitter_id=10, saddle_id=100,
            total_amount=Decimal('1000'), created_at=base,
        ),
        'smithers': saved_order(
            customer_id=2, customer_name='Bob Smithers', order_number='ORD-B2',
            seat_sizes=['18'], priority=OrderPriority.URGENT, status=OrderStatus.CONFIRMED,
            total_amount=Decimal('3000'), created_at=base + timedelta(days=1),
        ),
        'jones': saved_order(
            customer_id=3, customer_name='Cara Jones', order_number='ORD-C3',
            seat_sizes=['17.5'], fitter_id=10, factory_id=4, status=OrderStatus.CONFIRMED,
            total_amount=Decimal('2000'), created_at=base + timedelta(days=2),
        ),
    }


def _ids(result):
    return [item.id for item in result.items]


class TestSearch:

    def test_no_filters_returns_everything_newest_first(self, search_service, catalogue):
        result = search_service.search(OrderSearchCriteria())

        assert result.total == 3
        assert _ids(result) == [catalogue['jones'].id, catalogue['smithers'].id, catalogue['smith'].id]

    def test_customer_name_is_case_insensitive_substring(self, search_service, catalogue):
        result = search_service.search(OrderSearchCriteria(customer='SMITH'))
        assert set(_ids(result)) == {catalogue['smith'].id, catalogue['smithers'].id}

    def test_seat_size_matches_whole_elements(self, search_service, catalogue):
        result = search_service.search(OrderSearchCriteria(seat_size_id='17'))
        assert _ids(result) == [catalogue['smith'].id]

        result = search_service.search(OrderSearchCriteria(seat_size_id='17.5'))
        assert set(_ids(result)) == {catalogue['smith'].id, catalogue['jones'].id}

    def test_seat_size_match_is_case_sensitive(self, search_service, saved_order):
        order = saved_order(seat_sizes=['17M', '18'])

        assert search_service.search(OrderSearchCriteria(seat_size_id='17m')).total == 0
        assert _ids(search_service.search(OrderSearchCriteria(seat_size_id='17M'))) == [order.id]
        assert search_service.search(OrderSearchCriteria(seat_size_id='17')).total == 0

    def test_filters_are_combined(self, search_service, catalogue):
        criteria = OrderSearchCriteria(fitter_id=10, status='confirmed')
        assert _ids(search_service.search(criteria)) == [catalogue['jones'].id]

    @pytest.mark.parametrize('criteria_kwargs, key', [
        ({'order_number': 'ORD-B2'}, 'smithers'),
        ({'is_urgent': True}, 'smithers'),
        ({'saddle_id': 100}, 'smith'),
        ({'factory_id': 4}, 'jones'),
        ({'customer_id': 3}, 'jones'),
        ({'priority': 'urgent'}, 'smithers'),
    ])
    def test_exact_filters(self, search_service, catalogue, criteria_kwargs, key):
        result = search_service.search(OrderSearchCriteria(**criteria_kwargs))
        assert _ids(result) == [catalogue[key].id]

    def test_order_id_filter(self, search_service, catalogue):
        order_id = catalogue['smith'].id
        assert _ids(search_service.search(OrderSearchCriteria(order_id=order_id))) == [order_id]

    def test_date_bounds_are_inclusive(self, search_service, catalogue):
        criteria = OrderSearchCriteria(
            date_from=catalogue['smithers'].created_at,
            date_to=catalogue['jones'].created_at,
        )
        assert set(_ids(search_service.search(criteria))) == {catalogue['smithers'].id, catalogue['jones'].id}

    def test_sorting(self, search_service, catalogue):
        result = search_service.search(OrderSearchCriteria(sort_by='totalAmount', sort_order='asc'))
        assert _ids(result) == [catalogue['smith'].id, catalogue['jones'].id, catalogue['smithers'].id]

    def test_paging(self, search_service, catalogue):
        result = search_service.search(OrderSearchCriteria(page=2, limit=2, sort_by='created_at', sort_order='asc'))

        assert result.total == 3
        assert _ids(result) == [catalogue['jones'].id]
        assert result.has_prev
        assert not result.has_next

    def test_soft_deleted_orders_are_excluded(self, search_service, order_repository, catalogue):
        order_repository.delete(catalogue['smith'].id)
        result = search_service.search(OrderSearchCriteria(customer='smith'))
        assert _ids(result) == [catalogue['smithers'].id]

    def test_storage_failure_becomes_search_error(self, search_service, caplog):
        with mock.patch.object(
            DjangoOrderRepository,
            '_build_search_queryset',
            side_effect=DatabaseError('connection reset'),
        ):
            with caplog.at_level(logging.ERROR, logger='apps.orders'):
                with pytest.raises(OrderSearchError) as exc_info:
                    search_service.search(OrderSearchCriteria(customer='smith'))

        assert exc_info.value.code == 'SEARCH_FAILED'
        assert 'connection reset' in exc_info.value.message
        assert any('Order search failed' in record.message for record in caplog.records)

    def test_slow_search_is_logged(self, search_service, catalogue, settings, caplog):
        settings.ORDER_SEARCH_SLOW_QUERY_MS = -1

        with caplog.at_level(logging.WARNING, logger='apps.orders'):
            search_service.search(OrderSearchCriteria(customer='jones'))

        assert any('Slow order search' in record.message for record in caplog.records)


class TestSuggestions:

    def test_customer_suggestions(self, search_service, catalogue):
        suggestions = search_service.get_suggestions('customer', 'smi')
        assert suggestions == ['Anna Smith', 'Bob Smithers']

    def test_order_number_suggestions_respect_limit(self, search_service, catalogue):
        assert search_service.get_suggestions('order_number', 'ord-', limit=2) == ['ORD-A1', 'ORD-B2']

    def test_suggestions_are_distinct(self, search_service, saved_order):
        saved_order(customer_name='Dana Reed')
        saved_order(customer_name='Dana Reed')
        assert search_service.get_suggestions('customer', 'reed') == ['Dana Reed']

    def test_short_queries_skip_storage(self, search_service, django_assert_num_queries):
        with django_assert_num_queries(0):
            assert search_service.get_suggestions('customer', 's') == []
            assert search_service.get_suggestions('customer', '') == []

    def test_unknown_field(self, search_service):
        with pytest.raises(ValidationError):
            search_service.get_suggestions('email', 'smith')


class TestStats:

    def test_stats_over_filtered_set(self, search_service, catalogue):
        stats = search_service.get_stats(OrderSearchCriteria(seat_size_id='17.5'))

        assert stats.total_matching == 2
        assert stats.urgent_count == 0
        assert stats.status_breakdown == {'pending': 1, 'confirmed': 1}
        assert stats.average_value == pytest.approx(1500.0)

    def test_stats_over_everything(self, search_service, catalogue):
        stats = search_service.get_stats(OrderSearchCriteria())

        assert stats.total_matching == 3
        assert stats.urgent_count == 1
        assert stats.average_value == pytest.approx(2000.0)

    def test_stats_storage_failure_becomes_search_error(self, search_service, catalogue):
        with mock.patch.object(ValuesIterable, '__iter__', side_effect=DatabaseError('disk gone')):
            with pytest.raises(OrderSearchError) as exc_info:
                search_service.get_stats(OrderSearchCriteria())

        assert exc_info.value.code == 'SEARCH_FAILED'
        assert 'disk gone' in exc_info.value.message

    def test_stats_of_empty_set(self, search_service):
        stats = search_service.get_stats(OrderSearchCriteria(customer='nobody'))

        assert stats.total_matching == 0
        assert stats.status_breakdown == {}
        assert stats.average_value == 0.0
