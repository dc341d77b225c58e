"""
Tests for search criteria normalisation and the result envelope.
"""
import pytest

from apps.orders.application.dtos.order_search_dto import (
    MAX_PAGE_SIZE,
    OrderSearchCriteria,
    OrderSearchResult,
)
from apps.orders.domain.exceptions import InvalidOrderStatusError
from shared.domain import ValidationError


class TestPaging:

    def test_defaults(self):
        criteria = OrderSearchCriteria()
        assert criteria.page == 1
        assert criteria.limit == 20
        assert criteria.offset == 0
        assert criteria.ordering == '-created_at'

    def test_limit_is_clamped(self):
        criteria = OrderSearchCriteria(limit=200)
        assert criteria.limit == MAX_PAGE_SIZE == 100

    def test_offset(self):
        assert OrderSearchCriteria(page=3, limit=10).offset == 20

    @pytest.mark.parametrize('field, value', [('page', 0), ('limit', 0), ('limit', -1)])
    def test_rejects_non_positive_paging(self, field, value):
        with pytest.raises(ValidationError) as exc_info:
            OrderSearchCriteria(**{field: value})
        assert exc_info.value.field == field


class TestSorting:

    @pytest.mark.parametrize('sort_by, expected', [
        ('totalAmount', 'total_amount'),
        ('customer_name', 'customer_name'),
        ('estimatedDeliveryDate', 'estimated_delivery_date'),
    ])
    def test_whitelisted_fields_and_aliases(self, sort_by, expected):
        criteria = OrderSearchCriteria(sort_by=sort_by, sort_order='ASC')
        assert criteria.sort_by == expected
        assert criteria.ordering == expected

    @pytest.mark.parametrize('sort_by', ['deleted_at', 'id; DROP TABLE orders', '-created_at'])
    def test_rejects_unknown_sort_field(self, sort_by):
        with pytest.raises(ValidationError) as exc_info:
            OrderSearchCriteria(sort_by=sort_by)
        assert exc_info.value.field == 'sort_by'

    def test_rejects_unknown_direction(self):
        with pytest.raises(ValidationError):
            OrderSearchCriteria(sort_order='sideways')


class TestFilters:

    def test_status_and_priority_are_normalised(self):
        criteria = OrderSearchCriteria(status='IN_PRODUCTION', priority='Urgent')
        assert criteria.status == 'in_production'
        assert criteria.priority == 'urgent'

    def test_unknown_status_is_rejected(self):
        with pytest.raises(InvalidOrderStatusError):
            OrderSearchCriteria(status='lost')

    def test_has_search_criteria(self):
        assert not OrderSearchCriteria().has_search_criteria()
        assert OrderSearchCriteria(is_urgent=False).has_search_criteria()
        assert OrderSearchCriteria(customer='smith').has_search_criteria()

    def test_summary_lists_only_present_filters(self):
        summary = OrderSearchCriteria(customer='smith', fitter_id=4, page=2).summary()
        assert summary == {'customer': 'smith', 'fitter_id': 4, 'page': 2, 'limit': 20}


class TestResultEnvelope:

    def test_middle_page(self):
        result = OrderSearchResult(items=[], total=45, page=2, limit=20)
        assert result.total_pages == 3
        assert result.has_next
        assert result.has_prev

    def test_last_page(self):
        result = OrderSearchResult(items=[], total=40, page=2, limit=20)
        assert not result.has_next

    def test_empty_result(self):
        result = OrderSearchResult(items=[], total=0, page=1, limit=20)
        assert result.total_pages == 0
        assert not result.has_next
        assert not result.has_prev
