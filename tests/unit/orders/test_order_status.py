"""
Tests for the order status state machine.
"""
import pytest

from apps.orders.domain.exceptions import InvalidOrderStatusError
from apps.orders.domain.value_objects.order_status import OrderStatus

S = OrderStatus

ALLOWED = {
    S.PENDING: {S.CONFIRMED, S.CANCELLED},
    S.CONFIRMED: {S.IN_PRODUCTION, S.CANCELLED},
    S.IN_PRODUCTION: {S.QUALITY_CONTROL, S.CANCELLED},
    S.QUALITY_CONTROL: {S.READY_FOR_SHIPPING, S.IN_PRODUCTION, S.CANCELLED},
    S.READY_FOR_SHIPPING: {S.SHIPPED, S.CANCELLED},
    S.SHIPPED: {S.SHIPPED_TO_CUSTOMER, S.DELIVERED, S.RETURNED},
    S.SHIPPED_TO_CUSTOMER: {S.DELIVERED, S.RETURNED},
    S.DELIVERED: {S.RETURNED},
    S.CANCELLED: set(),
    S.RETURNED: set(),
}


class TestTransitions:

    @pytest.mark.parametrize('source', list(OrderStatus))
    def test_transition_table_is_exhaustive(self, source):
        for target in OrderStatus:
            assert source.can_transition_to(target) == (target in ALLOWED[source])

    @pytest.mark.parametrize('status', list(OrderStatus))
    def test_no_self_loops(self, status):
        assert not status.can_transition_to(status)

    def test_possible_transitions_follow_declaration_order(self):
        assert S.QUALITY_CONTROL.possible_transitions() == [
            S.IN_PRODUCTION,
            S.READY_FOR_SHIPPING,
            S.CANCELLED,
        ]

    def test_terminal_statuses_have_no_transitions(self):
        assert S.CANCELLED.possible_transitions() == []
        assert S.RETURNED.possible_transitions() == []


class TestStatusPredicates:

    def test_final_statuses(self):
        finals = {status for status in OrderStatus if status.is_final()}
        assert finals == {S.DELIVERED, S.CANCELLED, S.RETURNED}

    def test_in_production_statuses(self):
        producing = {status for status in OrderStatus if status.is_in_production()}
        assert producing == {S.IN_PRODUCTION, S.QUALITY_CONTROL}

    @pytest.mark.parametrize('status', list(OrderStatus))
    def test_can_be_cancelled_unless_final_or_shipped(self, status):
        expected = not status.is_final() and status is not S.SHIPPED
        assert status.can_be_cancelled() == expected

    def test_shipped_is_not_final_but_not_cancellable(self):
        assert not S.SHIPPED.is_final()
        assert not S.SHIPPED.can_be_cancelled()

    def test_display_name(self):
        assert S.READY_FOR_SHIPPING.display_name == 'Ready For Shipping'
        assert S.PENDING.display_name == 'Pending'


class TestFromString:

    @pytest.mark.parametrize('raw', ['in_production', 'IN_PRODUCTION', 'In_Production'])
    def test_is_case_insensitive(self, raw):
        assert OrderStatus.from_string(raw) is S.IN_PRODUCTION

    def test_passes_members_through(self):
        assert OrderStatus.from_string(S.SHIPPED) is S.SHIPPED

    @pytest.mark.parametrize('raw', ['archived', '', None, 'in production'])
    def test_rejects_unknown_values(self, raw):
        with pytest.raises(InvalidOrderStatusError) as exc_info:
            OrderStatus.from_string(raw)
        assert exc_info.value.code == 'INVALID_ENUM_VALUE'
        assert 'pending' in exc_info.value.valid_values

    def test_equal_to_its_string_value(self):
        assert S.PENDING == 'pending'
        assert str(S.PENDING) == 'pending'
