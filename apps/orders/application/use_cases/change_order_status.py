"""
Change order status use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.value_objects.order_status import OrderStatus
from ..dtos.order_dto import ChangeOrderStatusDTO, OrderDTO
from .base import OrderUseCaseMixin

logger = logging.getLogger(__name__)


@dataclass
class ChangeOrderStatusUseCase(OrderUseCaseMixin, UseCase[ChangeOrderStatusDTO, OrderDTO]):
    """Use case for moving an order through the workflow."""

    def execute(self, input_dto: ChangeOrderStatusDTO) -> UseCaseResult[OrderDTO]:
        new_status = OrderStatus.from_string(input_dto.status)
        order = self._get_order(input_dto.order_id)
        old_status = order.status

        order.change_status(new_status)

        warnings = []
        if new_status is OrderStatus.IN_PRODUCTION and order.requires_deposit():
            warnings.append(
                f"Order {order.order_number} entered production with "
                f"{order.get_payment_percentage():.0f}% of the total paid"
            )

        saved_order = self.order_repository.save(order)
        logger.info(f"Order #{saved_order.id} status changed: {old_status} -> {new_status}")
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order), warnings=warnings)
