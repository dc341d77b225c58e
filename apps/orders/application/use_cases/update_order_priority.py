"""
Update order priority use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.value_objects.order_priority import OrderPriority
from ..dtos.order_dto import OrderDTO, UpdateOrderPriorityDTO
from .base import OrderUseCaseMixin

logger = logging.getLogger(__name__)


@dataclass
class UpdateOrderPriorityUseCase(OrderUseCaseMixin, UseCase[UpdateOrderPriorityDTO, OrderDTO]):

    def execute(self, input_dto: UpdateOrderPriorityDTO) -> UseCaseResult[OrderDTO]:
        new_priority = OrderPriority.from_string(input_dto.priority)
        order = self._get_order(input_dto.order_id)
        order.update_priority(new_priority)
        saved_order = self.order_repository.save(order)
        logger.info(f"Order #{saved_order.id} priority set to {new_priority}")
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order))
