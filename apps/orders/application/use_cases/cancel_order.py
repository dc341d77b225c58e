"""
Cancel order use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ..dtos.order_dto import CancelOrderDTO, OrderDTO
from .base import OrderUseCaseMixin

logger = logging.getLogger(__name__)


@dataclass
class CancelOrderUseCase(OrderUseCaseMixin, UseCase[CancelOrderDTO, OrderDTO]):

    def execute(self, input_dto: CancelOrderDTO) -> UseCaseResult[OrderDTO]:
        order = self._get_order(input_dto.order_id)
        order.cancel(input_dto.reason)
        saved_order = self.order_repository.save(order)
        logger.info(f"Order #{saved_order.id} cancelled: {input_dto.reason.strip()}")
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order))
