"""
Record deposit payment use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ..dtos.order_dto import OrderDTO, RecordDepositPaymentDTO
from .base import OrderUseCaseMixin

logger = logging.getLogger(__name__)


@dataclass
class RecordDepositPaymentUseCase(OrderUseCaseMixin, UseCase[RecordDepositPaymentDTO, OrderDTO]):
    """Use case for recording a customer deposit.

    The repository's version check rejects the save if another payment was
    committed after this order was loaded.
    """

    def execute(self, input_dto: RecordDepositPaymentDTO) -> UseCaseResult[OrderDTO]:
        order = self._get_order(input_dto.order_id)
        order.record_deposit_payment(input_dto.amount)
        saved_order = self.order_repository.save(order)
        logger.info(
            f"Deposit of {input_dto.amount} recorded on order #{saved_order.id}; "
            f"balance owing {saved_order.balance_owing}"
        )
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order))
