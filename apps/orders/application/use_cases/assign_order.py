"""
Assign order use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.domain import ValidationError
from ..dtos.order_dto import AssignOrderDTO, OrderDTO
from .base import OrderUseCaseMixin


@dataclass
class AssignOrderUseCase(OrderUseCaseMixin, UseCase[AssignOrderDTO, OrderDTO]):
    """Use case for assigning a fitter and/or a factory to an order."""

    def execute(self, input_dto: AssignOrderDTO) -> UseCaseResult[OrderDTO]:
        if input_dto.fitter_id is None and input_dto.factory_id is None:
            raise ValidationError("Provide a fitter_id or a factory_id", field="fitter_id")

        order = self._get_order(input_dto.order_id)
        if input_dto.fitter_id is not None:
            order.assign_fitter(input_dto.fitter_id)
        if input_dto.factory_id is not None:
            order.assign_factory(input_dto.factory_id)

        saved_order = self.order_repository.save(order)
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order))
