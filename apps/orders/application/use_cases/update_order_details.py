"""
Update order details use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ..dtos.order_dto import OrderDTO, UpdateOrderDetailsDTO
from .base import OrderUseCaseMixin


@dataclass
class UpdateOrderDetailsUseCase(OrderUseCaseMixin, UseCase[UpdateOrderDetailsDTO, OrderDTO]):
    """Use case for measurements, delivery estimate and search fields."""

    def execute(self, input_dto: UpdateOrderDetailsDTO) -> UseCaseResult[OrderDTO]:
        order = self._get_order(input_dto.order_id)

        if input_dto.measurements is not None:
            order.update_measurements(input_dto.measurements)
        if input_dto.estimated_delivery_date is not None:
            order.update_estimated_delivery_date(input_dto.estimated_delivery_date)
        if input_dto.seat_sizes is not None:
            order.update_seat_sizes(input_dto.seat_sizes)
        if input_dto.customer_name is not None:
            order.update_customer_name(input_dto.customer_name)
        if input_dto.saddle_id is not None:
            order.update_saddle_id(input_dto.saddle_id)

        saved_order = self.order_repository.save(order)
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order))
