"""
Create order use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.entities.order import Order
from ...domain.exceptions import DuplicateOrderNumberError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.order_number import OrderNumber
from ..dtos.order_dto import OrderCreateDTO, OrderDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateOrderUseCase(UseCase[OrderCreateDTO, OrderDTO]):
    """Use case for placing a new saddle order."""

    order_repository: OrderRepository

    def execute(self, input_dto: OrderCreateDTO) -> UseCaseResult[OrderDTO]:
        if input_dto.order_number:
            order_number = OrderNumber(value=input_dto.order_number.strip())
        else:
            order_number = self._generate_order_number()

        if self.order_repository.exists_by_order_number(order_number.value):
            raise DuplicateOrderNumberError(order_number.value)

        order = Order.create(
            customer_id=input_dto.customer_id,
            order_number=order_number,
            saddle_specifications=input_dto.saddle_specifications,
            total_amount=input_dto.total_amount,
            special_instructions=input_dto.special_instructions,
        )

        # Optional fields go through the aggregate so their guards apply
        if input_dto.estimated_delivery_date is not None:
            order.update_estimated_delivery_date(input_dto.estimated_delivery_date)
        if input_dto.priority:
            order.update_priority(input_dto.priority)
        if input_dto.fitter_id is not None:
            order.assign_fitter(input_dto.fitter_id)
        if input_dto.factory_id is not None:
            order.assign_factory(input_dto.factory_id)
        if input_dto.customer_name:
            order.update_customer_name(input_dto.customer_name)
        if input_dto.seat_sizes:
            order.update_seat_sizes(input_dto.seat_sizes)
        if input_dto.saddle_id is not None:
            order.update_saddle_id(input_dto.saddle_id)

        saved_order = self.order_repository.save(order)
        logger.info(
            f"Order {saved_order.order_number} created for customer {saved_order.customer_id} "
            f"(id={saved_order.id}, total={saved_order.total_amount})"
        )
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order))

    def _generate_order_number(self) -> OrderNumber:
        # Random suffixes can collide; retry a few times before giving up
        for _ in range(5):
            candidate = OrderNumber.generate()
            if not self.order_repository.exists_by_order_number(candidate.value):
                return candidate
        return OrderNumber.generate()
