"""
Orders API v1 views.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.application import UseCaseResult
from shared.interfaces.pagination import RepositoryPage, StandardPagination
from ....application.dtos import (
    AssignOrderDTO,
    CancelOrderDTO,
    ChangeOrderStatusDTO,
    OrderCreateDTO,
    OrderDTO,
    RecordDepositPaymentDTO,
    UpdateOrderDetailsDTO,
    UpdateOrderPriorityDTO,
)
from ....application.services import OrderSearchService
from ....application.use_cases import (
    AssignOrderUseCase,
    CancelOrderUseCase,
    ChangeOrderStatusUseCase,
    CreateOrderUseCase,
    RecordDepositPaymentUseCase,
    UpdateOrderDetailsUseCase,
    UpdateOrderPriorityUseCase,
)
from ....domain.exceptions import OrderNotFoundError
from ....infrastructure.repositories import DjangoOrderRepository
from ...serializers import (
    CustomerOrderSummarySerializer,
    DepositPaymentSerializer,
    OrderAssignmentSerializer,
    OrderCancelSerializer,
    OrderCommandResultSerializer,
    OrderCreateSerializer,
    OrderDetailsUpdateSerializer,
    OrderListQuerySerializer,
    OrderPriorityUpdateSerializer,
    OrderSearchQuerySerializer,
    OrderSearchResultSerializer,
    OrderSearchStatsSerializer,
    OrderSerializer,
    OrderStatsSerializer,
    OrderStatusChangeSerializer,
    OrderSuggestionQuerySerializer,
    ProductionQueueQuerySerializer,
)


def _command_response(result: UseCaseResult) -> Response:
    output = OrderCommandResultSerializer({
        'order': result.data,
        'warnings': result.warnings,
    })
    return Response(output.data)


def _order_list_response(orders) -> Response:
    serializer = OrderSerializer([OrderDTO.from_entity(o) for o in orders], many=True)
    return Response(serializer.data)


@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Order list and create endpoint."""
    pagination_class = StandardPagination

    @extend_schema(
        parameters=[
            OpenApiParameter(name='customer_id', type=int, required=False),
            OpenApiParameter(name='fitter_id', type=int, required=False),
            OpenApiParameter(name='factory_id', type=int, required=False),
            OpenApiParameter(name='status', type=str, required=False),
            OpenApiParameter(name='page', type=int, required=False),
            OpenApiParameter(name='page_size', type=int, required=False),
        ],
        responses={200: OrderSerializer(many=True)},
        summary="List orders",
    )
    def get(self, request):
        repository = DjangoOrderRepository()
        filters = self._filters(request)

        rows = RepositoryPage(
            fetch=lambda offset, limit: repository.find_all(offset=offset, limit=limit, **filters),
            count=lambda: repository.count(**filters),
        )
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(rows, request, view=self)

        serializer = OrderSerializer([OrderDTO.from_entity(o) for o in page], many=True)
        return paginator.get_paginated_response(serializer.data)

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderSerializer},
        summary="Place an order",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        use_case = CreateOrderUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(OrderCreateDTO(
            customer_id=data['customer_id'],
            total_amount=data['total_amount'],
            saddle_specifications=data.get('saddle_specifications') or {},
            order_number=data.get('order_number') or None,
            special_instructions=data.get('special_instructions') or None,
            estimated_delivery_date=data.get('estimated_delivery_date'),
            priority=data.get('priority') or None,
            fitter_id=data.get('fitter_id'),
            factory_id=data.get('factory_id'),
            customer_name=data.get('customer_name') or None,
            seat_sizes=data.get('seat_sizes'),
            saddle_id=data.get('saddle_id'),
        ))

        output = OrderSerializer(result.data)
        return Response(output.data, status=status.HTTP_201_CREATED)

    @staticmethod
    def _filters(request):
        serializer = OrderListQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        return {
            key: value
            for key, value in serializer.validated_data.items()
            if value not in (None, '')
        }


@extend_schema(tags=['Orders'])
class OrderByNumberView(APIView):
    """Look up an order by its order number."""

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order by order number",
    )
    def get(self, request, order_number: str):
        order = DjangoOrderRepository().find_by_order_number(order_number)
        if not order:
            raise OrderNotFoundError(order_number)

        serializer = OrderSerializer(OrderDTO.from_entity(order))
        return Response(serializer.data)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint."""

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: int):
        repository = DjangoOrderRepository()
        order = repository.find_by_id(order_id)
        if not order:
            raise OrderNotFoundError(order_id)

        serializer = OrderSerializer(OrderDTO.from_entity(order))
        return Response(serializer.data)

    @extend_schema(
        request=OrderDetailsUpdateSerializer,
        responses={200: OrderSerializer},
        summary="Update measurements, delivery estimate and search fields",
    )
    def patch(self, request, order_id: int):
        serializer = OrderDetailsUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        use_case = UpdateOrderDetailsUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(UpdateOrderDetailsDTO(
            order_id=order_id,
            measurements=data.get('measurements'),
            estimated_delivery_date=data.get('estimated_delivery_date'),
            seat_sizes=data.get('seat_sizes'),
            customer_name=data.get('customer_name'),
            saddle_id=data.get('saddle_id'),
        ))

        output = OrderSerializer(result.data)
        return Response(output.data)

    @extend_schema(summary="Delete an order")
    def delete(self, request, order_id: int):
        repository = DjangoOrderRepository()
        if not repository.delete(order_id):
            raise OrderNotFoundError(order_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Orders'])
class OrderStatusView(APIView):
    """Order workflow endpoint."""

    @extend_schema(
        request=OrderStatusChangeSerializer,
        responses={200: OrderCommandResultSerializer},
        summary="Change order status",
    )
    def post(self, request, order_id: int):
        serializer = OrderStatusChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = ChangeOrderStatusUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(ChangeOrderStatusDTO(
            order_id=order_id,
            status=serializer.validated_data['status'],
        ))
        return _command_response(result)


@extend_schema(tags=['Orders'])
class OrderPriorityView(APIView):

    @extend_schema(
        request=OrderPriorityUpdateSerializer,
        responses={200: OrderCommandResultSerializer},
        summary="Change order priority",
    )
    def post(self, request, order_id: int):
        serializer = OrderPriorityUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = UpdateOrderPriorityUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(UpdateOrderPriorityDTO(
            order_id=order_id,
            priority=serializer.validated_data['priority'],
        ))
        return _command_response(result)


@extend_schema(tags=['Orders'])
class OrderDepositView(APIView):

    @extend_schema(
        request=DepositPaymentSerializer,
        responses={200: OrderCommandResultSerializer},
        summary="Record a deposit payment",
    )
    def post(self, request, order_id: int):
        serializer = DepositPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = RecordDepositPaymentUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(RecordDepositPaymentDTO(
            order_id=order_id,
            amount=serializer.validated_data['amount'],
        ))
        return _command_response(result)


@extend_schema(tags=['Orders'])
class OrderCancelView(APIView):

    @extend_schema(
        request=OrderCancelSerializer,
        responses={200: OrderCommandResultSerializer},
        summary="Cancel an order",
    )
    def post(self, request, order_id: int):
        serializer = OrderCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = CancelOrderUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(CancelOrderDTO(
            order_id=order_id,
            reason=serializer.validated_data['reason'],
        ))
        return _command_response(result)


@extend_schema(tags=['Orders'])
class OrderAssignmentView(APIView):

    @extend_schema(
        request=OrderAssignmentSerializer,
        responses={200: OrderCommandResultSerializer},
        summary="Assign a fitter and/or a factory",
    )
    def post(self, request, order_id: int):
        serializer = OrderAssignmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = AssignOrderUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(AssignOrderDTO(
            order_id=order_id,
            fitter_id=serializer.validated_data.get('fitter_id'),
            factory_id=serializer.validated_data.get('factory_id'),
        ))
        return _command_response(result)


@extend_schema(tags=['Order Search'])
class OrderSearchView(APIView):
    """Multi-criteria order search."""

    @extend_schema(
        parameters=[OrderSearchQuerySerializer],
        responses={200: OrderSearchResultSerializer},
        summary="Search orders",
    )
    def get(self, request):
        query = OrderSearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        service = OrderSearchService(DjangoOrderRepository())
        result = service.search(query.to_criteria())

        serializer = OrderSearchResultSerializer(result)
        return Response(serializer.data)


@extend_schema(tags=['Order Search'])
class OrderSuggestionView(APIView):
    """Autocomplete for customer names and order numbers."""

    @extend_schema(
        parameters=[OrderSuggestionQuerySerializer],
        responses={200: {'type': 'array', 'items': {'type': 'string'}}},
        summary="Search suggestions",
    )
    def get(self, request):
        query = OrderSuggestionQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        data = query.validated_data
        service = OrderSearchService(DjangoOrderRepository())
        suggestions = service.get_suggestions(data['field'], data['query'], data['limit'])
        return Response(suggestions)


@extend_schema(tags=['Order Search'])
class OrderSearchStatsView(APIView):

    @extend_schema(
        parameters=[OrderSearchQuerySerializer],
        responses={200: OrderSearchStatsSerializer},
        summary="Statistics over the filtered orders",
    )
    def get(self, request):
        query = OrderSearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        service = OrderSearchService(DjangoOrderRepository())
        stats = service.get_stats(query.to_criteria())

        serializer = OrderSearchStatsSerializer(stats)
        return Response(serializer.data)


@extend_schema(tags=['Order Queues'])
class OverdueOrdersView(APIView):

    @extend_schema(
        responses={200: OrderSerializer(many=True)},
        summary="Open orders past their estimated delivery date",
    )
    def get(self, request):
        return _order_list_response(DjangoOrderRepository().find_overdue())


@extend_schema(tags=['Order Queues'])
class ProductionQueueView(APIView):

    @extend_schema(
        parameters=[OpenApiParameter(name='limit', type=int, required=False)],
        responses={200: OrderSerializer(many=True)},
        summary="Orders awaiting or in production, urgent first",
    )
    def get(self, request):
        query = ProductionQueueQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        orders = DjangoOrderRepository().find_for_production(limit=query.validated_data.get('limit'))
        return _order_list_response(orders)


@extend_schema(tags=['Order Queues'])
class RequiringDepositView(APIView):

    @extend_schema(
        responses={200: OrderSerializer(many=True)},
        summary="Open orders with a balance owing",
    )
    def get(self, request):
        return _order_list_response(DjangoOrderRepository().find_requiring_deposit())


@extend_schema(tags=['Order Queues'])
class UrgentOrdersView(APIView):

    @extend_schema(
        responses={200: OrderSerializer(many=True)},
        summary="Urgent and critical orders, newest first",
    )
    def get(self, request):
        return _order_list_response(DjangoOrderRepository().find_urgent())


@extend_schema(tags=['Order Queues'])
class InProductionOrdersView(APIView):

    @extend_schema(
        responses={200: OrderSerializer(many=True)},
        summary="Orders currently in production",
    )
    def get(self, request):
        return _order_list_response(DjangoOrderRepository().find_in_production())


@extend_schema(tags=['Orders'])
class OrderStatsView(APIView):
    """Dashboard totals over every live order."""

    @extend_schema(
        responses={200: OrderStatsSerializer},
        summary="Order statistics",
    )
    def get(self, request):
        stats = DjangoOrderRepository().get_order_stats()
        return Response(OrderStatsSerializer(stats).data)


@extend_schema(tags=['Orders'])
class CustomerOrderSummaryView(APIView):

    @extend_schema(
        responses={200: CustomerOrderSummarySerializer},
        summary="Order count and total value for a customer",
    )
    def get(self, request, customer_id: int):
        summary = DjangoOrderRepository().get_customer_summary(customer_id)
        return Response(CustomerOrderSummarySerializer(summary).data)
