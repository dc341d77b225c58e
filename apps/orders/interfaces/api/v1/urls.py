"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import (
    OrderListCreateView,
    OrderDetailView,
    OrderStatusView,
    OrderPriorityView,
    OrderDepositView,
    OrderCancelView,
    OrderAssignmentView,
    OrderSearchView,
    OrderSuggestionView,
    OrderSearchStatsView,
    OverdueOrdersView,
    ProductionQueueView,
    RequiringDepositView,
    UrgentOrdersView,
    InProductionOrdersView,
    OrderStatsView,
    CustomerOrderSummaryView,
    OrderByNumberView,
)

urlpatterns = [
    # Search
    path('search/', OrderSearchView.as_view(), name='order-search'),
    path('search/suggestions/', OrderSuggestionView.as_view(), name='order-search-suggestions'),
    path('search/stats/', OrderSearchStatsView.as_view(), name='order-search-stats'),

    # Queues
    path('overdue/', OverdueOrdersView.as_view(), name='order-overdue'),
    path('production-queue/', ProductionQueueView.as_view(), name='order-production-queue'),
    path('requiring-deposit/', RequiringDepositView.as_view(), name='order-requiring-deposit'),
    path('urgent/', UrgentOrdersView.as_view(), name='order-urgent'),
    path('production/', InProductionOrdersView.as_view(), name='order-in-production'),

    # Reporting
    path('stats/', OrderStatsView.as_view(), name='order-stats'),
    path('customer/<int:customer_id>/summary/', CustomerOrderSummaryView.as_view(), name='order-customer-summary'),

    # Lookup
    path('number/<str:order_number>/', OrderByNumberView.as_view(), name='order-by-number'),

    # Orders
    path('', OrderListCreateView.as_view(), name='order-list-create'),
    path('<int:order_id>/', OrderDetailView.as_view(), name='order-detail'),
    path('<int:order_id>/status/', OrderStatusView.as_view(), name='order-status'),
    path('<int:order_id>/priority/', OrderPriorityView.as_view(), name='order-priority'),
    path('<int:order_id>/deposit/', OrderDepositView.as_view(), name='order-deposit'),
    path('<int:order_id>/cancel/', OrderCancelView.as_view(), name='order-cancel'),
    path('<int:order_id>/assignment/', OrderAssignmentView.as_view(), name='order-assignment'),
]
