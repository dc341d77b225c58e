"""
URL configuration.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from shared.interfaces.health_views import HealthCheckView, ReadinessCheckView, LivenessCheckView

urlpatterns = [
    path('admin/', admin.site.urls),

    # API
    path('api/v1/orders/', include('apps.orders.interfaces.api.v1.urls')),

    # Schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # Health
    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
]
