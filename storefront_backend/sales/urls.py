# sales/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from sales.views import AnalyticsDashboardView, CustomerViewSet, OrderViewSet

router = DefaultRouter()
router.register(r"orders", OrderViewSet, basename="orders")
router.register(r"customers", CustomerViewSet, basename="customers")

urlpatterns = [
    path("analytics/", AnalyticsDashboardView.as_view(), name="analytics-dashboard"),
    path("", include(router.urls)),
]
