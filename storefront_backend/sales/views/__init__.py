from .analytics import AnalyticsDashboardView
from .customer import CustomerViewSet
from .order import OrderViewSet

__all__ = [
    "AnalyticsDashboardView",
    "CustomerViewSet",
    "OrderViewSet",
]
