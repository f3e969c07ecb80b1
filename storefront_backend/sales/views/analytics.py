# sales/views/analytics.py

"""
ANALYTICS DASHBOARD

GET /api/sales/analytics/?days=30&limit=5

One payload for the dashboard screen:
- daily:              last N DailyAnalytics rows
- top_products:       best sellers by quantity
- inventory_alerts:   low-stock products
- frequent_customers: customers with most orders
- sales_by_category:  revenue per category + percentage share
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.roles import CAP_REPORTS_VIEW, HasCapability
from sales.services import analytics


def _bounded_int(raw, *, default: int, low: int, high: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return max(low, min(high, value))


class AnalyticsDashboardView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_REPORTS_VIEW

    @extend_schema(
        parameters=[
            OpenApiParameter(name="days", type=OpenApiTypes.INT, required=False, description="Daily rows (default 30, max 365)."),
            OpenApiParameter(name="limit", type=OpenApiTypes.INT, required=False, description="Top-N size (default 5, max 50)."),
        ],
        description="Dashboard analytics (daily rollups, best sellers, alerts, customers, categories).",
    )
    def get(self, request):
        days = _bounded_int(request.query_params.get("days"), default=analytics.DEFAULT_DAYS, low=1, high=365)
        limit = _bounded_int(request.query_params.get("limit"), default=analytics.DEFAULT_LIMIT, low=1, high=50)

        daily = [
            {
                "date": row.date.isoformat(),
                "total_sales": f"{row.total_sales:.2f}",
                "total_orders": row.total_orders,
                "new_customers": row.new_customers,
            }
            for row in analytics.daily_rows(days=days)
        ]

        return Response(
            {
                "daily": daily,
                "top_products": analytics.top_products(limit=limit),
                "inventory_alerts": analytics.inventory_alerts(),
                "frequent_customers": analytics.frequent_customers(limit=limit),
                "sales_by_category": analytics.sales_by_category(),
            }
        )
