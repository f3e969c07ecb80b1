# sales/views/order.py

"""
ORDERS (BACK-OFFICE)

- GET  /api/sales/orders/                 list (filters: status, commune, q)
- GET  /api/sales/orders/<id>/            detail with items
- POST /api/sales/orders/<id>/status/     lifecycle transition

Orders are created only by the storefront checkout (public app).
"""

import logging

from django.db.models import Q
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import CAP_ORDERS_MANAGE, HasCapability
from sales.models import Order
from sales.serializers import OrderSerializer, OrderStatusInputSerializer
from sales.services.order_lifecycle import InvalidOrderTransitionError, change_status

logger = logging.getLogger(__name__)


class OrderViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_ORDERS_MANAGE
    filterset_fields = ["status", "commune", "customer"]
    lookup_value_regex = r"[A-Za-z0-9\-]+"

    def get_queryset(self):
        qs = Order.objects.prefetch_related("items").order_by("-created_at")

        q = (self.request.query_params.get("q") or "").strip()
        if q:
            qs = qs.filter(
                Q(id__icontains=q)
                | Q(customer_name__icontains=q)
                | Q(customer_phone__icontains=q)
            )
        return qs

    @extend_schema(
        request=OrderStatusInputSerializer,
        responses={
            200: OrderSerializer,
            409: OpenApiResponse(description="Transition not allowed from the current status"),
        },
    )
    @action(detail=True, methods=["post"], url_path="status")
    def set_status(self, request, pk=None):
        s = OrderStatusInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            order = change_status(order=self.get_object(), target_status=s.validated_data["status"])
        except InvalidOrderTransitionError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(self.get_serializer(order).data, status=status.HTTP_200_OK)
