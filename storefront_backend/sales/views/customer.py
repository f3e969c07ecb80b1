# sales/views/customer.py

"""
CUSTOMERS (BACK-OFFICE)

- CRUD with annotated stats (total_orders, total_spent, last_order_at)
- GET <id>/orders/ order history
- reads need customers.view, writes need customers.edit
"""

from django.db.models import Q
from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import CAP_CUSTOMERS_EDIT, CAP_CUSTOMERS_VIEW, HasAnyCapability
from sales.serializers import CustomerSerializer, OrderSerializer
from sales.services.customers import with_stats

READ_ACTIONS = {"list", "retrieve", "orders"}


class CustomerViewSet(viewsets.ModelViewSet):
    serializer_class = CustomerSerializer
    filterset_fields = ["commune"]

    def get_queryset(self):
        qs = with_stats().order_by("-created_at")

        q = (self.request.query_params.get("q") or "").strip()
        if q:
            qs = qs.filter(
                Q(name__icontains=q) | Q(phone__icontains=q) | Q(email__icontains=q)
            )
        return qs

    def get_permissions(self):
        if self.action in READ_ACTIONS:
            self.required_any_capabilities = {CAP_CUSTOMERS_VIEW, CAP_CUSTOMERS_EDIT}
        else:
            self.required_any_capabilities = {CAP_CUSTOMERS_EDIT}
        return [IsAuthenticated(), HasAnyCapability()]

    @extend_schema(responses={200: OrderSerializer(many=True)})
    @action(detail=True, methods=["get"], url_path="orders")
    def orders(self, request, pk=None):
        customer = self.get_object()
        qs = customer.orders.prefetch_related("items").order_by("-created_at")
        data = OrderSerializer(qs, many=True).data
        return Response({"count": len(data), "results": data})
