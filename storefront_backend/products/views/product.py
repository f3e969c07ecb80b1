# products/views/product.py

"""
PRODUCT VIEWSET (BACK-OFFICE)

Purpose:
- Product CRUD + storefront visibility
- Inventory screen: stock adjust / stock count / movement history
- Low stock alerts (stock <= low_stock_threshold)

Storefront reads live in public/views/catalog.py (AllowAny).
"""

import logging

from django.db.models import Q
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import (
    CAP_CATALOG_EDIT,
    CAP_INVENTORY_ADJUST,
    HasAnyCapability,
    IsStaff,
)
from products.models import Product
from products.serializers import (
    ProductSerializer,
    StockAdjustInputSerializer,
    StockMovementSerializer,
    StockSetInputSerializer,
    VisibilityInputSerializer,
)
from products.services.catalog import low_stock_products, set_visibility
from products.services.stock_adjustments import (
    StockAdjustmentError,
    adjust_product_stock,
    set_product_stock,
)

logger = logging.getLogger(__name__)

INVENTORY_ACTIONS = {"adjust_stock", "set_stock", "movements", "low_stock_alerts"}


class ProductViewSet(viewsets.ModelViewSet):
    serializer_class = ProductSerializer
    filterset_fields = ["category", "is_visible", "unit_type"]

    def get_queryset(self):
        qs = Product.objects.select_related("category").order_by("name")

        q = (self.request.query_params.get("q") or "").strip()
        if q:
            qs = qs.filter(Q(name__icontains=q) | Q(description__icontains=q))

        return qs

    def get_permissions(self):
        if self.action in {"list", "retrieve"}:
            return [IsAuthenticated(), IsStaff()]

        if self.action in INVENTORY_ACTIONS:
            self.required_any_capabilities = {CAP_INVENTORY_ADJUST}
        else:
            self.required_any_capabilities = {CAP_CATALOG_EDIT}
        return [IsAuthenticated(), HasAnyCapability()]

    @extend_schema(
        request=VisibilityInputSerializer,
        responses={200: ProductSerializer},
        description="Show or hide a product on the storefront (explicit target value).",
    )
    @action(detail=True, methods=["post"], url_path="visibility")
    def visibility(self, request, pk=None):
        s = VisibilityInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        product = set_visibility(self.get_object(), is_visible=s.validated_data["is_visible"])
        return Response(self.get_serializer(product).data, status=status.HTTP_200_OK)

    # -----------------------------
    # Inventory
    # -----------------------------
    @extend_schema(
        request=StockAdjustInputSerializer,
        responses={
            200: ProductSerializer,
            400: OpenApiResponse(description="Invalid delta or stock would go negative"),
        },
        description="Add or remove stock (positive or negative delta).",
    )
    @action(detail=True, methods=["post"], url_path="stock/adjust")
    def adjust_stock(self, request, pk=None):
        s = StockAdjustInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            result = adjust_product_stock(
                product=self.get_object(),
                quantity_delta=s.validated_data["quantity_delta"],
                reason=s.validated_data["reason"],
                note=s.validated_data["note"],
                user=request.user,
            )
        except StockAdjustmentError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        logger.info(
            "Stock adjusted",
            extra={"product_id": str(result.product.id), "delta": str(result.quantity_delta)},
        )
        return Response(self.get_serializer(result.product).data, status=status.HTTP_200_OK)

    @extend_schema(
        request=StockSetInputSerializer,
        responses={
            200: ProductSerializer,
            400: OpenApiResponse(description="Invalid stock value"),
        },
        description="Overwrite stock with a physical count.",
    )
    @action(detail=True, methods=["post"], url_path="stock/set")
    def set_stock(self, request, pk=None):
        s = StockSetInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            result = set_product_stock(
                product=self.get_object(),
                new_stock=s.validated_data["stock"],
                note=s.validated_data["note"],
                user=request.user,
            )
        except StockAdjustmentError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(self.get_serializer(result.product).data, status=status.HTTP_200_OK)

    @extend_schema(responses={200: StockMovementSerializer(many=True)})
    @action(detail=True, methods=["get"], url_path="stock/movements")
    def movements(self, request, pk=None):
        product = self.get_object()
        qs = product.stock_movements.select_related("performed_by").order_by("-created_at")
        data = StockMovementSerializer(qs, many=True).data
        return Response({"count": len(data), "results": data})

    # -----------------------------
    # Alerts: Low stock
    # -----------------------------
    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="include_hidden",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Include products hidden from the storefront (default false).",
            ),
        ],
        responses={200: ProductSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path="alerts/low-stock")
    def low_stock_alerts(self, request):
        """
        GET /api/products/products/alerts/low-stock/
        """
        qs = low_stock_products()

        include_hidden = (
            request.query_params.get("include_hidden") or ""
        ).strip().lower() in ("1", "true", "yes")
        if not include_hidden:
            qs = qs.filter(is_visible=True)

        data = self.get_serializer(qs, many=True).data
        return Response({"count": len(data), "results": data})
