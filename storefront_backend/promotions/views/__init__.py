# promotions/views/__init__.py

"""
COUPONS + DAILY OFFERS (BACK-OFFICE)

- /api/promotions/coupons/              CRUD + <id>/active/ + <id>/usages/
- /api/promotions/coupons/validate/     dry-run validation for the admin screen
- /api/promotions/daily-offers/         CRUD + <id>/active/

All endpoints require promotions.manage.
Storefront coupon validation lives in public/views/checkout.py.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import CAP_PROMOTIONS_MANAGE, HasCapability
from promotions.models import Coupon, DailyOffer
from promotions.serializers import (
    CouponSerializer,
    CouponUsageSerializer,
    CouponValidateInputSerializer,
    DailyOfferSerializer,
)
from promotions.services import set_active, validate_coupon
from store.serializers import ActiveInputSerializer


class _ActiveToggleMixin:
    @extend_schema(request=ActiveInputSerializer)
    @action(detail=True, methods=["post"], url_path="active")
    def active(self, request, pk=None):
        s = ActiveInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        instance = set_active(self.get_object(), is_active=s.validated_data["is_active"])
        return Response(self.get_serializer(instance).data, status=status.HTTP_200_OK)


class CouponViewSet(_ActiveToggleMixin, viewsets.ModelViewSet):
    queryset = Coupon.objects.all().order_by("-created_at")
    serializer_class = CouponSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_PROMOTIONS_MANAGE
    filterset_fields = ["is_active", "discount_type"]

    @extend_schema(responses={200: CouponUsageSerializer(many=True)})
    @action(detail=True, methods=["get"], url_path="usages")
    def usages(self, request, pk=None):
        coupon = self.get_object()
        qs = coupon.usages.select_related("customer").order_by("-used_at")
        data = CouponUsageSerializer(qs, many=True).data
        return Response({"count": len(data), "results": data})

    @extend_schema(
        request=CouponValidateInputSerializer,
        responses={200: OpenApiResponse(description="{valid, discount_amount, coupon_id, message}")},
    )
    @action(detail=False, methods=["post"], url_path="validate")
    def validate(self, request):
        s = CouponValidateInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        result = validate_coupon(s.validated_data["code"], s.validated_data["order_total"])
        return Response(result.as_payload(), status=status.HTTP_200_OK)


class DailyOfferViewSet(_ActiveToggleMixin, viewsets.ModelViewSet):
    queryset = DailyOffer.objects.select_related("product").order_by("-created_at")
    serializer_class = DailyOfferSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_PROMOTIONS_MANAGE
    filterset_fields = ["is_active", "product"]
