# public/serializers.py

"""
PUBLIC SERIALIZERS (STOREFRONT)

Transport-layer contracts only; business rules live in the services.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from products.models import Category
from sales.models import Customer
from store.models import DeliveryZone, StoreLocation


class PublicCategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "description", "image", "display_order"]
        read_only_fields = fields


class PublicLocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = StoreLocation
        fields = [
            "id",
            "name",
            "address",
            "commune",
            "phone",
            "hours",
            "description",
            "latitude",
            "longitude",
        ]
        read_only_fields = fields


class PublicDeliveryZoneSerializer(serializers.ModelSerializer):
    class Meta:
        model = DeliveryZone
        fields = ["id", "name", "delivery_price", "estimated_time", "is_free_delivery"]
        read_only_fields = fields


class PublicCustomerSerializer(serializers.ModelSerializer):
    """Checkout form prefill. Contact details stay in the back-office."""

    class Meta:
        model = Customer
        fields = ["name", "commune"]
        read_only_fields = fields


class CouponCheckInputSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=64)
    order_total = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0"),
        required=False,
        allow_null=True,
    )


class QuoteInputSerializer(serializers.Serializer):
    commune = serializers.CharField(required=False, allow_blank=True, default="", max_length=120)
    coupon_code = serializers.CharField(required=False, allow_blank=True, default="", max_length=64)


class RouteQuerySerializer(serializers.Serializer):
    url = serializers.CharField(required=False, allow_blank=True, default="/", max_length=2048)


class ProductQuerySerializer(serializers.Serializer):
    category = serializers.UUIDField(required=False, allow_null=True)
    q = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
