from rest_framework import serializers

from sales.models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product",
            "product_name",
            "unit_type",
            "quantity",
            "price",
            "line_total",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "customer",
            "customer_name",
            "customer_email",
            "customer_phone",
            "address",
            "commune",
            "notes",
            "status",
            "status_display",
            "subtotal",
            "discount",
            "delivery_fee",
            "total",
            "coupon_code",
            "estimated_delivery",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OrderStatusInputSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES)


class CheckoutInputSerializer(serializers.Serializer):
    """
    Contact + delivery form. Blank values pass through;
    the checkout service reports every missing field together.
    """

    name = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    phone = serializers.CharField(required=False, allow_blank=True, default="", max_length=32)
    email = serializers.EmailField(required=False, allow_blank=True, default="")
    address = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    commune = serializers.CharField(required=False, allow_blank=True, default="", max_length=120)
    notes = serializers.CharField(required=False, allow_blank=True, default="", max_length=1000)
    coupon_code = serializers.CharField(required=False, allow_blank=True, default="", max_length=64)
