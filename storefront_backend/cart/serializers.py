from decimal import Decimal

from rest_framework import serializers

from cart.session_cart import MIN_QUANTITY


class CartAddInputSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.DecimalField(
        max_digits=12,
        decimal_places=3,
        min_value=MIN_QUANTITY,
        required=False,
        default=Decimal("1"),
    )


class CartUpdateInputSerializer(serializers.Serializer):
    quantity = serializers.DecimalField(max_digits=12, decimal_places=3, min_value=MIN_QUANTITY)
