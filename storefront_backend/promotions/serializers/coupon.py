from decimal import Decimal

from rest_framework import serializers

from promotions.models import Coupon, CouponUsage


class CouponSerializer(serializers.ModelSerializer):
    class Meta:
        model = Coupon
        fields = [
            "id",
            "code",
            "name",
            "description",
            "discount_type",
            "value",
            "min_order_amount",
            "max_discount_amount",
            "usage_limit",
            "used_count",
            "start_date",
            "end_date",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "used_count", "created_at", "updated_at"]

    def validate_code(self, value):
        code = (value or "").strip().upper()
        if not code:
            raise serializers.ValidationError("code cannot be blank")

        qs = Coupon.objects.filter(code=code)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("A coupon with this code already exists.")
        return code

    def validate_value(self, value):
        if value is None or value <= Decimal("0"):
            raise serializers.ValidationError("value must be greater than zero")
        return value

    def validate_min_order_amount(self, value):
        if value is not None and value < Decimal("0"):
            raise serializers.ValidationError("min_order_amount cannot be negative")
        return value

    def validate(self, attrs):
        def current(name):
            if name in attrs:
                return attrs[name]
            return getattr(self.instance, name, None)

        discount_type = current("discount_type") or Coupon.TYPE_PERCENTAGE
        value = current("value")
        if discount_type == Coupon.TYPE_PERCENTAGE and value is not None and value > 100:
            raise serializers.ValidationError({"value": ["Percentage coupons cannot exceed 100"]})

        start, end = current("start_date"), current("end_date")
        if start and end and end < start:
            raise serializers.ValidationError({"end_date": ["end_date cannot be before start_date"]})

        return attrs


class CouponUsageSerializer(serializers.ModelSerializer):
    customer_name = serializers.CharField(source="customer.name", read_only=True, default=None)

    class Meta:
        model = CouponUsage
        fields = ["id", "order_id", "customer", "customer_name", "discount_amount", "used_at"]
        read_only_fields = fields


class CouponValidateInputSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=64)
    order_total = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0"))
