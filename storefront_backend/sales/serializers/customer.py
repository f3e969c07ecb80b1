from decimal import Decimal

from rest_framework import serializers

from sales.models import Customer
from sales.services.customers import normalize_phone


class CustomerSerializer(serializers.ModelSerializer):
    """
    Back-office customer row. Stats are annotated by
    sales.services.customers.with_stats(); plain instances report zeros.
    """

    total_orders = serializers.SerializerMethodField()
    total_spent = serializers.SerializerMethodField()
    last_order_at = serializers.SerializerMethodField()

    class Meta:
        model = Customer
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "address",
            "commune",
            "total_orders",
            "total_spent",
            "last_order_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def get_total_orders(self, obj) -> int:
        return int(getattr(obj, "total_orders", 0) or 0)

    def get_total_spent(self, obj) -> str:
        return f"{Decimal(getattr(obj, 'total_spent', 0) or 0):.2f}"

    def get_last_order_at(self, obj):
        value = getattr(obj, "last_order_at", None)
        return value.isoformat() if value else None

    def validate_name(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def validate_phone(self, value):
        v = normalize_phone(value)
        if not v:
            raise serializers.ValidationError("phone cannot be blank")

        qs = Customer.objects.filter(phone=v)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("A customer with this phone already exists.")
        return v
