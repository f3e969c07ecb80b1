# products/serializers/product.py

"""
PRODUCT SERIALIZERS

- ProductSerializer: back-office CRUD (stock is read-only here; it changes
  only through the inventory endpoints)
- StorefrontProductSerializer: public card (no stock thresholds)
- Stock input serializers for the inventory screen
"""

from decimal import Decimal

from rest_framework import serializers

from products.models import Category, Product, StockMovement


class ProductSerializer(serializers.ModelSerializer):
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    category_name = serializers.CharField(source="category.name", read_only=True, default=None)
    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "category",
            "category_name",
            "name",
            "description",
            "price",
            "unit_type",
            "image",
            "stock",
            "low_stock_threshold",
            "is_low_stock",
            "is_visible",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "category_name",
            "stock",
            "is_low_stock",
            "created_at",
            "updated_at",
        ]

    def validate_name(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def validate_price(self, value):
        if value is None or value <= Decimal("0"):
            raise serializers.ValidationError("Price must be greater than zero")
        return value

    def validate_low_stock_threshold(self, value):
        if value is not None and value < Decimal("0"):
            raise serializers.ValidationError("low_stock_threshold cannot be negative")
        return value


class StorefrontProductSerializer(serializers.ModelSerializer):
    category_id = serializers.UUIDField(read_only=True)
    in_stock = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            "id",
            "category_id",
            "name",
            "description",
            "price",
            "unit_type",
            "image",
            "in_stock",
        ]
        read_only_fields = fields

    def get_in_stock(self, obj) -> bool:
        return Decimal(obj.stock or 0) > 0


class VisibilityInputSerializer(serializers.Serializer):
    is_visible = serializers.BooleanField()


class StockAdjustInputSerializer(serializers.Serializer):
    quantity_delta = serializers.DecimalField(max_digits=12, decimal_places=3)
    reason = serializers.ChoiceField(
        choices=[StockMovement.Reason.ADJUSTMENT, StockMovement.Reason.RESTOCK],
        required=False,
        default=StockMovement.Reason.ADJUSTMENT,
    )
    note = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)


class StockSetInputSerializer(serializers.Serializer):
    stock = serializers.DecimalField(max_digits=12, decimal_places=3, min_value=Decimal("0"))
    note = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)


class StockMovementSerializer(serializers.ModelSerializer):
    performed_by_email = serializers.EmailField(source="performed_by.email", read_only=True, default=None)

    class Meta:
        model = StockMovement
        fields = [
            "id",
            "product",
            "movement_type",
            "reason",
            "quantity",
            "stock_after",
            "note",
            "performed_by_email",
            "created_at",
        ]
        read_only_fields = fields
