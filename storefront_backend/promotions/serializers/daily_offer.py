from rest_framework import serializers

from products.models import Product
from promotions.models import DailyOffer


class DailyOfferSerializer(serializers.ModelSerializer):
    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    product_name = serializers.CharField(source="product.name", read_only=True)
    original_price = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)

    class Meta:
        model = DailyOffer
        fields = [
            "id",
            "product",
            "product_name",
            "original_price",
            "discount_percentage",
            "discounted_price",
            "start_date",
            "end_date",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "product_name", "discounted_price", "created_at", "updated_at"]

    def validate_discount_percentage(self, value):
        if not (0 < int(value) < 100):
            raise serializers.ValidationError("discount_percentage must be between 1 and 99")
        return value

    def validate(self, attrs):
        product = attrs.get("product") or getattr(self.instance, "product", None)

        # defaults to the product's current price
        if attrs.get("original_price") is None and self.instance is None and product is not None:
            attrs["original_price"] = product.price

        original = attrs.get("original_price", getattr(self.instance, "original_price", None))
        if original is None or original <= 0:
            raise serializers.ValidationError({"original_price": ["original_price must be greater than zero"]})

        start = attrs.get("start_date", getattr(self.instance, "start_date", None))
        end = attrs.get("end_date", getattr(self.instance, "end_date", None))
        if start and end and end < start:
            raise serializers.ValidationError({"end_date": ["end_date cannot be before start_date"]})

        return attrs


class StorefrontOfferSerializer(serializers.Serializer):
    """
    Offer rendered as a product card: price is the offer price,
    original_price is what it used to cost.
    """

    offer_id = serializers.UUIDField(source="id")
    id = serializers.UUIDField(source="product.id")
    category_id = serializers.UUIDField(source="product.category_id", allow_null=True)
    name = serializers.CharField(source="product.name")
    description = serializers.CharField(source="product.description")
    image = serializers.CharField(source="product.image")
    unit_type = serializers.CharField(source="product.unit_type")
    price = serializers.DecimalField(source="discounted_price", max_digits=12, decimal_places=2)
    original_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    discount_percentage = serializers.IntegerField()
    in_stock = serializers.SerializerMethodField()
    end_date = serializers.DateField()

    def get_in_stock(self, obj) -> bool:
        return obj.product.stock > 0
