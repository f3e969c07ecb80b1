# products/serializers/category.py

from rest_framework import serializers

from products.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """
    Category serializer (back-office + storefront).

    Rules:
    - name is required and trimmed
    - product_count is read-only (annotated by the back-office queryset when present)
    """

    name = serializers.CharField(required=True, allow_blank=False, max_length=255)
    product_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Category
        fields = [
            "id",
            "name",
            "description",
            "image",
            "display_order",
            "is_visible",
            "product_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "product_count", "created_at", "updated_at"]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v
