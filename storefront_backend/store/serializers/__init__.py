from rest_framework import serializers

from store.models import DeliveryZone, StoreLocation


class StoreLocationSerializer(serializers.ModelSerializer):
    """
    Store location (back-office CRUD + storefront list).
    """

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
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_name(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def validate_address(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("address cannot be blank")
        return v


class DeliveryZoneSerializer(serializers.ModelSerializer):
    class Meta:
        model = DeliveryZone
        fields = [
            "id",
            "name",
            "delivery_price",
            "estimated_time",
            "is_free_delivery",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_name(self, value):
        v = " ".join((value or "").split())
        if not v:
            raise serializers.ValidationError("Commune name cannot be blank")

        qs = DeliveryZone.objects.filter(name__iexact=v)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("A delivery zone for this commune already exists.")
        return v

    def validate_delivery_price(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("delivery_price cannot be negative")
        return value


class ActiveInputSerializer(serializers.Serializer):
    is_active = serializers.BooleanField()
