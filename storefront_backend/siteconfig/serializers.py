# siteconfig/serializers.py

import json

from rest_framework import serializers

from siteconfig.models import SystemConfiguration


class ConfigValueField(serializers.Field):
    """
    Accepts any JSON value. Strings are stored as-is; lists, objects,
    numbers and booleans are stored as JSON text.
    """

    def to_internal_value(self, data):
        if data is None:
            return ""
        if isinstance(data, str):
            return data
        return json.dumps(data, ensure_ascii=False)

    def to_representation(self, value):
        return value


class SystemConfigurationSerializer(serializers.ModelSerializer):
    value = ConfigValueField(required=False)

    class Meta:
        model = SystemConfiguration
        fields = [
            "id",
            "key",
            "value",
            "description",
            "category",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_key(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("key cannot be blank")
        return v


class BulkConfigurationSerializer(serializers.Serializer):
    """
    {"values": {"shipping_cost": 3500, "available_communes": ["Santiago", "Ñuñoa"]}}
    """

    values = serializers.DictField(child=ConfigValueField(), allow_empty=False)
    category = serializers.ChoiceField(
        choices=SystemConfiguration.CATEGORY_CHOICES,
        required=False,
        default=SystemConfiguration.CATEGORY_GENERAL,
    )
