# users/serializers.py

from django.contrib.auth import get_user_model
from rest_framework import serializers

from permissions.roles import effective_capabilities_for

User = get_user_model()


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    """
    Input validation only.
    Authentication is handled in the view.

    Provide EITHER email OR username.
    """

    email = serializers.EmailField(required=False, allow_blank=True)
    username = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(write_only=True, style={"input_type": "password"})

    def validate(self, attrs):
        email = (attrs.get("email") or "").strip()
        username = (attrs.get("username") or "").strip()

        if email and username:
            raise serializers.ValidationError("Provide email OR username, not both.")
        if not email and not username:
            raise serializers.ValidationError("email or username is required.")

        attrs["identifier"] = email or username
        return attrs


# ---------------- USER OUTPUT ----------------
class UserSerializer(serializers.ModelSerializer):
    """
    Safe user representation for the back-office shell.
    """

    capabilities = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "username",
            "first_name",
            "last_name",
            "role",
            "capabilities",
        ]
        read_only_fields = fields

    def get_capabilities(self, obj) -> list[str]:
        return sorted(effective_capabilities_for(obj))


class LoginResponseSerializer(serializers.Serializer):
    access = serializers.CharField()
    refresh = serializers.CharField()
    user = UserSerializer()
