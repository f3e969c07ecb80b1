# users/views/auth.py

"""
ADMIN LOGIN

POST /api/auth/login/  {email|username, password} -> JWT pair + profile

Rules:
- AllowAny (this IS the login)
- Throttled with the public write scope (credential stuffing target)
- Failed attempts are logged without the identifier's password
"""

from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from users.serializers import LoginResponseSerializer, LoginSerializer, UserSerializer

logger = logging.getLogger(__name__)


class LoginThrottle(AnonRateThrottle):
    scope = "public_write"


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [LoginThrottle]
    serializer_class = LoginSerializer

    @extend_schema(
        request=LoginSerializer,
        responses={
            200: LoginResponseSerializer,
            400: OpenApiResponse(description="Validation error"),
            401: OpenApiResponse(description="Invalid credentials"),
        },
        description="Authenticate a back-office user with email or username.",
        tags=["Auth"],
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        identifier = serializer.validated_data["identifier"]
        user = authenticate(
            request=request,
            username=identifier,
            password=serializer.validated_data["password"],
        )

        if not user:
            logger.warning("Back-office login rejected", extra={"identifier": identifier})
            return Response(
                {"detail": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        refresh = RefreshToken.for_user(user)
        logger.info("Back-office login", extra={"user_id": str(user.id), "role": user.role})

        return Response(
            {
                "access": str(refresh.access_token),
                "refresh": str(refresh),
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_200_OK,
        )
