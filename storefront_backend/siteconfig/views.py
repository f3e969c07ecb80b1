# siteconfig/views.py

"""
SYSTEM CONFIGURATION (BACK-OFFICE)

Endpoints (under /api/config/):
- CRUD by key:    /entries/<key>/
- Bulk upsert:    POST /entries/bulk/
- Typed record:   GET  /entries/effective/

Policy:
- config.edit capability for everything (admin role only by default)
"""

from __future__ import annotations

from django.db import transaction
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import CAP_CONFIG_EDIT, HasCapability
from siteconfig.models import SystemConfiguration
from siteconfig.serializers import BulkConfigurationSerializer, SystemConfigurationSerializer
from siteconfig.store_settings import load_store_settings


class SystemConfigurationViewSet(viewsets.ModelViewSet):
    queryset = SystemConfiguration.objects.all()
    serializer_class = SystemConfigurationSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_CONFIG_EDIT
    lookup_field = "key"
    lookup_value_regex = r"[A-Za-z0-9_.\-]+"
    filterset_fields = ["category", "is_active"]
    pagination_class = None

    @extend_schema(
        request=BulkConfigurationSerializer,
        responses={200: SystemConfigurationSerializer(many=True)},
        description="Create or update several configuration keys at once.",
    )
    @action(detail=False, methods=["post"], url_path="bulk")
    def bulk(self, request):
        s = BulkConfigurationSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        category = s.validated_data["category"]
        touched = []

        with transaction.atomic():
            for key, value in s.validated_data["values"].items():
                key = (key or "").strip()
                if not key:
                    continue
                entry = SystemConfiguration.objects.select_for_update().filter(key=key).first()
                if entry is None:
                    entry = SystemConfiguration(key=key, category=category)
                entry.value = value
                entry.is_active = True
                entry.save()
                touched.append(entry)

        return Response(
            SystemConfigurationSerializer(touched, many=True).data,
            status=status.HTTP_200_OK,
        )

    @extend_schema(
        responses={200: OpenApiResponse(description="Resolved typed store settings")},
        description="The typed settings record the storefront currently sees.",
    )
    @action(detail=False, methods=["get"], url_path="effective")
    def effective(self, request):
        return Response(load_store_settings().as_payload())
