# store/views/__init__.py

"""
LOCATIONS + DELIVERY ZONES (BACK-OFFICE)

- /api/store/locations/       CRUD + <id>/active/   (locations.manage)
- /api/store/delivery-zones/  CRUD + <id>/active/   (delivery.manage)

Storefront lists (AllowAny) live in public/views/catalog.py.
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import CAP_DELIVERY_MANAGE, CAP_LOCATIONS_MANAGE, HasCapability
from store.models import DeliveryZone, StoreLocation
from store.serializers import ActiveInputSerializer, DeliveryZoneSerializer, StoreLocationSerializer
from store.services.delivery import set_active


class _ActiveToggleMixin:
    @extend_schema(request=ActiveInputSerializer)
    @action(detail=True, methods=["post"], url_path="active")
    def active(self, request, pk=None):
        s = ActiveInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        instance = set_active(self.get_object(), is_active=s.validated_data["is_active"])
        return Response(self.get_serializer(instance).data, status=status.HTTP_200_OK)


class StoreLocationViewSet(_ActiveToggleMixin, viewsets.ModelViewSet):
    queryset = StoreLocation.objects.all().order_by("name")
    serializer_class = StoreLocationSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_LOCATIONS_MANAGE
    filterset_fields = ["is_active", "commune"]
    pagination_class = None


class DeliveryZoneViewSet(_ActiveToggleMixin, viewsets.ModelViewSet):
    queryset = DeliveryZone.objects.all().order_by("name")
    serializer_class = DeliveryZoneSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_DELIVERY_MANAGE
    filterset_fields = ["is_active", "is_free_delivery"]
    pagination_class = None
