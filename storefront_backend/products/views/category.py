# products/views/category.py

from django.db.models import Count
from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import CAP_CATALOG_EDIT, HasAnyCapability, IsStaff
from products.models import Category
from products.serializers import CategorySerializer, VisibilityInputSerializer
from products.services.catalog import set_visibility


class CategoryViewSet(viewsets.ModelViewSet):
    """
    Category API (back-office)

    Policy:
    - Any staff user can READ categories (product form dropdown needs this)
    - catalog.edit capability for create/update/delete/visibility
    """

    serializer_class = CategorySerializer
    filterset_fields = ["is_visible"]
    pagination_class = None

    def get_queryset(self):
        return Category.objects.annotate(product_count=Count("products")).order_by(
            "display_order", "name"
        )

    def get_permissions(self):
        if self.action in {"list", "retrieve"}:
            return [IsAuthenticated(), IsStaff()]

        self.required_any_capabilities = {CAP_CATALOG_EDIT}
        return [IsAuthenticated(), HasAnyCapability()]

    @extend_schema(
        request=VisibilityInputSerializer,
        responses={200: CategorySerializer},
        description="Show or hide a category on the storefront (explicit target value).",
    )
    @action(detail=True, methods=["post"], url_path="visibility")
    def visibility(self, request, pk=None):
        s = VisibilityInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        category = set_visibility(self.get_object(), is_visible=s.validated_data["is_visible"])
        return Response(self.get_serializer(category).data, status=status.HTTP_200_OK)
