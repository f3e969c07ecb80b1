# public/views/catalog.py

"""
PUBLIC CATALOG (STOREFRONT)

GET /api/public/categories/                 visible categories
GET /api/public/categories/<id>/            category + its visible products
GET /api/public/products/?category=&q=      visible products (search)
GET /api/public/offers/                     today's daily offers
GET /api/public/locations/                  active store locations
GET /api/public/delivery-zones/             active delivery zones (commune picker)
GET /api/public/config/                     public store settings

Rules:
- AllowAny, throttled (public_catalog)
- hidden categories/products and inactive rows are never exposed
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from products.serializers import StorefrontProductSerializer
from products.services.catalog import storefront_categories, storefront_products
from promotions.serializers import StorefrontOfferSerializer
from promotions.services.offers import active_offers
from public.serializers import (
    ProductQuerySerializer,
    PublicCategorySerializer,
    PublicDeliveryZoneSerializer,
    PublicLocationSerializer,
)
from public.throttles import PublicCatalogThrottle
from siteconfig.store_settings import load_store_settings
from store.models import DeliveryZone, StoreLocation

PRIVATE_SETTINGS = {"admin_email"}


def public_store_settings() -> dict:
    payload = load_store_settings().as_payload()
    for key in PRIVATE_SETTINGS:
        payload.pop(key, None)
    return payload


class _PublicReadView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]


class PublicCategoryListView(_PublicReadView):
    @extend_schema(responses={200: PublicCategorySerializer(many=True)}, tags=["Public"])
    def get(self, request):
        data = PublicCategorySerializer(storefront_categories(), many=True).data
        return Response(data, status=status.HTTP_200_OK)


class PublicCategoryDetailView(_PublicReadView):
    @extend_schema(
        responses={
            200: OpenApiResponse(description="{category, products}"),
            404: OpenApiResponse(description="Category not found or hidden"),
        },
        tags=["Public"],
    )
    def get(self, request, category_id):
        category = storefront_categories().filter(id=category_id).first()
        if category is None:
            return Response({"detail": "Categoría no encontrada"}, status=status.HTTP_404_NOT_FOUND)

        products = storefront_products(category_id=category.id)
        return Response(
            {
                "category": PublicCategorySerializer(category).data,
                "products": StorefrontProductSerializer(products, many=True).data,
            }
        )


class PublicProductListView(_PublicReadView):
    @extend_schema(
        parameters=[
            OpenApiParameter(name="category", type=str, location=OpenApiParameter.QUERY, required=False),
            OpenApiParameter(name="q", type=str, location=OpenApiParameter.QUERY, required=False),
        ],
        responses={200: StorefrontProductSerializer(many=True)},
        tags=["Public"],
    )
    def get(self, request):
        s = ProductQuerySerializer(data=request.query_params)
        s.is_valid(raise_exception=True)

        qs = storefront_products(category_id=s.validated_data.get("category"), q=s.validated_data["q"])
        return Response(StorefrontProductSerializer(qs, many=True).data, status=status.HTTP_200_OK)


class PublicOfferListView(_PublicReadView):
    @extend_schema(responses={200: StorefrontOfferSerializer(many=True)}, tags=["Public"])
    def get(self, request):
        return Response(StorefrontOfferSerializer(active_offers(), many=True).data)


class PublicLocationListView(_PublicReadView):
    @extend_schema(responses={200: PublicLocationSerializer(many=True)}, tags=["Public"])
    def get(self, request):
        qs = StoreLocation.objects.filter(is_active=True).order_by("name")
        return Response(PublicLocationSerializer(qs, many=True).data)


class PublicDeliveryZoneListView(_PublicReadView):
    @extend_schema(responses={200: PublicDeliveryZoneSerializer(many=True)}, tags=["Public"])
    def get(self, request):
        qs = DeliveryZone.objects.filter(is_active=True).order_by("name")
        return Response(PublicDeliveryZoneSerializer(qs, many=True).data)


class PublicConfigView(_PublicReadView):
    @extend_schema(responses={200: OpenApiResponse(description="Public store settings")}, tags=["Public"])
    def get(self, request):
        return Response(public_store_settings())
