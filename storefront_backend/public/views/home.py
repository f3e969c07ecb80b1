# public/views/home.py

"""
STOREFRONT HOME

GET /api/public/home/

Each region is rendered independently (public.regions.RegionSupervisor):
    {"info_bar": {"ok": true, "data": {...}}, "offers": {"ok": false, "error": "..."}, ...}

Disabled regions (info bar / footer flags) render as data=null.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from products.services.catalog import storefront_categories
from promotions.serializers import StorefrontOfferSerializer
from promotions.services.offers import active_offers
from public.regions import RegionSupervisor
from public.serializers import PublicCategorySerializer, PublicLocationSerializer
from public.throttles import PublicCatalogThrottle
from sales.services.messaging import inquiry_url
from siteconfig.store_settings import load_store_settings
from store.models import StoreLocation


def home_regions(store_settings) -> dict:
    s = store_settings

    def info_bar():
        if not s.info_bar_active:
            return None
        return {
            "message": s.info_bar_message,
            "secondary": s.info_bar_secondary,
            "whatsapp_number": s.whatsapp_number,
            "business_hours": s.business_hours,
        }

    def hero():
        return {"title": s.hero_title, "subtitle": s.hero_subtitle}

    def offers():
        return {
            "title": s.offers_section_title,
            "items": StorefrontOfferSerializer(active_offers(), many=True).data,
        }

    def categories():
        return {
            "title": s.categories_section_title,
            "items": PublicCategorySerializer(storefront_categories(), many=True).data,
        }

    def locations():
        qs = StoreLocation.objects.filter(is_active=True).order_by("name")
        return PublicLocationSerializer(qs, many=True).data

    def footer():
        if not s.footer_active:
            return None
        return {
            "company_name": s.footer_company_name,
            "description": s.footer_description,
            "address": s.footer_address,
            "phone": s.footer_phone,
            "email": s.footer_email,
            "social": {
                "facebook": s.footer_social_facebook,
                "instagram": s.footer_social_instagram,
            },
        }

    def contact():
        return {"whatsapp_url": inquiry_url(s.whatsapp_number)}

    return {
        "info_bar": info_bar,
        "hero": hero,
        "offers": offers,
        "categories": categories,
        "locations": locations,
        "footer": footer,
        "contact": contact,
    }


class PublicHomeView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(responses={200: OpenApiResponse(description="Home regions")}, tags=["Public"])
    def get(self, request):
        regions = home_regions(load_store_settings())
        return Response(RegionSupervisor().render(regions))
