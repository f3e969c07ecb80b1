# public/urls.py
"""
PUBLIC API URLS (STOREFRONT)

Base path (mounted in backend/urls.py):
    /api/public/
"""

from __future__ import annotations

from django.urls import path

from public.views.catalog import (
    PublicCategoryDetailView,
    PublicCategoryListView,
    PublicConfigView,
    PublicDeliveryZoneListView,
    PublicLocationListView,
    PublicOfferListView,
    PublicProductListView,
)
from public.views.checkout import (
    PublicCheckoutQuoteView,
    PublicCheckoutView,
    PublicCouponValidateView,
    PublicCustomerLookupView,
)
from public.views.home import PublicHomeView
from public.views.navigation import RouteResolveView

app_name = "public"

urlpatterns = [
    # Catalog
    path("home/", PublicHomeView.as_view(), name="public-home"),
    path("categories/", PublicCategoryListView.as_view(), name="public-categories"),
    path("categories/<uuid:category_id>/", PublicCategoryDetailView.as_view(), name="public-category-detail"),
    path("products/", PublicProductListView.as_view(), name="public-products"),
    path("offers/", PublicOfferListView.as_view(), name="public-offers"),
    path("locations/", PublicLocationListView.as_view(), name="public-locations"),
    path("delivery-zones/", PublicDeliveryZoneListView.as_view(), name="public-delivery-zones"),
    path("config/", PublicConfigView.as_view(), name="public-config"),

    # Checkout
    path("coupons/validate/", PublicCouponValidateView.as_view(), name="public-coupon-validate"),
    path("checkout/quote/", PublicCheckoutQuoteView.as_view(), name="public-checkout-quote"),
    path("checkout/", PublicCheckoutView.as_view(), name="public-checkout"),
    path("customers/lookup/", PublicCustomerLookupView.as_view(), name="public-customer-lookup"),

    # Navigation
    path("route/", RouteResolveView.as_view(), name="public-route"),
]
