# backend/urls.py
"""
PROJECT URLS

All API routes live under /api/

- /api/public/...   storefront (AllowAny, throttled)
- /api/cart/...     session cart (AllowAny)
- everything else   back-office (JWT + capability)

Storefront deep links (/, /category, /cart, /checkout, /admin, /admin-login)
answer with a JSON bootstrap (resolved route + public settings).

Django admin lives under ADMIN_PATH (default django-admin/) because /admin
belongs to the storefront back-office shell.
"""

from __future__ import annotations

from django.conf import settings
from django.contrib import admin
from django.db import connections
from django.db.utils import OperationalError
from django.urls import include, path
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenRefreshView

from public.views.navigation import StorefrontShellView


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "auth": {"type": "object"},
                "docs": {"type": "object"},
                "modules": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": "Storefront Backend API is running",
            "auth": {
                "login": "/api/auth/login/",
                "me": "/api/auth/me/",
                "jwt_refresh": "/api/auth/jwt/refresh/",
            },
            "docs": {
                "swagger": "/api/docs/",
                "schema": "/api/schema/",
            },
            "modules": {
                "products": "/api/products/",
                "store": "/api/store/",
                "promotions": "/api/promotions/",
                "sales": "/api/sales/",
                "config": "/api/config/",
                "cart": "/api/cart/",
                "public": "/api/public/",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
                "error": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint:
    - Confirms app is responding
    - Confirms DB connection + simple query works
    """
    try:
        conn = connections["default"]
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
        return Response({"status": "ok", "db": "ok"})
    except OperationalError as e:
        return Response(
            {"status": "degraded", "db": "down", "error": str(e)}, status=503
        )


ADMIN_PATH = getattr(settings, "ADMIN_PATH", "django-admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    # Health check / root
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # JWT refresh (login lives in users.urls)
    path("auth/jwt/refresh/", TokenRefreshView.as_view(), name="jwt-refresh"),
    # Auth & Users
    path("auth/", include("users.urls")),
    # Back-office modules
    path("products/", include("products.urls")),
    path("store/", include("store.urls")),
    path("promotions/", include("promotions.urls")),
    path("sales/", include("sales.urls")),
    path("config/", include("siteconfig.urls")),
    # Storefront
    path("cart/", include("cart.urls")),
    path("public/", include("public.urls")),
]

storefront_shell = StorefrontShellView.as_view()

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    path("api/", include(api_urlpatterns)),
    # Storefront deep links
    path("", storefront_shell, name="storefront-home"),
    path("category", storefront_shell, name="storefront-category"),
    path("cart", storefront_shell, name="storefront-cart"),
    path("checkout", storefront_shell, name="storefront-checkout"),
    path("admin", storefront_shell, name="storefront-admin"),
    path("admin-login", storefront_shell, name="storefront-admin-login"),
]
