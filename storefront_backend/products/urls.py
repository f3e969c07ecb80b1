# products/urls.py

"""
PRODUCTS URLS (BACK-OFFICE)

Mounted at /api/products/:
- categories/                      CRUD + <id>/visibility/
- products/                        CRUD + <id>/visibility/
- products/<id>/stock/adjust|set|movements/
- products/alerts/low-stock/
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from products.views import CategoryViewSet, ProductViewSet

router = DefaultRouter()

router.register(r"categories", CategoryViewSet, basename="categories")
router.register(r"products", ProductViewSet, basename="products")

urlpatterns = [
    path("", include(router.urls)),
]
