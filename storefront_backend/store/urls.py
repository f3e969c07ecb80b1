# store/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from store.views import DeliveryZoneViewSet, StoreLocationViewSet

router = DefaultRouter()
router.register(r"locations", StoreLocationViewSet, basename="store-locations")
router.register(r"delivery-zones", DeliveryZoneViewSet, basename="delivery-zones")

urlpatterns = [
    path("", include(router.urls)),
]
