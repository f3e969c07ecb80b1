# siteconfig/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from siteconfig.views import SystemConfigurationViewSet

router = DefaultRouter()
router.register(r"entries", SystemConfigurationViewSet, basename="config-entries")

urlpatterns = [
    path("", include(router.urls)),
]
