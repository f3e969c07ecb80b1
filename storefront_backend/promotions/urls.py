# promotions/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from promotions.views import CouponViewSet, DailyOfferViewSet

router = DefaultRouter()
router.register(r"coupons", CouponViewSet, basename="coupons")
router.register(r"daily-offers", DailyOfferViewSet, basename="daily-offers")

urlpatterns = [
    path("", include(router.urls)),
]
