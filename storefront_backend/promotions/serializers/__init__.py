# promotions/serializers/__init__.py

from .coupon import CouponSerializer, CouponUsageSerializer, CouponValidateInputSerializer
from .daily_offer import DailyOfferSerializer, StorefrontOfferSerializer

__all__ = [
    "CouponSerializer",
    "CouponUsageSerializer",
    "CouponValidateInputSerializer",
    "DailyOfferSerializer",
    "StorefrontOfferSerializer",
]
