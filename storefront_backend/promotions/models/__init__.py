from .coupon import Coupon, CouponUsage
from .daily_offer import DailyOffer

__all__ = [
    "Coupon",
    "CouponUsage",
    "DailyOffer",
]
