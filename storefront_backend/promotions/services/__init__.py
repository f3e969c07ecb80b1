from .coupons import (
    CouponError,
    CouponValidation,
    record_coupon_usage,
    validate_coupon,
)
from .offers import active_offers, set_active

__all__ = [
    "CouponError",
    "CouponValidation",
    "active_offers",
    "record_coupon_usage",
    "set_active",
    "validate_coupon",
]
