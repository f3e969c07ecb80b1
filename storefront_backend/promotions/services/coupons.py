# promotions/services/coupons.py

"""
COUPON VALIDATION + USAGE

Purpose:
- validate_coupon: answer "can this code be applied to this order total,
  and for how much?" without writing anything.
- record_coupon_usage: bump used_count (F-expression) and append a
  CouponUsage row once an order has been created.

Validation order (first failing rule wins):
1) unknown code
2) inactive
3) not yet started
4) expired
5) usage limit reached
6) order total below min_order_amount

Discount:
- percentage -> round_half_up(total * value / 100) to whole currency units
- fixed      -> value
- then capped by max_discount_amount (when set) and never above the total

Messages are shown to shoppers as-is (Spanish storefront).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from promotions.models import Coupon, CouponUsage

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")
WHOLE = Decimal("1")

MSG_INVALID = "Cupón no válido"
MSG_INACTIVE = "Este cupón no está activo"
MSG_NOT_STARTED = "Este cupón aún no está vigente"
MSG_EXPIRED = "Este cupón ha expirado"
MSG_LIMIT_REACHED = "Este cupón alcanzó su límite de usos"
MSG_MINIMUM = "El monto mínimo para usar este cupón es ${amount}"
MSG_OK = "Cupón aplicado exitosamente"


class CouponError(Exception):
    """Domain error for coupon writes."""


@dataclass(frozen=True)
class CouponValidation:
    valid: bool
    discount_amount: Decimal = Decimal("0.00")
    coupon_id: Optional[str] = None
    code: str = ""
    message: str = ""

    def as_payload(self) -> dict:
        return {
            "valid": self.valid,
            "discount_amount": f"{self.discount_amount:.2f}",
            "coupon_id": self.coupon_id,
            "code": self.code,
            "message": self.message,
        }


def _money(v) -> Decimal:
    if v is None or v == "":
        return Decimal("0.00")
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def normalize_code(code: str | None) -> str:
    return (code or "").strip().upper()


def compute_coupon_discount(coupon: Coupon, order_total) -> Decimal:
    total = Decimal(str(order_total))

    if coupon.discount_type == Coupon.TYPE_PERCENTAGE:
        raw = (total * Decimal(coupon.value) / Decimal("100")).quantize(WHOLE, rounding=ROUND_HALF_UP)
    else:
        raw = Decimal(coupon.value)

    if coupon.max_discount_amount is not None:
        raw = min(raw, Decimal(coupon.max_discount_amount))

    return _money(max(Decimal("0"), min(raw, total)))


def _format_amount(amount: Decimal) -> str:
    return f"{int(amount.quantize(WHOLE, rounding=ROUND_HALF_UP)):,}".replace(",", ".")


def validate_coupon(code: str | None, order_total, now=None) -> CouponValidation:
    normalized = normalize_code(code)
    if not normalized:
        return CouponValidation(valid=False, message=MSG_INVALID)

    try:
        total = Decimal(str(order_total))
    except (InvalidOperation, ValueError):
        return CouponValidation(valid=False, code=normalized, message=MSG_INVALID)
    if not total.is_finite():
        return CouponValidation(valid=False, code=normalized, message=MSG_INVALID)

    coupon = Coupon.objects.filter(code=normalized).first()
    if coupon is None:
        return CouponValidation(valid=False, code=normalized, message=MSG_INVALID)

    now = now or timezone.now()

    def _reject(message: str) -> CouponValidation:
        return CouponValidation(
            valid=False,
            coupon_id=str(coupon.id),
            code=coupon.code,
            message=message,
        )

    if not coupon.is_active:
        return _reject(MSG_INACTIVE)

    if coupon.start_date and now < coupon.start_date:
        return _reject(MSG_NOT_STARTED)

    if coupon.end_date and now > coupon.end_date:
        return _reject(MSG_EXPIRED)

    if coupon.usage_limit is not None and coupon.used_count >= coupon.usage_limit:
        return _reject(MSG_LIMIT_REACHED)

    minimum = Decimal(coupon.min_order_amount or 0)
    if total < minimum:
        return _reject(MSG_MINIMUM.format(amount=_format_amount(minimum)))

    return CouponValidation(
        valid=True,
        discount_amount=compute_coupon_discount(coupon, total),
        coupon_id=str(coupon.id),
        code=coupon.code,
        message=MSG_OK,
    )


@transaction.atomic
def record_coupon_usage(*, coupon_id, order_id: str, customer=None, discount_amount) -> CouponUsage:
    if not coupon_id:
        raise CouponError("coupon_id is required")
    if not order_id:
        raise CouponError("order_id is required")

    updated = Coupon.objects.filter(pk=coupon_id).update(
        used_count=F("used_count") + 1,
        updated_at=timezone.now(),
    )
    if not updated:
        raise CouponError(f"Coupon {coupon_id} does not exist")

    usage = CouponUsage.objects.create(
        coupon_id=coupon_id,
        order_id=order_id,
        customer=customer,
        discount_amount=_money(discount_amount),
    )

    logger.info(
        "Coupon usage recorded",
        extra={"coupon_id": str(coupon_id), "order_id": order_id},
    )
    return usage
