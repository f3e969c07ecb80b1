# sales/services/pricing.py

"""
CHECKOUT PRICING (PURE COMPUTATION)

Pipeline:
    subtotal -> discount -> delivery fee (by commune) -> final total -> minimum check

Rules:
- subtotal = sum(price * quantity); no intermediate rounding, order-independent
- discount:
    percentage -> round_half_up(subtotal * value / 100) to whole currency units
    fixed      -> value
  no cap here: the cap is already folded into the amount returned by
  promotions.services.coupons.validate_coupon
- delivery fee precedence:
    1) free override (zone.is_free_delivery or commune in free_delivery_communes) -> 0
    2) active zone for the commune -> zone.delivery_price
    3) flat shipping_cost from store settings
- final_total = subtotal - discount + delivery_fee
- an order is acceptable only when final_total >= minimum_order

Only the delivery lookup touches the database (store.services.delivery).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from siteconfig.store_settings import StoreSettings
from store.services.delivery import find_active_zone, normalize_commune

TWOPLACES = Decimal("0.01")
WHOLE = Decimal("1")

DISCOUNT_PERCENTAGE = "percentage"
DISCOUNT_FIXED = "fixed"


def _money(v) -> Decimal:
    if v is None or v == "":
        return Decimal("0.00")
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class AppliedCoupon:
    code: str
    discount_type: str
    value: Decimal
    coupon_id: Optional[str] = None


@dataclass(frozen=True)
class DeliveryQuote:
    commune: str
    fee: Decimal
    estimated_time: str
    is_free: bool
    source: str  # "free_zone" | "free_config" | "zone" | "flat"
    delivery_available: bool


@dataclass(frozen=True)
class OrderQuote:
    subtotal: Decimal
    discount: Decimal
    delivery: DeliveryQuote
    total: Decimal
    minimum_order: Decimal

    @property
    def delivery_fee(self) -> Decimal:
        return self.delivery.fee

    @property
    def meets_minimum(self) -> bool:
        return self.total >= self.minimum_order

    def as_payload(self) -> dict:
        return {
            "subtotal": f"{self.subtotal:.2f}",
            "discount": f"{self.discount:.2f}",
            "delivery_fee": f"{self.delivery.fee:.2f}",
            "total": f"{self.total:.2f}",
            "minimum_order": f"{self.minimum_order:.2f}",
            "meets_minimum": self.meets_minimum,
            "missing_for_minimum": f"{max(Decimal('0'), self.minimum_order - self.total):.2f}",
            "delivery": {
                "commune": self.delivery.commune,
                "fee": f"{self.delivery.fee:.2f}",
                "is_free": self.delivery.is_free,
                "estimated_time": self.delivery.estimated_time,
                "source": self.delivery.source,
                "delivery_available": self.delivery.delivery_available,
            },
        }


def compute_subtotal(lines: Iterable) -> Decimal:
    """
    lines: objects or dicts exposing price + quantity.
    """
    total = Decimal("0")
    for line in lines:
        if isinstance(line, dict):
            price, qty = line["price"], line["quantity"]
        else:
            price, qty = line.price, line.quantity
        total += Decimal(str(price)) * Decimal(str(qty))
    return total


def compute_discount(subtotal: Decimal, coupon: Optional[AppliedCoupon]) -> Decimal:
    if coupon is None:
        return Decimal("0.00")

    value = Decimal(str(coupon.value))
    if coupon.discount_type == DISCOUNT_PERCENTAGE:
        amount = (Decimal(subtotal) * value / Decimal("100")).quantize(WHOLE, rounding=ROUND_HALF_UP)
    else:
        amount = value

    return _money(amount)


def _in_names(commune: str, names) -> bool:
    key = commune.casefold()
    return any(normalize_commune(n).casefold() == key for n in names or ())


def resolve_delivery(commune: str | None, store_settings: StoreSettings) -> DeliveryQuote:
    name = normalize_commune(commune)
    zone = find_active_zone(name) if name else None

    allowlist = store_settings.available_communes
    delivery_available = bool(zone) or not allowlist or _in_names(name, allowlist)

    if zone is not None:
        estimated = zone.estimated_time or store_settings.delivery_time
        if zone.is_free_delivery:
            return DeliveryQuote(name, Decimal("0.00"), estimated, True, "free_zone", delivery_available)
    else:
        estimated = store_settings.delivery_time

    if name and _in_names(name, store_settings.free_delivery_communes):
        return DeliveryQuote(name, Decimal("0.00"), estimated, True, "free_config", delivery_available)

    if zone is not None:
        fee = _money(zone.delivery_price)
        return DeliveryQuote(name, fee, estimated, fee == 0, "zone", delivery_available)

    fee = _money(store_settings.shipping_cost)
    return DeliveryQuote(name, fee, estimated, fee == 0, "flat", delivery_available)


def quote_order(
    *,
    lines: Iterable,
    commune: str | None,
    store_settings: StoreSettings,
    coupon: Optional[AppliedCoupon] = None,
) -> OrderQuote:
    subtotal = compute_subtotal(lines)
    discount = compute_discount(subtotal, coupon)
    delivery = resolve_delivery(commune, store_settings)

    total = _money(subtotal - discount + delivery.fee)

    return OrderQuote(
        subtotal=_money(subtotal),
        discount=discount,
        delivery=delivery,
        total=total,
        minimum_order=_money(store_settings.minimum_order),
    )
