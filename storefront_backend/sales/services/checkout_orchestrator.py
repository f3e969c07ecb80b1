# sales/services/checkout_orchestrator.py

"""
CHECKOUT ORCHESTRATOR (APPLICATION SERVICE)

Purpose:
- Turn the session cart into an Order (atomic) and hand back everything the
  confirmation screen needs.

Flow:
1) read cart lines, re-validate the coupon server-side, price the order
   (sales.services.pricing)
2) collect ALL validation errors (contact fields, empty cart, minimum order)
   and raise them together BEFORE any write
3) one transaction: readable order id, customer upsert by phone,
   Order + OrderItem rows
4) best-effort side effects (logged, never roll back the order):
   coupon usage, daily analytics
5) clear the cart, build the confirmation summary + WhatsApp link

Hard rules:
- A database failure in step 3 raises OrderSubmissionError and leaves the
  cart untouched so the shopper can simply retry.
- Totals are computed here; whatever the client displayed is ignored.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from django.conf import settings
from django.db import DatabaseError, transaction
from django.utils import timezone

from products.models import Product
from promotions.services.coupons import record_coupon_usage, validate_coupon
from sales.models import Order, OrderItem
from sales.services.analytics import record_daily_order
from sales.services.customers import normalize_phone, upsert_by_phone
from sales.services.messaging import build_whatsapp_url, format_clp, order_confirmation_message
from sales.services.pricing import DISCOUNT_FIXED, AppliedCoupon, OrderQuote, compute_subtotal, quote_order
from siteconfig.store_settings import StoreSettings, load_store_settings

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")
BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ORDER_ID_ATTEMPTS = 5

MSG_NAME_REQUIRED = "El nombre es requerido"
MSG_PHONE_REQUIRED = "El teléfono es requerido"
MSG_ADDRESS_REQUIRED = "La dirección es requerida"
MSG_COMMUNE_REQUIRED = "Debes seleccionar una comuna"
MSG_CART_EMPTY = "Tu carrito está vacío"
MSG_MINIMUM_ORDER = "El pedido mínimo es {amount}"
MSG_SUBMISSION_FAILED = "No pudimos registrar tu pedido. Inténtalo nuevamente."


def _money(v) -> Decimal:
    if v is None or v == "":
        return Decimal("0.00")
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


# ============================================================
# ERRORS
# ============================================================


class CheckoutError(Exception):
    """Base checkout exception"""


class CheckoutValidationError(CheckoutError):
    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__("; ".join(m for msgs in errors.values() for m in msgs))


class OrderSubmissionError(CheckoutError):
    pass


# ============================================================
# INPUT / OUTPUT
# ============================================================


@dataclass(frozen=True)
class CheckoutContact:
    name: str
    phone: str
    address: str
    commune: str
    email: str = ""
    notes: str = ""


@dataclass(frozen=True)
class PlacedOrder:
    order: Order
    quote: OrderQuote
    customer_code: str
    estimated_delivery: str
    confirmation_message: str
    whatsapp_url: str
    lines: list = field(default_factory=list)

    def as_payload(self) -> dict:
        order = self.order
        return {
            "order_id": order.id,
            "customer_code": self.customer_code,
            "status": order.status,
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "customer_phone": order.customer_phone,
            "address": order.address,
            "commune": order.commune,
            "coupon_code": order.coupon_code or None,
            "items": [
                {
                    "product_id": str(i.product_id) if i.product_id else None,
                    "name": i.product_name,
                    "unit_type": i.unit_type,
                    "quantity": f"{i.quantity:.3f}",
                    "price": f"{i.price:.2f}",
                    "line_total": f"{i.line_total:.2f}",
                }
                for i in self.lines
            ],
            "subtotal": f"{order.subtotal:.2f}",
            "discount": f"{order.discount:.2f}",
            "delivery_fee": f"{order.delivery_fee:.2f}",
            "total": f"{order.total:.2f}",
            "estimated_delivery": self.estimated_delivery,
            "confirmation_message": self.confirmation_message,
            "whatsapp_url": self.whatsapp_url,
            "created_at": order.created_at.isoformat() if order.created_at else None,
        }


# ============================================================
# HELPERS
# ============================================================


def customer_code(name: str, phone: str) -> str:
    """'Ana María', '+56 9 1234 5678' -> 'ANA5678'"""
    name_part = "".join((name or "").split())[:3].upper()
    digits = "".join(ch for ch in (phone or "") if ch.isdigit())
    return f"{name_part}{digits[-4:]}"


def generate_order_id(*, now=None, prefix: str | None = None) -> str:
    now = timezone.localtime(now or timezone.now())
    prefix = prefix or getattr(settings, "STOREFRONT_ORDER_PREFIX", "KT")
    suffix = "".join(secrets.choice(BASE36) for _ in range(4))
    return f"{prefix}-{now:%Y%m%d}-{now:%H%M}-{suffix}"


def _unique_order_id(now) -> str:
    for _ in range(ORDER_ID_ATTEMPTS):
        candidate = generate_order_id(now=now)
        if not Order.objects.filter(pk=candidate).exists():
            return candidate
    raise OrderSubmissionError("Could not allocate a unique order id")


def resolve_coupon(code: str | None, order_total) -> tuple[Optional[AppliedCoupon], list[str]]:
    """
    Server-side re-validation. The validated discount amount is applied as a
    fixed amount (cap already folded in).
    """
    code = (code or "").strip()
    if not code:
        return None, []

    result = validate_coupon(code, order_total)
    if not result.valid:
        return None, [result.message]

    return (
        AppliedCoupon(
            code=result.code,
            discount_type=DISCOUNT_FIXED,
            value=result.discount_amount,
            coupon_id=result.coupon_id,
        ),
        [],
    )


def validate_checkout(*, lines: list, contact: CheckoutContact, quote: OrderQuote) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}

    def add(key: str, message: str):
        errors.setdefault(key, []).append(message)

    if not (contact.name or "").strip():
        add("name", MSG_NAME_REQUIRED)
    if not normalize_phone(contact.phone):
        add("phone", MSG_PHONE_REQUIRED)
    if not (contact.address or "").strip():
        add("address", MSG_ADDRESS_REQUIRED)
    if not (contact.commune or "").strip():
        add("commune", MSG_COMMUNE_REQUIRED)

    if not lines:
        add("items", MSG_CART_EMPTY)
    elif not quote.meets_minimum:
        add("total", MSG_MINIMUM_ORDER.format(amount=format_clp(quote.minimum_order)))

    return errors


def quote_cart(*, lines: list, commune: str, coupon_code: str = "", store_settings: StoreSettings):
    """
    Read-only pricing of the cart (quote endpoint + first half of checkout).
    Returns (quote, coupon, coupon_errors).
    """
    coupon, coupon_errors = resolve_coupon(coupon_code, compute_subtotal(lines))
    quote = quote_order(
        lines=lines,
        commune=commune,
        store_settings=store_settings,
        coupon=coupon,
    )
    return quote, coupon, coupon_errors


def prepare_checkout(*, lines: list, contact: CheckoutContact, coupon_code: str = "", store_settings: StoreSettings):
    """Returns (quote, coupon, errors); nothing is written."""
    quote, coupon, coupon_errors = quote_cart(
        lines=lines,
        commune=contact.commune,
        coupon_code=coupon_code,
        store_settings=store_settings,
    )

    errors = validate_checkout(lines=lines, contact=contact, quote=quote)
    if coupon_errors:
        errors["coupon_code"] = coupon_errors

    return quote, coupon, errors


# ============================================================
# ORCHESTRATION
# ============================================================


@transaction.atomic
def _create_order(*, lines: list, contact: CheckoutContact, quote: OrderQuote, coupon: Optional[AppliedCoupon], now):
    customer, created = upsert_by_phone(
        phone=contact.phone,
        name=contact.name,
        email=contact.email,
        address=contact.address,
        commune=contact.commune,
    )

    order = Order.objects.create(
        id=_unique_order_id(now),
        customer=customer,
        customer_name=contact.name.strip(),
        customer_email=(contact.email or "").strip(),
        customer_phone=normalize_phone(contact.phone),
        address=contact.address.strip(),
        commune=quote.delivery.commune,
        notes=(contact.notes or "").strip(),
        status=Order.STATUS_PENDING,
        subtotal=quote.subtotal,
        discount=quote.discount,
        delivery_fee=quote.delivery_fee,
        total=quote.total,
        coupon_code=coupon.code if coupon else "",
        estimated_delivery=quote.delivery.estimated_time,
    )

    existing = set(
        Product.objects.filter(id__in=[l.product_id for l in lines]).values_list("id", flat=True)
    )

    items = OrderItem.objects.bulk_create(
        [
            OrderItem(
                order=order,
                product_id=l.product_id if l.product_id in existing else None,
                product_name=l.name,
                unit_type=l.unit_type,
                quantity=Decimal(str(l.quantity)),
                price=_money(l.price),
                line_total=_money(Decimal(str(l.price)) * Decimal(str(l.quantity))),
            )
            for l in lines
        ]
    )

    return order, customer, created, items


def place_order(
    *,
    cart,
    contact: CheckoutContact,
    coupon_code: str = "",
    store_settings: StoreSettings | None = None,
) -> PlacedOrder:
    store_settings = store_settings or load_store_settings()
    lines = cart.lines()

    quote, coupon, errors = prepare_checkout(
        lines=lines,
        contact=contact,
        coupon_code=coupon_code,
        store_settings=store_settings,
    )
    if errors:
        raise CheckoutValidationError(errors)

    now = timezone.now()

    try:
        order, customer, created, items = _create_order(
            lines=lines,
            contact=contact,
            quote=quote,
            coupon=coupon,
            now=now,
        )
    except DatabaseError as exc:
        logger.exception("Order creation failed", extra={"commune": contact.commune})
        raise OrderSubmissionError(MSG_SUBMISSION_FAILED) from exc

    if coupon is not None and coupon.coupon_id:
        try:
            record_coupon_usage(
                coupon_id=coupon.coupon_id,
                order_id=order.id,
                customer=customer,
                discount_amount=quote.discount,
            )
        except Exception:
            logger.exception(
                "Coupon usage could not be recorded",
                extra={"order_id": order.id, "coupon_code": coupon.code},
            )

    try:
        record_daily_order(total=order.total, new_customer=created)
    except Exception:
        logger.exception("Daily analytics update failed", extra={"order_id": order.id})

    cart.clear()

    code = customer_code(contact.name, contact.phone)
    message = order_confirmation_message(
        order_id=order.id,
        customer_name=order.customer_name,
        customer_code=code,
        total=order.total,
        address=order.address,
        commune=order.commune,
        estimated_delivery=order.estimated_delivery,
    )

    logger.info(
        "Order placed",
        extra={"order_id": order.id, "total": str(order.total), "commune": order.commune},
    )

    return PlacedOrder(
        order=order,
        quote=quote,
        customer_code=code,
        estimated_delivery=order.estimated_delivery,
        confirmation_message=store_settings.confirmation_message,
        whatsapp_url=build_whatsapp_url(store_settings.whatsapp_number, message),
        lines=list(items),
    )
