# sales/services/customers.py

"""
CUSTOMERS

- with_stats(): total_orders / total_spent / last_order_at computed by
  annotation (cancelled orders do not count), never stored
- upsert_by_phone(): checkout identity; existing customer gets the latest
  contact details, otherwise a new one is created
"""

from __future__ import annotations

from decimal import Decimal

from django.db.models import Count, DecimalField, Max, Q, Sum, Value
from django.db.models.functions import Coalesce

from sales.models import Customer, Order


def normalize_phone(phone: str | None) -> str:
    return "".join((phone or "").split())


def with_stats(qs=None):
    qs = qs if qs is not None else Customer.objects.all()
    counted = ~Q(orders__status=Order.STATUS_CANCELLED)
    return qs.annotate(
        total_orders=Count("orders", filter=counted, distinct=True),
        total_spent=Coalesce(
            Sum("orders__total", filter=counted),
            Value(Decimal("0.00")),
            output_field=DecimalField(max_digits=14, decimal_places=2),
        ),
        last_order_at=Max("orders__created_at"),
    )


def find_by_phone(phone: str | None):
    phone = normalize_phone(phone)
    if not phone:
        return None
    return Customer.objects.filter(phone=phone).first()


def upsert_by_phone(*, phone: str, name: str, email: str = "", address: str = "", commune: str = ""):
    """
    Returns (customer, created).
    Caller owns the transaction.
    """
    phone = normalize_phone(phone)
    fields = {
        "name": (name or "").strip(),
        "email": (email or "").strip(),
        "address": (address or "").strip(),
        "commune": (commune or "").strip(),
    }

    customer = Customer.objects.select_for_update().filter(phone=phone).first()
    if customer is None:
        return Customer.objects.create(phone=phone, **fields), True

    changed = [k for k, v in fields.items() if getattr(customer, k) != v]
    if changed:
        for k in changed:
            setattr(customer, k, fields[k])
        customer.save(update_fields=changed + ["updated_at"])
    return customer, False
