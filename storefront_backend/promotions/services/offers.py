# promotions/services/offers.py

"""
DAILY OFFERS

Storefront:
- active offers whose [start_date, end_date] window contains today
- products hidden from the storefront never show up as offers
- newest offer first
"""

from __future__ import annotations

from django.utils import timezone

from promotions.models import DailyOffer


def active_offers(*, today=None):
    today = today or timezone.localdate()
    return (
        DailyOffer.objects.select_related("product", "product__category")
        .filter(
            is_active=True,
            start_date__lte=today,
            end_date__gte=today,
            product__is_visible=True,
        )
        .order_by("-created_at")
    )


def set_active(instance, *, is_active: bool):
    """Coupon or DailyOffer. Writes only when the value changes."""
    is_active = bool(is_active)
    if instance.is_active != is_active:
        instance.is_active = is_active
        instance.save(update_fields=["is_active", "updated_at"])
    return instance
