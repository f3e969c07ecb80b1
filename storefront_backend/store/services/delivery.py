# store/services/delivery.py

"""
DELIVERY ZONE LOOKUP

- commune matching is trimmed + case-insensitive
- only active zones count; an inactive zone behaves as if it did not exist
"""

from __future__ import annotations

from typing import Optional

from store.models import DeliveryZone


def normalize_commune(value: str | None) -> str:
    return " ".join((value or "").split())


def find_active_zone(commune: str | None) -> Optional[DeliveryZone]:
    name = normalize_commune(commune)
    if not name:
        return None
    return DeliveryZone.objects.filter(name__iexact=name, is_active=True).first()


def set_active(instance, *, is_active: bool):
    """DeliveryZone or StoreLocation. Writes only when the value changes."""
    is_active = bool(is_active)
    if instance.is_active != is_active:
        instance.is_active = is_active
        instance.save(update_fields=["is_active", "updated_at"])
    return instance
