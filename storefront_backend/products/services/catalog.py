# products/services/catalog.py

"""
CATALOG VISIBILITY RULES

Storefront reads:
- visible categories, ordered by display_order then name
- visible products of a category, ordered by name
- free-text search over name + description

Back-office writes:
- toggles take an explicit target value, so repeating a request is harmless
  and two toggles restore the original state
"""

from __future__ import annotations

from django.db.models import F, Q

from products.models import Category, Product


def storefront_categories():
    return Category.objects.filter(is_visible=True).order_by("display_order", "name")


def storefront_products(*, category_id=None, q: str = ""):
    qs = Product.objects.filter(is_visible=True).select_related("category")

    # products of a hidden category are hidden as well
    qs = qs.filter(Q(category__isnull=True) | Q(category__is_visible=True))

    if category_id:
        qs = qs.filter(category_id=category_id)

    q = (q or "").strip()
    if q:
        qs = qs.filter(Q(name__icontains=q) | Q(description__icontains=q))

    return qs.order_by("name")


def set_visibility(instance, *, is_visible: bool):
    """Category or Product. Writes only when the value actually changes."""
    is_visible = bool(is_visible)
    if instance.is_visible != is_visible:
        instance.is_visible = is_visible
        instance.save(update_fields=["is_visible", "updated_at"])
    return instance


def low_stock_products():
    return (
        Product.objects.select_related("category")
        .filter(stock__lte=F("low_stock_threshold"))
        .order_by("stock", "name")
    )
