# sales/services/analytics.py

"""
DASHBOARD ANALYTICS

Reads:
- daily_rows: last N DailyAnalytics rows (newest first)
- top_products: order item quantity summed per product
- inventory_alerts: products at or below their low-stock threshold
- frequent_customers: customers ranked by number of orders
- sales_by_category: order item revenue per category + share in percent

Write:
- record_daily_order: bump today's rollup for an accepted order
  (called best-effort by checkout)
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

from django.db import transaction
from django.db.models import Count, DecimalField, ExpressionWrapper, F, Q, Sum
from django.utils import timezone

from products.models import Category
from products.services.catalog import low_stock_products
from sales.models import Customer, DailyAnalytics, Order, OrderItem

DEFAULT_DAYS = 30
DEFAULT_LIMIT = 5


def daily_rows(*, days: int = DEFAULT_DAYS):
    return DailyAnalytics.objects.order_by("-date")[:days]


def top_products(*, limit: int = DEFAULT_LIMIT) -> list[dict]:
    rows = (
        OrderItem.objects.exclude(order__status=Order.STATUS_CANCELLED)
        .values("product_id", "product_name")
        .annotate(quantity=Sum("quantity"))
        .order_by("-quantity", "product_name")
    )

    # items of deleted products share product_id=None; group them by name
    merged: dict = {}
    for row in rows:
        key = row["product_id"] or f"name:{row['product_name']}"
        entry = merged.setdefault(
            key,
            {"product_id": row["product_id"], "name": row["product_name"], "quantity": Decimal("0")},
        )
        entry["quantity"] += row["quantity"] or Decimal("0")

    ranked = sorted(merged.values(), key=lambda r: (-r["quantity"], r["name"]))
    return [
        {
            "product_id": str(r["product_id"]) if r["product_id"] else None,
            "name": r["name"],
            "quantity": f"{r['quantity']:.3f}",
        }
        for r in ranked[:limit]
    ]


def inventory_alerts() -> list[dict]:
    return [
        {
            "id": str(p.id),
            "name": p.name,
            "stock": f"{p.stock:.3f}",
            "low_stock_threshold": f"{p.low_stock_threshold:.3f}",
        }
        for p in low_stock_products()
    ]


def frequent_customers(*, limit: int = DEFAULT_LIMIT) -> list[dict]:
    qs = (
        Customer.objects.annotate(
            order_count=Count("orders", filter=~Q(orders__status=Order.STATUS_CANCELLED))
        )
        .filter(order_count__gt=0)
        .order_by("-order_count", "name")[:limit]
    )
    return [{"id": str(c.id), "name": c.name, "orders": c.order_count} for c in qs]


def sales_by_category() -> list[dict]:
    line_amount = ExpressionWrapper(
        F("quantity") * F("price"),
        output_field=DecimalField(max_digits=16, decimal_places=5),
    )
    amounts = dict(
        OrderItem.objects.exclude(order__status=Order.STATUS_CANCELLED)
        .filter(product__category__isnull=False)
        .values("product__category_id")
        .annotate(amount=Sum(line_amount))
        .values_list("product__category_id", "amount")
    )

    grand_total = sum((a or Decimal("0") for a in amounts.values()), Decimal("0"))

    out = []
    for category in Category.objects.order_by("display_order", "name"):
        amount = Decimal(amounts.get(category.id) or 0)
        pct = 0
        if grand_total > 0:
            pct = int((amount / grand_total * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        out.append(
            {
                "category_id": str(category.id),
                "category": category.name,
                "amount": f"{amount:.2f}",
                "percentage": pct,
            }
        )

    out.sort(key=lambda r: Decimal(r["amount"]), reverse=True)
    return out


@transaction.atomic
def record_daily_order(*, total, new_customer: bool = False, day=None) -> DailyAnalytics:
    day = day or timezone.localdate()

    # get_or_create re-selects when a concurrent checkout inserted the day first
    row, _ = DailyAnalytics.objects.get_or_create(date=day)

    DailyAnalytics.objects.filter(pk=row.pk).update(
        total_sales=F("total_sales") + Decimal(str(total)),
        total_orders=F("total_orders") + 1,
        new_customers=F("new_customers") + (1 if new_customer else 0),
        updated_at=timezone.now(),
    )
    row.refresh_from_db()
    return row
