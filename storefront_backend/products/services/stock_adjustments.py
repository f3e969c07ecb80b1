# products/services/stock_adjustments.py

"""
STOCK ADJUSTMENTS SERVICE

Purpose:
- The ONLY write path for Product.stock from the back-office inventory screen.
- Every change leaves an immutable StockMovement row.

Rules:
- quantities are Decimals with 3 places (fractional kg)
- adjust: delta must be non-zero; result cannot go below zero
- set: new stock must be >= 0; setting the same value is a no-op (no movement row)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from products.models import Product, StockMovement

QTY_PLACES = Decimal("0.001")


class StockAdjustmentError(Exception):
    """Domain error for adjustment failures."""


@dataclass(frozen=True)
class AdjustmentResult:
    product: Product
    movement: Optional[StockMovement]
    quantity_delta: Decimal


def _to_qty(value, *, field: str) -> Decimal:
    if value is None or value == "":
        raise StockAdjustmentError(f"{field} is required")

    if isinstance(value, bool):
        raise StockAdjustmentError(f"{field} must be a number")

    try:
        qty = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise StockAdjustmentError(f"{field} must be a number")

    if not qty.is_finite():
        raise StockAdjustmentError(f"{field} must be a number")

    return qty.quantize(QTY_PLACES, rounding=ROUND_HALF_UP)


def _record(*, product: Product, delta: Decimal, reason: str, user, note: str) -> StockMovement:
    movement_type = StockMovement.MovementType.IN if delta > 0 else StockMovement.MovementType.OUT
    try:
        return StockMovement.objects.create(
            product=product,
            movement_type=movement_type,
            reason=reason,
            quantity=abs(delta),
            stock_after=product.stock,
            note=(note or "").strip()[:255],
            performed_by=user,
        )
    except ValidationError as exc:
        raise StockAdjustmentError(str(exc)) from exc


@transaction.atomic
def adjust_product_stock(
    *,
    product: Product,
    quantity_delta,
    user=None,
    note: str = "",
    reason: str = StockMovement.Reason.ADJUSTMENT,
) -> AdjustmentResult:
    """
    quantity_delta:
      +N -> stock in (restock, correction up)
      -N -> stock out (waste, correction down)
    """
    if product is None:
        raise StockAdjustmentError("product is required")

    delta = _to_qty(quantity_delta, field="quantity_delta")
    if delta == 0:
        raise StockAdjustmentError("quantity_delta cannot be 0")

    # lock row for concurrency safety
    locked = Product.objects.select_for_update().get(pk=product.pk)
    current = Decimal(locked.stock or 0)

    if current + delta < 0:
        raise StockAdjustmentError(
            f"Cannot reduce stock below zero. Current: {current}, Requested OUT: {abs(delta)}"
        )

    locked.stock = current + delta
    locked.save(update_fields=["stock", "updated_at"])

    movement = _record(product=locked, delta=delta, reason=reason, user=user, note=note)
    return AdjustmentResult(product=locked, movement=movement, quantity_delta=delta)


@transaction.atomic
def set_product_stock(*, product: Product, new_stock, user=None, note: str = "") -> AdjustmentResult:
    """Physical count: overwrite stock with the counted value."""
    if product is None:
        raise StockAdjustmentError("product is required")

    target = _to_qty(new_stock, field="stock")
    if target < 0:
        raise StockAdjustmentError("stock cannot be negative")

    locked = Product.objects.select_for_update().get(pk=product.pk)
    delta = target - Decimal(locked.stock or 0)

    if delta == 0:
        return AdjustmentResult(product=locked, movement=None, quantity_delta=delta)

    locked.stock = target
    locked.save(update_fields=["stock", "updated_at"])

    movement = _record(
        product=locked,
        delta=delta,
        reason=StockMovement.Reason.COUNT,
        user=user,
        note=note,
    )
    return AdjustmentResult(product=locked, movement=movement, quantity_delta=delta)
