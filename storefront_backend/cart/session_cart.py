# cart/session_cart.py

"""
SESSION CART

Purpose:
- The shopper's cart lives in the Django session (no database rows,
  no login required).
- SessionCart wraps ONE request session; views build it and pass it
  explicitly to the checkout service.

Rules:
- each line is a product snapshot (id, name, price, image, unit_type) + quantity
- adding a product that is already in the cart increases its quantity
- quantities are Decimals >= 0.1 (fractional kg), stored as strings
- line order is insertion order
- every write marks the session as modified
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

SESSION_KEY = "storefront_cart"
MIN_QUANTITY = Decimal("0.1")
QTY_PLACES = Decimal("0.001")


class CartError(Exception):
    """Base cart exception"""


class InvalidQuantityError(CartError):
    pass


class ItemNotInCartError(CartError):
    pass


@dataclass(frozen=True)
class CartLine:
    product_id: uuid.UUID
    name: str
    price: Decimal
    image: str
    unit_type: str
    quantity: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    def as_payload(self) -> dict:
        return {
            "product_id": str(self.product_id),
            "name": self.name,
            "price": f"{self.price:.2f}",
            "image": self.image,
            "unit_type": self.unit_type,
            "quantity": f"{self.quantity:.3f}",
            "line_total": f"{self.line_total:.2f}",
        }


def parse_quantity(value) -> Decimal:
    if isinstance(value, bool) or value is None or value == "":
        raise InvalidQuantityError("quantity must be a number")
    try:
        qty = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidQuantityError("quantity must be a number")
    if not qty.is_finite():
        raise InvalidQuantityError("quantity must be a number")

    qty = qty.quantize(QTY_PLACES, rounding=ROUND_HALF_UP)
    if qty < MIN_QUANTITY:
        raise InvalidQuantityError(f"quantity must be at least {MIN_QUANTITY}")
    return qty


class SessionCart:
    def __init__(self, session):
        self.session = session
        data = session.get(SESSION_KEY)
        if not isinstance(data, dict):
            data = {"items": []}
        self._items: list[dict] = list(data.get("items") or [])

    # -----------------------------
    # persistence
    # -----------------------------
    def _save(self):
        self.session[SESSION_KEY] = {"items": self._items}
        self.session.modified = True

    def _index(self, product_id) -> int:
        key = str(product_id)
        for i, item in enumerate(self._items):
            if item["product_id"] == key:
                return i
        return -1

    # -----------------------------
    # writes
    # -----------------------------
    def add(self, product, quantity=1) -> CartLine:
        qty = parse_quantity(quantity)

        idx = self._index(product.id)
        if idx >= 0:
            item = self._items[idx]
            item["quantity"] = str(Decimal(item["quantity"]) + qty)
        else:
            item = {
                "product_id": str(product.id),
                "name": product.name,
                "price": str(product.price),
                "image": product.image or "",
                "unit_type": product.unit_type,
                "quantity": str(qty),
            }
            self._items.append(item)

        self._save()
        return self._line(item)

    def update(self, product_id, quantity) -> CartLine:
        qty = parse_quantity(quantity)

        idx = self._index(product_id)
        if idx < 0:
            raise ItemNotInCartError("Product is not in the cart")

        self._items[idx]["quantity"] = str(qty)
        self._save()
        return self._line(self._items[idx])

    def remove(self, product_id) -> None:
        idx = self._index(product_id)
        if idx < 0:
            raise ItemNotInCartError("Product is not in the cart")
        del self._items[idx]
        self._save()

    def clear(self) -> None:
        self._items = []
        self._save()

    # -----------------------------
    # reads
    # -----------------------------
    @staticmethod
    def _line(item: dict) -> CartLine:
        return CartLine(
            product_id=uuid.UUID(item["product_id"]),
            name=item["name"],
            price=Decimal(item["price"]),
            image=item.get("image", ""),
            unit_type=item.get("unit_type", ""),
            quantity=Decimal(item["quantity"]),
        )

    def lines(self) -> list[CartLine]:
        return [self._line(item) for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def subtotal(self) -> Decimal:
        return sum((line.line_total for line in self.lines()), Decimal("0"))

    def as_payload(self) -> dict:
        return {
            "items": [line.as_payload() for line in self.lines()],
            "item_count": self.item_count,
            "subtotal": f"{self.subtotal:.2f}",
        }
