# sales/serializers/__init__.py

from .customer import CustomerSerializer
from .order import (
    CheckoutInputSerializer,
    OrderItemSerializer,
    OrderSerializer,
    OrderStatusInputSerializer,
)

__all__ = [
    "CheckoutInputSerializer",
    "CustomerSerializer",
    "OrderItemSerializer",
    "OrderSerializer",
    "OrderStatusInputSerializer",
]
