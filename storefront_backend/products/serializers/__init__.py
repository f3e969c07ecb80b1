# products/serializers/__init__.py

from .category import CategorySerializer
from .product import (
    ProductSerializer,
    StockAdjustInputSerializer,
    StockMovementSerializer,
    StockSetInputSerializer,
    StorefrontProductSerializer,
    VisibilityInputSerializer,
)

__all__ = [
    "CategorySerializer",
    "ProductSerializer",
    "StockAdjustInputSerializer",
    "StockMovementSerializer",
    "StockSetInputSerializer",
    "StorefrontProductSerializer",
    "VisibilityInputSerializer",
]
