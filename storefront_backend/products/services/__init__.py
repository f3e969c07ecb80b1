from .catalog import set_visibility, storefront_categories, storefront_products
from .stock_adjustments import StockAdjustmentError, adjust_product_stock, set_product_stock

__all__ = [
    "set_visibility",
    "storefront_categories",
    "storefront_products",
    "StockAdjustmentError",
    "adjust_product_stock",
    "set_product_stock",
]
