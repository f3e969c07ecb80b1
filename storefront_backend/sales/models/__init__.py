from .analytics import DailyAnalytics
from .customer import Customer
from .order import Order, OrderItem

__all__ = [
    "Customer",
    "DailyAnalytics",
    "Order",
    "OrderItem",
]
