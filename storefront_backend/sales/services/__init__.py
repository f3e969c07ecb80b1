from .checkout_orchestrator import (
    CheckoutContact,
    CheckoutError,
    CheckoutValidationError,
    OrderSubmissionError,
    PlacedOrder,
    place_order,
    quote_cart,
)
from .order_lifecycle import InvalidOrderTransitionError, change_status
from .pricing import AppliedCoupon, OrderQuote, quote_order

__all__ = [
    "AppliedCoupon",
    "CheckoutContact",
    "CheckoutError",
    "CheckoutValidationError",
    "InvalidOrderTransitionError",
    "OrderQuote",
    "OrderSubmissionError",
    "PlacedOrder",
    "change_status",
    "place_order",
    "quote_cart",
    "quote_order",
]
