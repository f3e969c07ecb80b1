"""
ORDER LIFECYCLE DOMAIN RULES

This module defines the ONLY allowed status transitions for Order entities.

Flow:
    pending -> confirmed -> preparing -> out_for_delivery -> delivered
    any non-terminal state -> cancelled

No side effects here apart from change_status(), which persists the new status.
"""

import logging

from django.db import transaction

from sales.models import Order

logger = logging.getLogger(__name__)

# ============================================================
# DOMAIN ERRORS
# ============================================================


class OrderLifecycleError(Exception):
    pass


class InvalidOrderTransitionError(OrderLifecycleError):
    pass


# ============================================================
# STATE DEFINITIONS
# ============================================================

TERMINAL_STATES = {
    Order.STATUS_DELIVERED,
    Order.STATUS_CANCELLED,
}

ALLOWED_TRANSITIONS = {
    Order.STATUS_PENDING: {
        Order.STATUS_CONFIRMED,
        Order.STATUS_CANCELLED,
    },
    Order.STATUS_CONFIRMED: {
        Order.STATUS_PREPARING,
        Order.STATUS_CANCELLED,
    },
    Order.STATUS_PREPARING: {
        Order.STATUS_OUT_FOR_DELIVERY,
        Order.STATUS_CANCELLED,
    },
    Order.STATUS_OUT_FOR_DELIVERY: {
        Order.STATUS_DELIVERED,
        Order.STATUS_CANCELLED,
    },
}


# ============================================================
# DOMAIN RULES
# ============================================================


def can_transition(*, from_status: str, to_status: str) -> bool:
    if from_status in TERMINAL_STATES:
        return False

    return to_status in ALLOWED_TRANSITIONS.get(from_status, set())


def validate_transition(*, order: Order, target_status: str):
    if not can_transition(
        from_status=order.status,
        to_status=target_status,
    ):
        raise InvalidOrderTransitionError(
            f"Order {order.id} cannot transition from "
            f"'{order.status}' to '{target_status}'"
        )


@transaction.atomic
def change_status(*, order: Order, target_status: str) -> Order:
    locked = Order.objects.select_for_update().get(pk=order.pk)
    validate_transition(order=locked, target_status=target_status)

    previous = locked.status
    locked.status = target_status
    locked.save(update_fields=["status", "updated_at"])

    logger.info(
        "Order status changed",
        extra={"order_id": locked.id, "from": previous, "to": target_status},
    )
    return locked
