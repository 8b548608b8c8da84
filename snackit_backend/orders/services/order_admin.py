# orders/services/order_admin.py

"""
======================================================
PATH: orders/services/order_admin.py
======================================================
ADMIN ORDER MUTATIONS

- update_order_status: lifecycle-validated; cancelling restocks every line
- update_payment_status: pending | completed | failed
- update_pickup_message: free text shown to the customer

Status changes lock the order row so two admins cannot double-cancel
(and double-restock) the same order.
"""

from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import F

from orders.models import Order
from products.models import Product

from .exceptions import OrderError
from .order_lifecycle import validate_transition

logger = logging.getLogger(__name__)

PAYMENT_STATUSES = {s for s, _ in Order.PAYMENT_STATUS_CHOICES}


def _restock(order: Order) -> None:
    for item in order.items.all():
        Product.objects.filter(pk=item.product_id).update(stock=F("stock") + item.quantity)


@transaction.atomic
def update_order_status(*, order: Order, status: str, user=None) -> Order:
    locked = Order.objects.select_for_update().get(pk=order.pk)
    target = (status or "").strip().lower()

    validate_transition(order=locked, target_status=target)

    previous = locked.status
    if target == Order.STATUS_CANCELLED:
        _restock(locked)

    locked.status = target
    locked.save(update_fields=["status", "updated_at"])

    logger.info(
        "Order status changed",
        extra={
            "order_id": str(locked.id),
            "from_status": previous,
            "to_status": target,
            "restocked": target == Order.STATUS_CANCELLED,
            "user_id": str(getattr(user, "id", "") or ""),
        },
    )
    return locked


@transaction.atomic
def update_payment_status(*, order: Order, payment_status: str, user=None) -> Order:
    locked = Order.objects.select_for_update().get(pk=order.pk)
    target = (payment_status or "").strip().lower()

    if target not in PAYMENT_STATUSES:
        raise OrderError(f"Unknown payment status '{payment_status}'")

    previous = locked.payment_status
    locked.payment_status = target
    locked.save(update_fields=["payment_status", "updated_at"])

    logger.info(
        "Order payment status changed",
        extra={
            "order_id": str(locked.id),
            "from_payment_status": previous,
            "to_payment_status": target,
            "user_id": str(getattr(user, "id", "") or ""),
        },
    )
    return locked


def update_pickup_message(*, order: Order, message: str, user=None) -> Order:
    order.pickup_message = (message or "").strip()
    order.save(update_fields=["pickup_message", "updated_at"])

    logger.info(
        "Order pickup message updated",
        extra={
            "order_id": str(order.id),
            "user_id": str(getattr(user, "id", "") or ""),
        },
    )
    return order
