# orders/services/order_placement.py

"""
ORDER PLACEMENT (APPLICATION SERVICE)

Purpose:
- Turn a customer's cart into a persisted Order (atomic).
- Validate every line against live product rows before any write.

Hard rules:
- Quantities are integer units (>= 1).
- Money values are computed server-side; the client never sends prices or totals.
- Ordering pause is checked before anything else.

Concurrency:
- Product rows are locked (select_for_update, ordered by id) for the whole transaction.
- Stock is decremented with a conditional UPDATE (stock >= qty); a lost race
  raises InsufficientStockError and rolls everything back.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from django.db import transaction
from django.db.models import F

from orders.models import Order, OrderItem
from products.models import Product
from store.models import StoreSettings
from store.services import ORDERING_PAUSED_MESSAGE, is_accepting_orders

from .exceptions import (
    EmptyOrderError,
    InsufficientStockError,
    OrderError,
    OrderingPausedError,
    PaymentMethodNotAllowedError,
    ProductUnavailableError,
)
from .money import money

logger = logging.getLogger(__name__)

PAYMENT_METHODS = {Order.PAYMENT_CASH, Order.PAYMENT_UPI}


def _to_int_qty(value) -> int:
    if isinstance(value, bool):
        raise ValueError("quantity must be a whole integer unit")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        s = value.strip()
        if s.isdigit():
            return int(s)

    raise ValueError("quantity must be a whole integer unit")


def _merge_lines(items) -> dict:
    """
    Collapse the cart into {product_id(str): quantity}, summing duplicates.
    Preserves first-seen order.
    """
    merged: dict = {}
    for line in items:
        pid = str(line["product_id"])
        try:
            qty = _to_int_qty(line["quantity"])
        except ValueError as e:
            raise OrderError(str(e)) from e
        if qty <= 0:
            raise OrderError("quantity must be at least 1")
        merged[pid] = merged.get(pid, 0) + qty
    return merged


@transaction.atomic
def place_order(
    *,
    user,
    items,
    hostel_block: str,
    room_number: str,
    payment_method: str,
    phone_number: str,
    payment_note: str = "",
) -> Order:
    """
    Create an Order from cart lines [{"product_id", "quantity"}, ...].

    Raises an OrderError subclass for every business-rule rejection.
    """
    # 1) Store open?
    store_settings = StoreSettings.load()
    if not is_accepting_orders(store_settings):
        raise OrderingPausedError(ORDERING_PAUSED_MESSAGE)

    # 2) Non-empty cart, duplicates merged
    if not items:
        raise EmptyOrderError("Your cart is empty")

    lines = _merge_lines(items)

    method = (payment_method or "").strip().lower()
    if method not in PAYMENT_METHODS:
        raise PaymentMethodNotAllowedError(f"Unsupported payment method '{payment_method}'")

    # 3) Lock product rows in a stable order
    products = {
        str(p.id): p
        for p in Product.objects.select_for_update().filter(id__in=list(lines)).order_by("id")
    }

    # 4) Validate every line before any write
    priced = []
    for pid, qty in lines.items():
        product = products.get(pid)
        if product is None or not product.is_active:
            raise ProductUnavailableError("A product in your cart is no longer available")

        if product.stock < qty:
            raise InsufficientStockError(
                f"Insufficient stock for {product.name}. "
                f"Available: {product.stock}, Requested: {qty}"
            )

        if not product.allows_payment_method(method):
            raise PaymentMethodNotAllowedError(
                f"{product.name} cannot be paid for with {method.upper()}"
            )

        unit_price = money(product.price)
        line_total = money(unit_price * qty)
        priced.append((product, qty, unit_price, line_total))

    # 5) Totals
    total = money(sum((line_total for _, _, _, line_total in priced), Decimal("0.00")))

    # 6) Persist order + items, then decrement stock
    order = Order.objects.create(
        user=user,
        total_amount=total,
        payment_method=method,
        payment_status=Order.PAYMENT_PENDING,
        status=Order.STATUS_PLACED,
        hostel_block=(hostel_block or "").strip(),
        room_number=(room_number or "").strip(),
        phone_number=(phone_number or "").strip(),
        payment_note=(payment_note or "").strip(),
    )

    OrderItem.objects.bulk_create(
        [
            OrderItem(
                order=order,
                product=product,
                quantity=qty,
                unit_price=unit_price,
                total_price=line_total,
            )
            for product, qty, unit_price, line_total in priced
        ]
    )

    for product, qty, _, _ in priced:
        updated = Product.objects.filter(pk=product.pk, stock__gte=qty).update(
            stock=F("stock") - qty
        )
        if updated != 1:
            raise InsufficientStockError(f"Insufficient stock for {product.name}")

    logger.info(
        "Order placed",
        extra={
            "order_id": str(order.id),
            "user_id": str(user.id),
            "total_amount": str(total),
            "payment_method": method,
            "lines": len(priced),
        },
    )
    return order
