# products/services/inventory.py

"""
======================================================
PATH: products/services/inventory.py
======================================================
INVENTORY CORE SERVICES

Purpose:
- Admin stock corrections: set an absolute unit count on a product.

Rules:
- Quantities are integer units (Product.stock is PositiveIntegerField).
- Order placement/cancellation move stock with conditional F() updates
  (see orders.services); this module only handles explicit admin sets.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from products.models import Product

logger = logging.getLogger(__name__)


def _to_int(value, *, field_name="value") -> int:
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


@transaction.atomic
def set_stock(*, product: Product, quantity, user=None) -> Product:
    """
    Set product stock to an absolute level.

    Locks the product row so a concurrent checkout cannot interleave
    between the read and the write.
    """
    qty = _to_int(quantity, field_name="quantity")
    if qty < 0:
        raise ValidationError("quantity cannot be negative")

    locked = Product.objects.select_for_update().get(pk=product.pk)
    previous = locked.stock

    locked.stock = qty
    locked.save(update_fields=["stock", "updated_at"])

    logger.info(
        "Stock set",
        extra={
            "product_id": str(locked.id),
            "previous_stock": previous,
            "new_stock": qty,
            "user_id": str(getattr(user, "id", "") or ""),
        },
    )
    return locked
