# orders/services/stats.py

"""
ADMIN DASHBOARD STATISTICS

- total_products:     active products
- total_orders:       every order
- low_stock_products: active products with stock <= LOW_STOCK_THRESHOLD
- pending_orders:     orders not yet delivered or cancelled
- total_revenue:      sum of non-cancelled order totals (2dp)
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.db.models import Sum

from orders.models import Order
from products.models import Product

from .order_lifecycle import TERMINAL_STATES
from .money import money


def dashboard_stats(*, low_stock_threshold: int | None = None) -> dict:
    threshold = (
        settings.LOW_STOCK_THRESHOLD if low_stock_threshold is None else low_stock_threshold
    )

    active = Product.objects.filter(is_active=True)

    revenue = (
        Order.objects.exclude(status=Order.STATUS_CANCELLED)
        .aggregate(total=Sum("total_amount"))
        .get("total")
    )

    return {
        "total_products": active.count(),
        "total_orders": Order.objects.count(),
        "low_stock_products": active.filter(stock__lte=threshold).count(),
        "pending_orders": Order.objects.exclude(status__in=TERMINAL_STATES).count(),
        "total_revenue": str(money(revenue or Decimal("0.00"))),
    }
