from .exceptions import (
    EmptyOrderError,
    InsufficientStockError,
    InvalidOrderTransitionError,
    OrderError,
    OrderingPausedError,
    PaymentMethodNotAllowedError,
    ProductUnavailableError,
)
from .order_admin import update_order_status, update_payment_status, update_pickup_message
from .order_placement import place_order
from .stats import dashboard_stats

__all__ = [
    "EmptyOrderError",
    "InsufficientStockError",
    "InvalidOrderTransitionError",
    "OrderError",
    "OrderingPausedError",
    "PaymentMethodNotAllowedError",
    "ProductUnavailableError",
    "dashboard_stats",
    "place_order",
    "update_order_status",
    "update_payment_status",
    "update_pickup_message",
]
