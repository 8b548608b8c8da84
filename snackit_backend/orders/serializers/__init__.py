from .order import (
    DeliveryAddressSerializer,
    OrderCreateSerializer,
    OrderItemSerializer,
    OrderLineInputSerializer,
    OrderSerializer,
    PaymentStatusUpdateSerializer,
    PickupMessageUpdateSerializer,
    StatusUpdateSerializer,
)

__all__ = [
    "DeliveryAddressSerializer",
    "OrderCreateSerializer",
    "OrderItemSerializer",
    "OrderLineInputSerializer",
    "OrderSerializer",
    "PaymentStatusUpdateSerializer",
    "PickupMessageUpdateSerializer",
    "StatusUpdateSerializer",
]
