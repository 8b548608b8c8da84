from .admin import AdminOrderViewSet, AdminStatsView
from .customer import OrderDetailView, OrderListCreateView

__all__ = [
    "AdminOrderViewSet",
    "AdminStatsView",
    "OrderDetailView",
    "OrderListCreateView",
]
