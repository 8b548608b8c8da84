# orders/admin_urls.py

"""
Mounted at /api/admin/:
    orders/ (+ status/, payment-status/, pickup-message/)
    stats/
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from orders.views import AdminOrderViewSet, AdminStatsView

app_name = "orders_admin"

router = DefaultRouter()
router.register(r"orders", AdminOrderViewSet, basename="orders")

urlpatterns = [
    path("stats/", AdminStatsView.as_view(), name="stats"),
    path("", include(router.urls)),
]
