# orders/urls.py

"""
Mounted at /api/orders/.
"""

from django.urls import path

from orders.views import OrderDetailView, OrderListCreateView

app_name = "orders"

urlpatterns = [
    path("", OrderListCreateView.as_view(), name="order-list"),
    path("<uuid:order_id>/", OrderDetailView.as_view(), name="order-detail"),
]
