# orders/views/admin.py

"""
ADMIN ORDER ENDPOINTS

GET   /api/admin/orders/                      (?status=&payment_method=&payment_status=)
GET   /api/admin/orders/<uuid>/
PATCH /api/admin/orders/<uuid>/status/          {"status": "..."}
PATCH /api/admin/orders/<uuid>/payment-status/  {"payment_status": "..."}
PATCH /api/admin/orders/<uuid>/pickup-message/  {"pickup_message": "..."}
GET   /api/admin/stats/
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.models import Order
from orders.serializers import (
    OrderSerializer,
    PaymentStatusUpdateSerializer,
    PickupMessageUpdateSerializer,
    StatusUpdateSerializer,
)
from orders.services import (
    OrderError,
    dashboard_stats,
    update_order_status,
    update_payment_status,
    update_pickup_message,
)
from users.permissions import IsAdmin


class AdminOrderViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = OrderSerializer
    permission_classes = [IsAdmin]

    filterset_fields = ["status", "payment_method", "payment_status"]
    search_fields = ["user__email", "phone_number", "hostel_block", "room_number"]
    ordering_fields = ["created_at", "total_amount", "status"]
    ordering = ["-created_at"]

    def get_queryset(self):
        return Order.objects.select_related("user").prefetch_related("items__product")

    def _respond(self, order):
        order = self.get_queryset().get(pk=order.pk)
        return Response(self.get_serializer(order).data, status=status.HTTP_200_OK)

    @extend_schema(
        request=StatusUpdateSerializer,
        responses={200: OrderSerializer, 400: OpenApiResponse(description="Invalid transition")},
    )
    @action(detail=True, methods=["patch", "put"], url_path="status")
    def set_status(self, request, pk=None):
        order = self.get_object()
        s = StatusUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            order = update_order_status(
                order=order, status=s.validated_data["status"], user=request.user
            )
        except OrderError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return self._respond(order)

    @extend_schema(request=PaymentStatusUpdateSerializer, responses={200: OrderSerializer})
    @action(detail=True, methods=["patch", "put"], url_path="payment-status")
    def set_payment_status(self, request, pk=None):
        order = self.get_object()
        s = PaymentStatusUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            order = update_payment_status(
                order=order,
                payment_status=s.validated_data["payment_status"],
                user=request.user,
            )
        except OrderError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return self._respond(order)

    @extend_schema(request=PickupMessageUpdateSerializer, responses={200: OrderSerializer})
    @action(detail=True, methods=["patch", "put"], url_path="pickup-message")
    def set_pickup_message(self, request, pk=None):
        order = self.get_object()
        s = PickupMessageUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        order = update_pickup_message(
            order=order,
            message=s.validated_data["pickup_message"],
            user=request.user,
        )
        return self._respond(order)


class AdminStatsView(APIView):
    permission_classes = [IsAdmin]

    @extend_schema(
        responses={
            200: {
                "type": "object",
                "properties": {
                    "total_products": {"type": "integer"},
                    "total_orders": {"type": "integer"},
                    "low_stock_products": {"type": "integer"},
                    "pending_orders": {"type": "integer"},
                    "total_revenue": {"type": "string"},
                },
            }
        },
    )
    def get(self, request, *args, **kwargs):
        return Response(dashboard_stats(), status=status.HTTP_200_OK)
