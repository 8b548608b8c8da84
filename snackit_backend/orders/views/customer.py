# orders/views/customer.py

"""
CUSTOMER ORDER ENDPOINTS

POST /api/orders/        place an order (session required)
GET  /api/orders/        own orders, newest first
GET  /api/orders/<uuid>/ one own order

GUARANTEES:
- Atomic placement (see orders.services.order_placement)
- Business-rule rejections -> 400 {"detail": "..."}; nothing is written
- Customers never see other customers' orders (404)
"""

import logging

from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import UserRateThrottle
from rest_framework.views import APIView

from orders.models import Order
from orders.serializers import OrderCreateSerializer, OrderSerializer
from orders.services import OrderError, place_order

logger = logging.getLogger(__name__)


class OrderWriteThrottle(UserRateThrottle):
    scope = "order_write"


def _own_orders(user):
    return (
        Order.objects.filter(user=user)
        .select_related("user")
        .prefetch_related("items__product")
        .order_by("-created_at")
    )


class OrderListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get_throttles(self):
        if self.request.method == "POST":
            return [OrderWriteThrottle()]
        return super().get_throttles()

    @extend_schema(responses={200: OrderSerializer(many=True)})
    def get(self, request, *args, **kwargs):
        orders = _own_orders(request.user)
        return Response(OrderSerializer(orders, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        request=OrderCreateSerializer,
        responses={
            201: OrderSerializer,
            400: OpenApiResponse(description="Validation or business-rule rejection"),
            429: OpenApiResponse(description="Rate limited"),
        },
    )
    def post(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            order = place_order(
                user=request.user,
                items=data["items"],
                hostel_block=data["delivery_address"]["hostel_block"],
                room_number=data["delivery_address"]["room_number"],
                payment_method=data["payment_method"],
                phone_number=data["phone_number"],
                payment_note=data.get("payment_note", ""),
            )
        except OrderError as exc:
            logger.warning(
                "Order rejected",
                extra={
                    "user_id": str(request.user.id),
                    "reason": exc.__class__.__name__,
                    "detail": str(exc),
                },
            )
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        order = _own_orders(request.user).get(pk=order.pk)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


class OrderDetailView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: OrderSerializer, 404: OpenApiResponse(description="Not found")})
    def get(self, request, order_id, *args, **kwargs):
        order = get_object_or_404(_own_orders(request.user), pk=order_id)
        return Response(OrderSerializer(order).data, status=status.HTTP_200_OK)
