# orders/serializers/order.py

"""
ORDER SERIALIZERS

Input (POST /api/orders/):
{
  "items": [{"product_id": "<uuid>", "quantity": 2}],
  "delivery_address": {"hostel_block": "KP-7", "room_number": "214"},
  "payment_method": "cash" | "upi",
  "phone_number": "9876543210",
  "payment_note": "optional"
}

Output: order with line items (product name snapshot via FK) and
the customer summary for admin listings.
"""

from rest_framework import serializers

from orders.models import Order, OrderItem
from users.serializers import UserSummarySerializer


# -----------------------------
# INPUT
# -----------------------------
class OrderLineInputSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1)


class DeliveryAddressSerializer(serializers.Serializer):
    hostel_block = serializers.CharField(max_length=64)
    room_number = serializers.CharField(max_length=32)


class OrderCreateSerializer(serializers.Serializer):
    items = OrderLineInputSerializer(many=True, allow_empty=True)
    delivery_address = DeliveryAddressSerializer()
    payment_method = serializers.ChoiceField(choices=Order.PAYMENT_METHOD_CHOICES)
    phone_number = serializers.CharField(max_length=20)
    payment_note = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )

    def validate_phone_number(self, value):
        v = (value or "").strip()
        digits = v.replace("+", "").replace(" ", "").replace("-", "")
        if not digits.isdigit() or len(digits) < 10:
            raise serializers.ValidationError("Enter a valid phone number")
        return v


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES)


class PaymentStatusUpdateSerializer(serializers.Serializer):
    payment_status = serializers.ChoiceField(choices=Order.PAYMENT_STATUS_CHOICES)


class PickupMessageUpdateSerializer(serializers.Serializer):
    pickup_message = serializers.CharField(max_length=500, allow_blank=True)


# -----------------------------
# OUTPUT
# -----------------------------
class OrderItemSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(source="product.id", read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)
    product_image_url = serializers.CharField(source="product.image_url", read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product_id",
            "product_name",
            "product_image_url",
            "quantity",
            "unit_price",
            "total_price",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "user",
            "status",
            "payment_method",
            "payment_status",
            "total_amount",
            "hostel_block",
            "room_number",
            "phone_number",
            "payment_note",
            "pickup_message",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
