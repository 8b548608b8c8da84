# orders/models/order.py

import uuid
from decimal import Decimal

from django.conf import settings
from django.db import models

User = settings.AUTH_USER_MODEL


class Order(models.Model):
    """
    A customer's storefront order, delivered to a hostel room.

    GUARANTEES:
    - total_amount == sum(items.total_price), computed server-side at placement
    - line prices are snapshots (later product price edits do not change history)
    - status only moves along orders.services.order_lifecycle transitions
    """

    STATUS_PLACED = "placed"
    STATUS_CONFIRMED = "confirmed"
    STATUS_PREPARING = "preparing"
    STATUS_READY = "ready"
    STATUS_DELIVERED = "delivered"
    STATUS_CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (STATUS_PLACED, "Placed"),
        (STATUS_CONFIRMED, "Confirmed"),
        (STATUS_PREPARING, "Preparing"),
        (STATUS_READY, "Ready"),
        (STATUS_DELIVERED, "Delivered"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    PAYMENT_CASH = "cash"
    PAYMENT_UPI = "upi"

    PAYMENT_METHOD_CHOICES = [
        (PAYMENT_CASH, "Cash on delivery"),
        (PAYMENT_UPI, "UPI"),
    ]

    PAYMENT_PENDING = "pending"
    PAYMENT_COMPLETED = "completed"
    PAYMENT_FAILED = "failed"

    PAYMENT_STATUS_CHOICES = [
        (PAYMENT_PENDING, "Pending"),
        (PAYMENT_COMPLETED, "Completed"),
        (PAYMENT_FAILED, "Failed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="orders",
    )

    total_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    payment_method = models.CharField(max_length=16, choices=PAYMENT_METHOD_CHOICES)
    payment_status = models.CharField(
        max_length=16,
        choices=PAYMENT_STATUS_CHOICES,
        default=PAYMENT_PENDING,
    )

    status = models.CharField(
        max_length=16,
        choices=STATUS_CHOICES,
        default=STATUS_PLACED,
    )

    # Delivery address
    hostel_block = models.CharField(max_length=64)
    room_number = models.CharField(max_length=32)
    phone_number = models.CharField(max_length=20)

    payment_note = models.CharField(
        max_length=255,
        blank=True,
        help_text="Customer note, e.g. UPI transaction reference",
    )
    pickup_message = models.CharField(
        max_length=500,
        blank=True,
        help_text="Admin message shown to the customer (pickup point, delay, ...)",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="orders_user_created_idx"),
            models.Index(fields=["status"], name="orders_status_idx"),
        ]

    def __str__(self):
        return f"Order {self.id} ({self.status})"
