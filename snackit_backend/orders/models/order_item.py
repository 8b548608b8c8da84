# orders/models/order_item.py

import uuid

from django.core.validators import MinValueValidator
from django.db import models

from products.models import Product

from .order import Order


class OrderItem(models.Model):
    """
    One product line of an order, priced at order time.

    - unit_price is the product price snapshot
    - total_price = unit_price * quantity (2dp, half-up)
    - one row per product per order
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name="order_items")

    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    total_price = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["order", "product"],
                name="uniq_order_item_product",
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product}"
