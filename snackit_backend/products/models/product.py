# products/models/product.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from .category import Category


class Product(models.Model):
    """
    Represents a sellable menu item.

    STOCK MODEL (IMPORTANT):
    - stock is a plain unit counter on the product row
    - database-enforced non-negative (PositiveIntegerField)
    - only decremented by order placement, restored by order cancellation,
      set explicitly by admins

    PAYMENT ELIGIBILITY:
    - allow_cash / allow_upi decide which payment methods may pay for this item
    - checked per line at order placement

    SOFT DELETE:
    - is_active=False hides the product from the storefront
      while keeping order history intact.
    """

    PAYMENT_CASH = "cash"
    PAYMENT_UPI = "upi"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="products",
    )

    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True)

    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    stock = models.PositiveIntegerField(default=0)

    image_url = models.URLField(max_length=500, blank=True)

    is_active = models.BooleanField(default=True)

    allow_cash = models.BooleanField(default=True)
    allow_upi = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active", "name"], name="products_active_name_idx"),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        if self.price is None or Decimal(self.price) < Decimal("0.00"):
            raise ValidationError("Price cannot be negative")

        if not self.allow_cash and not self.allow_upi:
            raise ValidationError("At least one payment method must be allowed")

    def allows_payment_method(self, method: str) -> bool:
        m = (method or "").strip().lower()
        if m == self.PAYMENT_CASH:
            return bool(self.allow_cash)
        if m == self.PAYMENT_UPI:
            return bool(self.allow_upi)
        return False
