# products/serializers/product.py

"""
PRODUCT SERIALIZER

Purpose:
- Canonical Product serializer for both the admin dashboard and the public storefront.
- Stock is the plain counter on the product row (single source of truth).
- Category is written by id and echoed back with its name + slug for menu tabs.
"""

from decimal import Decimal

from rest_framework import serializers

from products.models import Category, Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Canonical Product Serializer.

    GUARANTEES:
    - price is non-negative
    - at least one payment method stays enabled
    - stock is a non-negative unit count
    """

    category = serializers.PrimaryKeyRelatedField(queryset=Category.objects.all())
    category_name = serializers.CharField(source="category.name", read_only=True)
    category_slug = serializers.CharField(source="category.slug", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "stock",
            "category",
            "category_name",
            "category_slug",
            "image_url",
            "is_active",
            "allow_cash",
            "allow_upi",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "category_name",
            "category_slug",
            "created_at",
            "updated_at",
        ]

    def validate_name(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def validate_price(self, value):
        # Keep consistent with Product.clean(): non-negative (0 allowed)
        if value is None or value < Decimal("0.00"):
            raise serializers.ValidationError("Price must be non-negative")
        return value

    def validate_stock(self, value):
        if value is None or int(value) < 0:
            raise serializers.ValidationError("Stock must be a non-negative integer")
        return int(value)

    def validate(self, attrs):
        allow_cash = attrs.get(
            "allow_cash", getattr(self.instance, "allow_cash", True)
        )
        allow_upi = attrs.get("allow_upi", getattr(self.instance, "allow_upi", True))
        if not allow_cash and not allow_upi:
            raise serializers.ValidationError(
                {"detail": "At least one payment method must be allowed"}
            )
        return attrs


class StockLevelSerializer(serializers.Serializer):
    """Absolute stock level for PUT /api/admin/products/<id>/stock/."""

    quantity = serializers.IntegerField(min_value=0)
