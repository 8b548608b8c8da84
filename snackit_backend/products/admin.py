# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Django admin for the catalog.

Rules:
- Deleting a Category from the admin site follows the API path:
  products move to the fallback category first.
- Stock is editable directly (admin corrections), price snapshots on
  existing orders are unaffected.
"""

from __future__ import annotations

from django.conf import settings
from django.contrib import admin, messages

from products.models import Category, Product
from products.services.categories import (
    CategoryDeletionError,
    delete_category_with_reassignment,
)


# =====================================================
# CATEGORY
# =====================================================

@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "icon", "slug", "product_count", "created_at")
    search_fields = ("name", "slug")
    ordering = ("name",)
    prepopulated_fields = {"slug": ("name",)}

    def product_count(self, obj):
        return obj.products.count()

    product_count.short_description = "Products"

    def get_readonly_fields(self, request, obj=None):
        if obj is not None and obj.is_fallback:
            return ("slug",)
        return ()

    def get_prepopulated_fields(self, request, obj=None):
        if obj is not None and obj.is_fallback:
            return {}
        return super().get_prepopulated_fields(request, obj)

    def delete_model(self, request, obj):
        try:
            delete_category_with_reassignment(category=obj)
        except CategoryDeletionError as e:
            self.message_user(request, str(e), level=messages.ERROR)

    def delete_queryset(self, request, queryset):
        for obj in queryset:
            self.delete_model(request, obj)


# =====================================================
# PRODUCT
# =====================================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "category",
        "price",
        "stock",
        "stock_status",
        "allow_cash",
        "allow_upi",
        "is_active",
        "created_at",
    )
    list_filter = ("is_active", "category", "allow_cash", "allow_upi", "created_at")
    search_fields = ("name", "description")
    ordering = ("name",)
    readonly_fields = ("created_at", "updated_at")
    list_editable = ("stock", "is_active")

    def stock_status(self, obj):
        if obj.stock <= 0:
            return "❌ OUT"
        if obj.stock <= settings.LOW_STOCK_THRESHOLD:
            return "⚠ LOW"
        return "OK"

    stock_status.short_description = "Stock Status"
