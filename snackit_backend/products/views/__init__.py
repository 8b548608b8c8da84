# products/views/__init__.py

"""
Products views package exports.

Purpose:
- Central export point for url imports (public catalog + admin viewsets).
"""

from .admin import AdminCategoryViewSet, AdminProductViewSet
from .catalog import CategoryListView, ProductDetailView, ProductListView

__all__ = [
    "AdminCategoryViewSet",
    "AdminProductViewSet",
    "CategoryListView",
    "ProductDetailView",
    "ProductListView",
]
