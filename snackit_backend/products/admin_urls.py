# products/admin_urls.py

"""
PRODUCTS URLS (ADMIN DASHBOARD)

Mounted at /api/admin/:
    /api/admin/products/            (+ <id>/stock/)
    /api/admin/categories/
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from products.views import AdminCategoryViewSet, AdminProductViewSet

app_name = "products_admin"

router = DefaultRouter()

router.register(r"products", AdminProductViewSet, basename="products")
router.register(r"categories", AdminCategoryViewSet, basename="categories")

urlpatterns = [
    path("", include(router.urls)),
]
