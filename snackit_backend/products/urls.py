# products/urls.py

"""
PRODUCTS URLS (PUBLIC STOREFRONT)

Mounted at /api/:
    /api/categories/
    /api/products/
    /api/products/<uuid>/
"""

from django.urls import path

from products.views import CategoryListView, ProductDetailView, ProductListView

app_name = "products"

urlpatterns = [
    path("categories/", CategoryListView.as_view(), name="category-list"),
    path("products/", ProductListView.as_view(), name="product-list"),
    path("products/<uuid:product_id>/", ProductDetailView.as_view(), name="product-detail"),
]
