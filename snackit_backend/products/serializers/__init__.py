# products/serializers/__init__.py

from .category import CategorySerializer
from .product import ProductSerializer, StockLevelSerializer

__all__ = [
    "CategorySerializer",
    "ProductSerializer",
    "StockLevelSerializer",
]
