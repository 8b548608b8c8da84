from .categories import (
    CategoryDeletionError,
    delete_category_with_reassignment,
    get_or_create_fallback_category,
)
from .inventory import set_stock

__all__ = [
    "CategoryDeletionError",
    "delete_category_with_reassignment",
    "get_or_create_fallback_category",
    "set_stock",
]
