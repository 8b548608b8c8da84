# products/services/categories.py

"""
======================================================
PATH: products/services/categories.py
======================================================
CATEGORY SERVICES

Deleting a category never orphans products:
- every product of the category is moved to the reserved fallback
  category ("uncategorized"), created on demand
- the move and the delete happen in one transaction
- the fallback category itself cannot be deleted
"""

from __future__ import annotations

import logging

from django.db import transaction

from products.models import Category, Product

logger = logging.getLogger(__name__)


class CategoryDeletionError(Exception):
    """Raised when a category cannot be deleted."""


def get_or_create_fallback_category() -> Category:
    category, _ = Category.objects.get_or_create(
        slug=Category.FALLBACK_SLUG,
        defaults={
            "name": Category.FALLBACK_NAME,
            "icon": Category.FALLBACK_ICON,
        },
    )
    return category


@transaction.atomic
def delete_category_with_reassignment(*, category: Category) -> int:
    """
    Delete a category after moving its products to the fallback category.

    Returns the number of products reassigned.
    """
    if category.is_fallback:
        raise CategoryDeletionError("The fallback category cannot be deleted")

    fallback = get_or_create_fallback_category()

    moved = Product.objects.filter(category=category).update(category=fallback)
    category_id = str(category.id)
    category.delete()

    logger.info(
        "Category deleted",
        extra={
            "category_id": category_id,
            "reassigned_products": moved,
            "fallback_category_id": str(fallback.id),
        },
    )
    return moved
