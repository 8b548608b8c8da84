# products/models/category.py

import uuid

from django.db import models


class Category(models.Model):
    """
    Menu section shown as a tab in the storefront (e.g. Snacks, Beverages).

    FALLBACK CATEGORY:
    - slug "uncategorized" is reserved.
    - Products of a deleted category are moved there (see services/categories.py).
    """

    FALLBACK_SLUG = "uncategorized"
    FALLBACK_NAME = "Uncategorized"
    FALLBACK_ICON = "📦"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    icon = models.CharField(max_length=64)
    slug = models.SlugField(max_length=255, unique=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

    @property
    def is_fallback(self) -> bool:
        return self.slug == self.FALLBACK_SLUG
