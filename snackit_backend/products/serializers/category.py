# products/serializers/category.py

from django.utils.text import slugify
from rest_framework import serializers

from products.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """
    Category serializer.

    Rules:
    - name + icon are required
    - slug is optional on write; derived from name when missing
    - "uncategorized" is reserved; the fallback category keeps it for good
    - id + created_at are read-only
    """

    name = serializers.CharField(required=True, allow_blank=False, max_length=255)
    icon = serializers.CharField(required=True, allow_blank=False, max_length=64)
    slug = serializers.SlugField(required=False, max_length=255)

    class Meta:
        model = Category
        fields = ["id", "name", "icon", "slug", "created_at"]
        read_only_fields = ["id", "created_at"]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def validate_slug(self, value: str):
        v = (value or "").strip().lower()
        editing_fallback = self.instance is not None and self.instance.is_fallback

        if editing_fallback and v != Category.FALLBACK_SLUG:
            raise serializers.ValidationError("The fallback category's slug cannot be changed")
        if v == Category.FALLBACK_SLUG and not editing_fallback:
            raise serializers.ValidationError(f"slug '{v}' is reserved")

        qs = Category.objects.filter(slug=v)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("A category with this slug already exists")
        return v

    def validate(self, attrs):
        if self.instance is None and not attrs.get("slug"):
            slug = slugify(attrs.get("name") or "")
            if not slug:
                raise serializers.ValidationError({"slug": "slug could not be derived from name"})
            if slug == Category.FALLBACK_SLUG:
                raise serializers.ValidationError({"slug": f"slug '{slug}' is reserved"})
            if Category.objects.filter(slug=slug).exists():
                raise serializers.ValidationError(
                    {"slug": "A category with this slug already exists"}
                )
            attrs["slug"] = slug
        return attrs
