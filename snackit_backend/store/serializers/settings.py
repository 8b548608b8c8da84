# store/serializers/settings.py

"""
STORE SETTINGS SERIALIZERS

Typed at the API boundary:
- accepting_orders accepts true/false (also "true"/"false" strings)
- resume_at accepts ISO-8601 timestamps or null
- turning accepting_orders on clears resume_at
"""

from rest_framework import serializers

from store.models import StoreSettings
from store.services import is_accepting_orders


class StoreSettingsSerializer(serializers.ModelSerializer):
    is_open = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = StoreSettings
        fields = [
            "pickup_point",
            "contact_phone",
            "upi_id",
            "upi_qr_url",
            "accepting_orders",
            "resume_at",
            "is_open",
            "updated_at",
        ]
        read_only_fields = ["is_open", "updated_at"]

    def get_is_open(self, obj) -> bool:
        return is_accepting_orders(obj)

    def validate_pickup_point(self, value):
        return (value or "").strip()

    def validate_contact_phone(self, value):
        return (value or "").strip()

    def validate_upi_id(self, value):
        return (value or "").strip()

    def validate(self, attrs):
        if attrs.get("accepting_orders") is True:
            attrs["resume_at"] = None
        return attrs


class PublicStoreSettingsSerializer(StoreSettingsSerializer):
    """Storefront view of the settings: everything except the edit timestamp."""

    class Meta(StoreSettingsSerializer.Meta):
        fields = [
            "pickup_point",
            "contact_phone",
            "upi_id",
            "upi_qr_url",
            "accepting_orders",
            "resume_at",
            "is_open",
        ]
        read_only_fields = fields
