from rest_framework import serializers
from django.contrib.auth import get_user_model

User = get_user_model()


# ---------------- CURRENT USER ----------------
class CurrentUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "profile_image_url",
            "is_admin",
            "created_at",
        ]
        read_only_fields = fields


# ---------------- ORDER OWNER (embedded in admin order payloads) ----------------
class UserSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email", "first_name", "last_name"]
        read_only_fields = fields
