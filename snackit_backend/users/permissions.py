# users/permissions.py

from rest_framework.permissions import BasePermission


# ---------------- ADMIN FLAG PERMISSION ----------------
class IsAdmin(BasePermission):
    """
    Admin dashboard access.

    - anonymous -> not authenticated (401 via SessionAuthentication)
    - authenticated without is_admin -> 403
    """

    message = "Admin access required"

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated and getattr(user, "is_admin", False)
        )
