# users/services/accounts.py

"""
ACCOUNT SERVICE (Google sign-in upsert + admin flag)

Rules:
- One User per email (upsert by lower-cased email).
- Re-login refreshes profile fields only (names, picture).
- Admin allow-listed emails are promoted on sign-in; login never demotes.
"""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from users.services.domain_policy import is_admin_allowlisted
from users.services.google_oauth import GoogleProfile

logger = logging.getLogger(__name__)

User = get_user_model()


class AccountError(Exception):
    """Raised when an account operation cannot be applied."""


@transaction.atomic
def upsert_user_from_profile(profile: GoogleProfile):
    email = User.objects.normalize_email(profile.email)

    user, created = User.objects.select_for_update().get_or_create(
        email=email,
        defaults={
            "first_name": profile.given_name,
            "last_name": profile.family_name,
            "profile_image_url": profile.picture,
        },
    )

    if created:
        user.set_unusable_password()

    user.first_name = profile.given_name
    user.last_name = profile.family_name
    user.profile_image_url = profile.picture

    if is_admin_allowlisted(email) and not user.is_admin:
        user.is_admin = True
        logger.info("Admin flag granted from allow-list", extra={"email": email})

    user.save()

    logger.info(
        "User signed in via Google",
        extra={"user_id": str(user.id), "new_account": created},
    )
    return user


@transaction.atomic
def set_admin_flag(*, email: str, is_admin: bool = True):
    normalized = User.objects.normalize_email(email)
    user = User.objects.select_for_update().filter(email=normalized).first()
    if user is None:
        raise AccountError(
            f"No user with email {normalized}. They must sign in once before being promoted."
        )

    user.is_admin = is_admin
    user.save(update_fields=["is_admin", "updated_at"])

    logger.info(
        "Admin flag changed",
        extra={"user_id": str(user.id), "is_admin": is_admin},
    )
    return user
