# store/services/availability.py

"""
Store availability rules.

Open when:
- accepting_orders is on, or
- resume_at is set and already in the past (automatic re-open)
"""

from __future__ import annotations

from django.utils import timezone

from store.models import StoreSettings

ORDERING_PAUSED_MESSAGE = "We are not accepting orders right now. Please try again later."


def is_accepting_orders(store_settings: StoreSettings | None = None, *, now=None) -> bool:
    s = store_settings or StoreSettings.load()
    if s.accepting_orders:
        return True

    if s.resume_at is None:
        return False

    now = now or timezone.now()
    return s.resume_at <= now
