# users/services/domain_policy.py

"""
EMAIL DOMAIN POLICY

Login is limited to university addresses:
- allowed: email domain is in settings.ALLOWED_EMAIL_DOMAINS
- allowed: email is on settings.ADMIN_EMAIL_ALLOWLIST (any domain)
- everything else is rejected before a session exists

No database access, no side effects.
"""

from __future__ import annotations

from django.conf import settings


def _normalize(email: str | None) -> str:
    return (email or "").strip().lower()


def email_domain(email: str | None) -> str:
    e = _normalize(email)
    if "@" not in e:
        return ""
    return e.rsplit("@", 1)[1]


def is_admin_allowlisted(email: str | None) -> bool:
    e = _normalize(email)
    if not e:
        return False
    allowlist = {a.strip().lower() for a in getattr(settings, "ADMIN_EMAIL_ALLOWLIST", [])}
    return e in allowlist


def is_domain_allowed(email: str | None) -> bool:
    domain = email_domain(email)
    if not domain:
        return False
    allowed = {
        d.strip().lower().lstrip("@")
        for d in getattr(settings, "ALLOWED_EMAIL_DOMAINS", [])
        if d and d.strip()
    }
    return domain in allowed


def is_email_allowed(email: str | None) -> bool:
    return is_domain_allowed(email) or is_admin_allowlisted(email)


def hosted_domain_hint() -> str:
    """
    Single domain to pass to Google as `hd`, or "" when no hint is safe.

    A hint is only sent when exactly one domain is allowed and no allow-listed
    admin address lives outside it.
    """
    domains = {
        d.strip().lower().lstrip("@")
        for d in getattr(settings, "ALLOWED_EMAIL_DOMAINS", [])
        if d and d.strip()
    }
    if len(domains) != 1:
        return ""
    (domain,) = domains

    for address in getattr(settings, "ADMIN_EMAIL_ALLOWLIST", []):
        if address and address.strip() and email_domain(address) != domain:
            return ""
    return domain
