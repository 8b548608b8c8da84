# users/services/google_oauth.py

"""
GOOGLE OAUTH CLIENT (authorization code flow)

Flow:
1) build_authorization_url(): browser is redirected to Google with a random state
2) Google redirects back with ?code=...&state=...
3) fetch_google_profile(): code -> tokens -> OpenID userinfo -> GoogleProfile

Config:
- settings.GOOGLE_OAUTH["CLIENT_ID" | "CLIENT_SECRET" | "REDIRECT_URI"]

Errors:
- Every provider/transport failure raises GoogleOAuthError.
  The callback view turns it into a redirect; nothing here touches sessions or users.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from django.conf import settings

from .domain_policy import hosted_domain_hint

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"

OAUTH_SCOPES = ("openid", "email", "profile")


class GoogleOAuthError(Exception):
    """Raised when Google sign-in cannot be completed."""


@dataclass(frozen=True)
class GoogleProfile:
    email: str
    email_verified: bool
    given_name: str = ""
    family_name: str = ""
    picture: str = ""


def _google_cfg() -> dict:
    cfg = getattr(settings, "GOOGLE_OAUTH", {}) or {}
    if not isinstance(cfg, dict):
        return {}
    return cfg


def _client_id() -> str:
    client_id = (_google_cfg().get("CLIENT_ID") or "").strip()
    if not client_id:
        raise GoogleOAuthError("GOOGLE_CLIENT_ID is not configured.")
    return client_id


def _client_secret() -> str:
    secret = (_google_cfg().get("CLIENT_SECRET") or "").strip()
    if not secret:
        raise GoogleOAuthError("GOOGLE_CLIENT_SECRET is not configured.")
    return secret


def configured_redirect_uri() -> str:
    return (_google_cfg().get("REDIRECT_URI") or "").strip()


def build_authorization_url(*, state: str, redirect_uri: str) -> str:
    params = {
        "client_id": _client_id(),
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "scope": " ".join(OAUTH_SCOPES),
        "state": state,
        "prompt": "select_account",
    }

    # Hosted-domain hint: Google pre-filters the account chooser.
    hd = hosted_domain_hint()
    if hd:
        params["hd"] = hd

    return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"


def _request_json(
    method: str,
    url: str,
    *,
    form: dict | None = None,
    headers: dict | None = None,
    timeout: int = 15,
) -> dict[str, Any]:
    data = urlencode(form).encode("utf-8") if form is not None else None

    req = Request(
        url,
        data=data,
        headers={
            "Accept": "application/json",
            **({"Content-Type": "application/x-www-form-urlencoded"} if data else {}),
            **(headers or {}),
        },
        method=method,
    )

    try:
        with urlopen(req, timeout=timeout) as resp:
            raw = resp.read().decode("utf-8", errors="replace")
    except HTTPError as e:
        body = e.read().decode("utf-8", errors="replace") if e.fp else ""
        logger.warning(
            "Google OAuth HTTP error",
            extra={"url": url, "status": e.code, "body": body[:300]},
        )
        raise GoogleOAuthError(f"Google returned HTTP {e.code}") from e
    except URLError as e:
        logger.warning("Google OAuth network error", extra={"url": url, "reason": str(e.reason)})
        raise GoogleOAuthError("Could not reach Google") from e

    try:
        parsed = json.loads(raw)
    except ValueError as e:
        raise GoogleOAuthError("Google returned a non-JSON response") from e

    if not isinstance(parsed, dict):
        raise GoogleOAuthError("Google returned an unexpected response shape")

    return parsed


def exchange_code_for_tokens(*, code: str, redirect_uri: str) -> dict[str, Any]:
    if not code:
        raise GoogleOAuthError("Missing authorization code")

    tokens = _request_json(
        "POST",
        GOOGLE_TOKEN_URL,
        form={
            "code": code,
            "client_id": _client_id(),
            "client_secret": _client_secret(),
            "redirect_uri": redirect_uri,
            "grant_type": "authorization_code",
        },
    )

    if not tokens.get("access_token"):
        raise GoogleOAuthError("Token response has no access_token")

    return tokens


def fetch_userinfo(*, access_token: str) -> dict[str, Any]:
    return _request_json(
        "GET",
        GOOGLE_USERINFO_URL,
        headers={"Authorization": f"Bearer {access_token}"},
    )


def profile_from_userinfo(info: dict[str, Any]) -> GoogleProfile:
    email = (info.get("email") or "").strip().lower()
    if not email:
        raise GoogleOAuthError("Google profile has no email address")

    verified = info.get("email_verified")
    if isinstance(verified, str):
        verified = verified.strip().lower() == "true"

    return GoogleProfile(
        email=email,
        email_verified=bool(verified),
        given_name=(info.get("given_name") or "").strip(),
        family_name=(info.get("family_name") or "").strip(),
        picture=(info.get("picture") or "").strip(),
    )


def fetch_google_profile(*, code: str, redirect_uri: str) -> GoogleProfile:
    tokens = exchange_code_for_tokens(code=code, redirect_uri=redirect_uri)
    info = fetch_userinfo(access_token=tokens["access_token"])
    return profile_from_userinfo(info)
