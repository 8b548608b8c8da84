# users/views/auth.py

"""
GOOGLE SIGN-IN (domain restricted, session cookie)

State machine:
    anonymous
      -> GET /api/auth/google/            (redirect to Google, state saved in session)
      -> GET /api/auth/google/callback/   (state check, code exchange, userinfo)
      -> domain policy
           allowed  -> Django session login -> redirect FRONTEND_BASE_URL/
           rejected -> NO session           -> redirect FRONTEND_BASE_URL + DOMAIN_ERROR_PATH

Provider failures (error param, state mismatch, exchange failure) redirect to
FRONTEND_BASE_URL/?error=auth_failed.
"""

from __future__ import annotations

import logging
import secrets
from urllib.parse import urlparse

from django.conf import settings
from django.contrib.auth import login, logout
from django.shortcuts import redirect
from django.urls import reverse
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from users.services.accounts import upsert_user_from_profile
from users.services.domain_policy import is_email_allowed
from users.services.google_oauth import (
    GoogleOAuthError,
    build_authorization_url,
    configured_redirect_uri,
    fetch_google_profile,
)

logger = logging.getLogger(__name__)

SESSION_STATE_KEY = "google_oauth_state"
DEFAULT_FRONTEND_BASE = "http://localhost:5000"


def _safe_frontend_base() -> str:
    base = (getattr(settings, "FRONTEND_BASE_URL", "") or "").strip()
    if not base:
        base = DEFAULT_FRONTEND_BASE

    parsed = urlparse(base)
    if not parsed.scheme or not parsed.netloc:
        logger.warning("Invalid FRONTEND_BASE_URL detected")
        return DEFAULT_FRONTEND_BASE

    return base.rstrip("/")


def _domain_error_url() -> str:
    path = (getattr(settings, "DOMAIN_ERROR_PATH", "") or "/domain-error").strip()
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{_safe_frontend_base()}{path}"


def _auth_failed_url() -> str:
    return f"{_safe_frontend_base()}/?error=auth_failed"


def _callback_redirect_uri(request) -> str:
    return configured_redirect_uri() or request.build_absolute_uri(
        reverse("users:google-callback")
    )


class LogoutResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class GoogleLoginView(APIView):
    """
    GET /api/auth/google/
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Auth"],
        responses={302: OpenApiResponse(description="Redirect to Google consent screen")},
        description="Start Google sign-in (restricted to allowed email domains).",
    )
    def get(self, request):
        state = secrets.token_urlsafe(32)
        request.session[SESSION_STATE_KEY] = state

        try:
            url = build_authorization_url(
                state=state,
                redirect_uri=_callback_redirect_uri(request),
            )
        except GoogleOAuthError as exc:
            logger.warning("Google sign-in unavailable", extra={"reason": str(exc)})
            return redirect(_auth_failed_url())

        return redirect(url)


class GoogleCallbackView(APIView):
    """
    GET /api/auth/google/callback/?code=...&state=...
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Auth"],
        responses={302: OpenApiResponse(description="Redirect back to the storefront")},
        description="Google OAuth callback. Creates a session only for allowed emails.",
    )
    def get(self, request):
        expected_state = request.session.pop(SESSION_STATE_KEY, None)

        provider_error = request.query_params.get("error")
        if provider_error:
            logger.warning("Google returned an error", extra={"error": provider_error})
            return redirect(_auth_failed_url())

        state = request.query_params.get("state") or ""
        if not expected_state or not secrets.compare_digest(state, expected_state):
            logger.warning("Google callback state mismatch")
            return redirect(_auth_failed_url())

        try:
            profile = fetch_google_profile(
                code=request.query_params.get("code") or "",
                redirect_uri=_callback_redirect_uri(request),
            )
        except GoogleOAuthError as exc:
            logger.warning("Google sign-in failed", extra={"reason": str(exc)})
            return redirect(_auth_failed_url())

        if not profile.email_verified:
            logger.warning("Google email not verified", extra={"email": profile.email})
            return redirect(_auth_failed_url())

        if not is_email_allowed(profile.email):
            logger.warning(
                "Sign-in rejected by email domain policy",
                extra={"email": profile.email},
            )
            return redirect(_domain_error_url())

        user = upsert_user_from_profile(profile)
        if not user.is_active:
            logger.warning("Inactive user attempted sign-in", extra={"user_id": str(user.id)})
            return redirect(_auth_failed_url())

        login(request, user)
        return redirect(f"{_safe_frontend_base()}/")


class LogoutView(APIView):
    """
    POST /api/auth/logout/
    """

    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Auth"],
        request=None,
        responses={200: LogoutResponseSerializer},
        description="End the session and clear the session cookie.",
    )
    def post(self, request):
        logout(request)
        return Response(
            {"message": "Logged out successfully"},
            status=status.HTTP_200_OK,
        )
