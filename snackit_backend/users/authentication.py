# users/authentication.py

"""
SESSION AUTHENTICATION (cookie-backed)

DRF's SessionAuthentication returns no WWW-Authenticate header, which makes
DRF answer anonymous requests with 403. Advertising a scheme turns those
into 401 so the storefront can tell "log in" apart from "not allowed".
CSRF enforcement for authenticated unsafe requests is unchanged.
"""

from __future__ import annotations

from rest_framework import authentication


class SessionAuthentication(authentication.SessionAuthentication):
    def authenticate_header(self, request):
        return "Session"
