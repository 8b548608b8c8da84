# backend/exceptions.py

"""
PATH: backend/exceptions.py

API EXCEPTION HANDLER

Wraps DRF's default handler:
- Known API errors (validation, auth, not found, throttling) keep DRF's response.
- Anything else is an unexpected server/database failure:
  logged with traceback, client gets a generic 500 body.
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    request = context.get("request")

    logger.exception(
        "Unhandled API error",
        extra={
            "view": view.__class__.__name__ if view is not None else None,
            "path": getattr(request, "path", None),
            "method": getattr(request, "method", None),
        },
    )

    return Response(
        {"detail": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
