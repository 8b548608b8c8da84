# store/views/settings.py

"""
STORE SETTINGS VIEWS

Public:
- GET /api/settings/            (AllowAny; storefront banner, UPI details)

Admin:
- GET/PUT/PATCH /api/admin/settings/
"""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from products.views.catalog import PublicCatalogThrottle
from store.models import StoreSettings
from store.serializers import PublicStoreSettingsSerializer, StoreSettingsSerializer
from users.permissions import IsAdmin

logger = logging.getLogger(__name__)


class PublicStoreSettingsView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(tags=["Public"], responses={200: PublicStoreSettingsSerializer})
    def get(self, request, *args, **kwargs):
        s = StoreSettings.load()
        return Response(PublicStoreSettingsSerializer(s).data, status=status.HTTP_200_OK)


class AdminStoreSettingsView(APIView):
    """
    Admin settings editor. PUT and PATCH both accept partial payloads;
    omitted fields keep their stored values.
    """

    permission_classes = [IsAdmin]

    @extend_schema(responses={200: StoreSettingsSerializer})
    def get(self, request, *args, **kwargs):
        return Response(StoreSettingsSerializer(StoreSettings.load()).data)

    def _update(self, request):
        s = StoreSettings.load()
        ser = StoreSettingsSerializer(s, data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        s = ser.save()

        logger.info(
            "Store settings updated",
            extra={
                "user_id": str(request.user.id),
                "fields": sorted(ser.validated_data.keys()),
                "accepting_orders": s.accepting_orders,
            },
        )
        return Response(StoreSettingsSerializer(s).data, status=status.HTTP_200_OK)

    @extend_schema(request=StoreSettingsSerializer, responses={200: StoreSettingsSerializer})
    def put(self, request, *args, **kwargs):
        return self._update(request)

    @extend_schema(request=StoreSettingsSerializer, responses={200: StoreSettingsSerializer})
    def patch(self, request, *args, **kwargs):
        return self._update(request)
