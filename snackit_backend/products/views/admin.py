# products/views/admin.py

"""
ADMIN CATALOG VIEWSETS

Purpose:
- Product management for the admin dashboard (CRUD + stock level)
- Category management (delete moves products to the fallback category)

Delete policy (products):
- DELETE /api/admin/products/<id>/                 -> soft delete (is_active=False)
- DELETE /api/admin/products/<id>/?permanent=true  -> hard delete, 409 if any
  order item references the product
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import ProtectedError
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from products.models import Category, Product
from products.serializers import CategorySerializer, ProductSerializer, StockLevelSerializer
from products.services import (
    CategoryDeletionError,
    delete_category_with_reassignment,
    set_stock,
)
from users.permissions import IsAdmin

logger = logging.getLogger(__name__)


def _truthy(raw) -> bool:
    return (raw or "").strip().lower() in ("1", "true", "yes")


class AdminProductViewSet(viewsets.ModelViewSet):
    """
    Product endpoints (admin).

    - CRUD over every product, inactive included
    - PUT stock/ sets an absolute stock level
    - Filters: ?category__slug=<slug>&is_active=<bool>, search ?search=<name>
    """

    serializer_class = ProductSerializer
    permission_classes = [IsAdmin]
    pagination_class = None

    filterset_fields = ["category__slug", "is_active"]
    search_fields = ["name"]
    ordering_fields = ["name", "price", "stock", "created_at"]
    ordering = ["name"]

    def get_queryset(self):
        return Product.objects.select_related("category").all()

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="permanent",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Hard delete when true (only for products with no orders).",
            ),
        ],
        responses={
            204: OpenApiResponse(description="Deleted (soft by default)"),
            409: OpenApiResponse(description="Product is referenced by orders"),
        },
    )
    def destroy(self, request, *args, **kwargs):
        product = self.get_object()

        if not _truthy(request.query_params.get("permanent")):
            product.is_active = False
            product.save(update_fields=["is_active", "updated_at"])
            logger.info("Product deactivated", extra={"product_id": str(product.id)})
            return Response(status=status.HTTP_204_NO_CONTENT)

        product_id = str(product.id)
        try:
            product.delete()
        except ProtectedError:
            return Response(
                {"detail": "Product has orders and cannot be permanently deleted."},
                status=status.HTTP_409_CONFLICT,
            )

        logger.info("Product deleted", extra={"product_id": product_id})
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        request=StockLevelSerializer,
        responses={200: ProductSerializer, 400: OpenApiResponse(description="Invalid quantity")},
        description="Set an absolute stock level.",
    )
    @action(detail=True, methods=["put"], url_path="stock")
    def stock(self, request, pk=None):
        """
        PUT /api/admin/products/<id>/stock/  {"quantity": <int >= 0>}
        """
        product = self.get_object()

        s = StockLevelSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            product = set_stock(
                product=product,
                quantity=s.validated_data["quantity"],
                user=request.user,
            )
        except DjangoValidationError as e:
            return Response(
                {"detail": " ".join(e.messages)}, status=status.HTTP_400_BAD_REQUEST
            )

        return Response(self.get_serializer(product).data, status=status.HTTP_200_OK)


class AdminCategoryViewSet(viewsets.ModelViewSet):
    """
    Category endpoints (admin).

    Delete moves products to the fallback category first; deleting the
    fallback category itself is rejected.
    """

    queryset = Category.objects.all().order_by("name")
    serializer_class = CategorySerializer
    permission_classes = [IsAdmin]
    pagination_class = None
    filter_backends = []

    @extend_schema(
        responses={
            204: OpenApiResponse(description="Deleted; products reassigned"),
            400: OpenApiResponse(description="Fallback category cannot be deleted"),
        },
    )
    def destroy(self, request, *args, **kwargs):
        category = self.get_object()
        try:
            delete_category_with_reassignment(category=category)
        except CategoryDeletionError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)
