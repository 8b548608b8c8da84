# products/views/catalog.py
"""
PUBLIC CATALOG (STOREFRONT)

GET /api/categories/
GET /api/products/?category=<slug|all>&q=<search>
GET /api/products/<uuid>/

Rules:
- AllowAny (public)
- Only active products are visible
- Backend is source of truth for price + stock

Security hardening:
- Throttle to reduce scraping/abuse
"""

from __future__ import annotations

from django.db.models import Q
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from products.models import Category, Product
from products.serializers import CategorySerializer, ProductSerializer


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class CategoryListView(APIView):
    """
    GET /api/categories/
    """

    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Public"],
        responses={200: CategorySerializer(many=True)},
        description="Menu categories (AllowAny).",
    )
    def get(self, request, *args, **kwargs):
        qs = Category.objects.all().order_by("name")
        return Response(CategorySerializer(qs, many=True).data, status=status.HTTP_200_OK)


class ProductListView(APIView):
    """
    GET /api/products/?category=<slug|all>&q=<text>
    """

    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Public"],
        parameters=[
            OpenApiParameter(
                name="category",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description='Category slug, or "all" (default) for every category.',
            ),
            OpenApiParameter(
                name="q",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Optional search over name + description.",
            ),
        ],
        responses={
            200: ProductSerializer(many=True),
            429: OpenApiResponse(description="Rate limited"),
        },
        description="Active products for the storefront (AllowAny).",
    )
    def get(self, request, *args, **kwargs):
        qs = Product.objects.select_related("category").filter(is_active=True)

        category = (request.query_params.get("category") or "").strip().lower()
        if category and category != "all":
            qs = qs.filter(category__slug=category)

        q = (request.query_params.get("q") or "").strip()
        if q:
            qs = qs.filter(Q(name__icontains=q) | Q(description__icontains=q))

        qs = qs.order_by("name")
        return Response(ProductSerializer(qs, many=True).data, status=status.HTTP_200_OK)


class ProductDetailView(APIView):
    """
    GET /api/products/<uuid>/
    """

    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Public"],
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(description="Product not found or inactive"),
        },
    )
    def get(self, request, product_id, *args, **kwargs):
        product = get_object_or_404(
            Product.objects.select_related("category"),
            id=product_id,
            is_active=True,
        )
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)
