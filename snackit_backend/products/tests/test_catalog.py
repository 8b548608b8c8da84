# products/tests/test_catalog.py

from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from products.models import Category, Product


class PublicCatalogTests(TestCase):
    """
    Storefront catalog:
    - AllowAny
    - active products only
    - category slug + search filters
    """

    def setUp(self):
        self.client = APIClient()

        self.snacks = Category.objects.create(name="Snacks", icon="🍿", slug="snacks")
        self.drinks = Category.objects.create(name="Beverages", icon="🥤", slug="beverages")

        self.chips = Product.objects.create(
            category=self.snacks,
            name="Masala Chips",
            description="Crunchy",
            price=Decimal("20.00"),
            stock=10,
        )
        self.cola = Product.objects.create(
            category=self.drinks,
            name="Cola",
            description="Fizzy chilled drink",
            price=Decimal("40.00"),
            stock=5,
        )
        self.hidden = Product.objects.create(
            category=self.snacks,
            name="Discontinued Nachos",
            price=Decimal("30.00"),
            stock=3,
            is_active=False,
        )

    def _names(self, res):
        return sorted(p["name"] for p in res.data)

    def test_categories_are_public(self):
        res = self.client.get("/api/categories/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(
            sorted(c["slug"] for c in res.data),
            ["beverages", "snacks"],
        )
        self.assertIn("icon", res.data[0])

    def test_products_list_hides_inactive(self):
        res = self.client.get("/api/products/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(self._names(res), ["Cola", "Masala Chips"])

    def test_products_filter_by_category_slug(self):
        res = self.client.get("/api/products/", {"category": "snacks"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(self._names(res), ["Masala Chips"])

    def test_category_all_returns_everything_active(self):
        res = self.client.get("/api/products/", {"category": "all"})
        self.assertEqual(self._names(res), ["Cola", "Masala Chips"])

    def test_unknown_category_returns_empty_list(self):
        res = self.client.get("/api/products/", {"category": "nope"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data, [])

    def test_search_matches_name_and_description(self):
        res = self.client.get("/api/products/", {"q": "chilled"})
        self.assertEqual(self._names(res), ["Cola"])

        res = self.client.get("/api/products/", {"q": "masala"})
        self.assertEqual(self._names(res), ["Masala Chips"])

    def test_product_payload_shape(self):
        res = self.client.get(f"/api/products/{self.chips.id}/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["price"], "20.00")
        self.assertEqual(res.data["stock"], 10)
        self.assertEqual(res.data["category_slug"], "snacks")
        self.assertTrue(res.data["allow_cash"])
        self.assertTrue(res.data["allow_upi"])

    def test_inactive_product_detail_is_404(self):
        res = self.client.get(f"/api/products/{self.hidden.id}/")
        self.assertEqual(res.status_code, 404)
