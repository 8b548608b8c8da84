from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from products.models import Category, Product


User = get_user_model()


class AdminCatalogPermissionTests(TestCase):
    """
    Permission & access tests.

    GUARANTEES:
    - Anonymous users get 401 on admin endpoints
    - Signed-in non-admins get 403
    - Admins can read + write
    """

    def setUp(self):
        self.client = APIClient()

        self.customer = User.objects.create_user(email="student@kiit.ac.in")
        self.admin = User.objects.create_user(email="owner@kiit.ac.in", is_admin=True)

        self.category = Category.objects.create(name="Snacks", icon="🍿", slug="snacks")
        self.product = Product.objects.create(
            category=self.category,
            name="ORS Sachet",
            price=Decimal("50.00"),
            stock=4,
        )

    def test_anonymous_user_gets_401(self):
        res = self.client.get("/api/admin/products/")
        self.assertEqual(res.status_code, 401)

        res = self.client.post(
            "/api/admin/categories/",
            {"name": "Drinks", "icon": "🥤"},
            format="json",
        )
        self.assertEqual(res.status_code, 401)

    def test_non_admin_gets_403(self):
        self.client.force_authenticate(user=self.customer)

        res = self.client.get("/api/admin/products/")
        self.assertEqual(res.status_code, 403)

        res = self.client.delete(f"/api/admin/products/{self.product.id}/")
        self.assertEqual(res.status_code, 403)

        self.product.refresh_from_db()
        self.assertTrue(self.product.is_active)

    def test_admin_can_list(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.get("/api/admin/products/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(res.data), 1)
