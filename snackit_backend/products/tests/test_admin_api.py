# products/tests/test_admin_api.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from orders.models import Order, OrderItem
from products.models import Category, Product


User = get_user_model()


class AdminProductApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="owner@kiit.ac.in", is_admin=True)
        self.client.force_authenticate(user=self.admin)

        self.snacks = Category.objects.create(name="Snacks", icon="🍿", slug="snacks")
        self.product = Product.objects.create(
            category=self.snacks,
            name="Samosa",
            price=Decimal("15.00"),
            stock=8,
        )

    def test_create_product(self):
        res = self.client.post(
            "/api/admin/products/",
            {
                "name": "Veg Puff",
                "description": "Bakery fresh",
                "price": "25.00",
                "stock": 12,
                "category": str(self.snacks.id),
                "allow_upi": False,
            },
            format="json",
        )

        self.assertEqual(res.status_code, 201, res.data)
        product = Product.objects.get(name="Veg Puff")
        self.assertEqual(product.price, Decimal("25.00"))
        self.assertEqual(product.stock, 12)
        self.assertFalse(product.allow_upi)

    def test_create_rejects_negative_price(self):
        res = self.client.post(
            "/api/admin/products/",
            {"name": "Bad", "price": "-1.00", "category": str(self.snacks.id)},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("price", res.data)

    def test_create_rejects_no_payment_methods(self):
        res = self.client.post(
            "/api/admin/products/",
            {
                "name": "Unpayable",
                "price": "5.00",
                "category": str(self.snacks.id),
                "allow_cash": False,
                "allow_upi": False,
            },
            format="json",
        )
        self.assertEqual(res.status_code, 400)

    def test_list_includes_inactive_and_filters(self):
        Product.objects.create(
            category=self.snacks,
            name="Old Item",
            price=Decimal("5.00"),
            is_active=False,
        )

        res = self.client.get("/api/admin/products/")
        self.assertEqual(len(res.data), 2)

        res = self.client.get("/api/admin/products/", {"is_active": "false"})
        self.assertEqual([p["name"] for p in res.data], ["Old Item"])

        res = self.client.get("/api/admin/products/", {"search": "samo"})
        self.assertEqual([p["name"] for p in res.data], ["Samosa"])

    def test_partial_update(self):
        res = self.client.patch(
            f"/api/admin/products/{self.product.id}/",
            {"price": "18.50"},
            format="json",
        )
        self.assertEqual(res.status_code, 200, res.data)
        self.product.refresh_from_db()
        self.assertEqual(self.product.price, Decimal("18.50"))

    def test_set_stock(self):
        res = self.client.put(
            f"/api/admin/products/{self.product.id}/stock/",
            {"quantity": 42},
            format="json",
        )
        self.assertEqual(res.status_code, 200, res.data)
        self.assertEqual(res.data["stock"], 42)
        self.product.refresh_from_db()
        self.assertEqual(self.product.stock, 42)

    def test_set_stock_rejects_negative(self):
        res = self.client.put(
            f"/api/admin/products/{self.product.id}/stock/",
            {"quantity": -3},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.product.refresh_from_db()
        self.assertEqual(self.product.stock, 8)

    def test_delete_is_soft_by_default(self):
        res = self.client.delete(f"/api/admin/products/{self.product.id}/")
        self.assertEqual(res.status_code, 204)

        self.product.refresh_from_db()
        self.assertFalse(self.product.is_active)

    def test_permanent_delete_removes_unreferenced_product(self):
        res = self.client.delete(f"/api/admin/products/{self.product.id}/?permanent=true")
        self.assertEqual(res.status_code, 204)
        self.assertFalse(Product.objects.filter(id=self.product.id).exists())

    def test_permanent_delete_conflicts_when_ordered(self):
        order = Order.objects.create(
            user=self.admin,
            total_amount=Decimal("15.00"),
            payment_method=Order.PAYMENT_CASH,
            hostel_block="KP-7",
            room_number="101",
            phone_number="9999999999",
        )
        OrderItem.objects.create(
            order=order,
            product=self.product,
            quantity=1,
            unit_price=Decimal("15.00"),
            total_price=Decimal("15.00"),
        )

        res = self.client.delete(f"/api/admin/products/{self.product.id}/?permanent=true")
        self.assertEqual(res.status_code, 409)
        self.assertTrue(Product.objects.filter(id=self.product.id).exists())


class AdminCategoryApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="owner@kiit.ac.in", is_admin=True)
        self.client.force_authenticate(user=self.admin)

        self.drinks = Category.objects.create(name="Beverages", icon="🥤", slug="beverages")
        self.cola = Product.objects.create(
            category=self.drinks,
            name="Cola",
            price=Decimal("40.00"),
            stock=5,
        )

    def test_create_category_derives_slug(self):
        res = self.client.post(
            "/api/admin/categories/",
            {"name": "Instant Food", "icon": "🍜"},
            format="json",
        )
        self.assertEqual(res.status_code, 201, res.data)
        self.assertEqual(res.data["slug"], "instant-food")

    def test_duplicate_slug_rejected(self):
        res = self.client.post(
            "/api/admin/categories/",
            {"name": "Drinks", "icon": "🥤", "slug": "beverages"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("slug", res.data)

    def test_delete_reassigns_products_to_fallback(self):
        res = self.client.delete(f"/api/admin/categories/{self.drinks.id}/")
        self.assertEqual(res.status_code, 204)

        self.assertFalse(Category.objects.filter(id=self.drinks.id).exists())
        self.cola.refresh_from_db()
        self.assertEqual(self.cola.category.slug, Category.FALLBACK_SLUG)

    def test_fallback_category_cannot_be_deleted(self):
        fallback = Category.objects.create(
            name=Category.FALLBACK_NAME,
            icon=Category.FALLBACK_ICON,
            slug=Category.FALLBACK_SLUG,
        )

        res = self.client.delete(f"/api/admin/categories/{fallback.id}/")
        self.assertEqual(res.status_code, 400)
        self.assertTrue(Category.objects.filter(id=fallback.id).exists())

    def test_fallback_slug_cannot_be_renamed(self):
        fallback = Category.objects.create(
            name=Category.FALLBACK_NAME,
            icon=Category.FALLBACK_ICON,
            slug=Category.FALLBACK_SLUG,
        )

        res = self.client.patch(
            f"/api/admin/categories/{fallback.id}/", {"slug": "misc"}, format="json"
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("slug", res.data)

        fallback.refresh_from_db()
        self.assertEqual(fallback.slug, Category.FALLBACK_SLUG)

        res = self.client.delete(f"/api/admin/categories/{fallback.id}/")
        self.assertEqual(res.status_code, 400)
        self.assertTrue(Category.objects.filter(id=fallback.id).exists())

    def test_fallback_can_still_be_relabelled(self):
        fallback = Category.objects.create(
            name=Category.FALLBACK_NAME,
            icon=Category.FALLBACK_ICON,
            slug=Category.FALLBACK_SLUG,
        )

        res = self.client.patch(
            f"/api/admin/categories/{fallback.id}/",
            {"name": "Other", "slug": Category.FALLBACK_SLUG},
            format="json",
        )
        self.assertEqual(res.status_code, 200, res.data)
        self.assertEqual(res.data["name"], "Other")
        self.assertEqual(res.data["slug"], Category.FALLBACK_SLUG)

    def test_reserved_slug_rejected_on_other_categories(self):
        res = self.client.patch(
            f"/api/admin/categories/{self.drinks.id}/",
            {"slug": Category.FALLBACK_SLUG},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("slug", res.data)

        self.drinks.refresh_from_db()
        self.assertEqual(self.drinks.slug, "beverages")

        res = self.client.post(
            "/api/admin/categories/",
            {"name": "Uncategorized", "icon": "📦"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("slug", res.data)
