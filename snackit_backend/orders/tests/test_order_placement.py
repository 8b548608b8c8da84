# orders/tests/test_order_placement.py

from datetime import timedelta
from decimal import Decimal
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient

from orders.models import Order, OrderItem
from orders.services import (
    EmptyOrderError,
    InsufficientStockError,
    OrderingPausedError,
    PaymentMethodNotAllowedError,
    ProductUnavailableError,
    place_order,
)
from products.models import Category, Product
from store.models import StoreSettings

User = get_user_model()


class OrderPlacementServiceTests(TestCase):
    """
    Order placement guarantees:
    - total_amount == sum(item.total_price)
    - stock decremented by ordered quantity, never negative
    - any rejection leaves orders + stock untouched
    """

    def setUp(self):
        self.user = User.objects.create_user(email="student@kiit.ac.in")
        self.category = Category.objects.create(name="Snacks", icon="🍿", slug="snacks")

        self.p1 = Product.objects.create(
            category=self.category, name="Paneer Roll", price=Decimal("50.00"), stock=5
        )
        self.p2 = Product.objects.create(
            category=self.category, name="Cold Coffee", price=Decimal("45.50"), stock=3
        )
        self.cash_only = Product.objects.create(
            category=self.category,
            name="Samosa",
            price=Decimal("15.00"),
            stock=20,
            allow_upi=False,
        )

    def _place(self, items, payment_method="cash"):
        return place_order(
            user=self.user,
            items=items,
            hostel_block="KP-7",
            room_number="214",
            payment_method=payment_method,
            phone_number="9876543210",
        )

    def test_two_units_at_fifty(self):
        order = self._place([{"product_id": self.p1.id, "quantity": 2}])

        self.assertEqual(order.total_amount, Decimal("100.00"))
        self.assertEqual(order.status, Order.STATUS_PLACED)
        self.assertEqual(order.payment_status, Order.PAYMENT_PENDING)

        self.p1.refresh_from_db()
        self.assertEqual(self.p1.stock, 3)

    def test_total_equals_sum_of_items(self):
        order = self._place(
            [
                {"product_id": self.p1.id, "quantity": 1},
                {"product_id": self.p2.id, "quantity": 3},
            ]
        )

        items = list(order.items.all())
        self.assertEqual(len(items), 2)
        self.assertEqual(order.total_amount, sum(i.total_price for i in items))
        self.assertEqual(order.total_amount, Decimal("186.50"))

        for item in items:
            self.assertEqual(item.total_price, item.unit_price * item.quantity)

    def test_prices_are_snapshots(self):
        order = self._place([{"product_id": self.p1.id, "quantity": 1}])

        self.p1.price = Decimal("70.00")
        self.p1.save()

        item = order.items.get()
        self.assertEqual(item.unit_price, Decimal("50.00"))

    def test_duplicate_lines_are_merged(self):
        order = self._place(
            [
                {"product_id": self.p1.id, "quantity": 1},
                {"product_id": self.p1.id, "quantity": 2},
            ]
        )

        item = order.items.get()
        self.assertEqual(item.quantity, 3)
        self.p1.refresh_from_db()
        self.assertEqual(self.p1.stock, 2)

    def test_over_stock_rejected_without_side_effects(self):
        with self.assertRaises(InsufficientStockError) as ctx:
            self._place([{"product_id": self.p2.id, "quantity": 10}])

        self.assertIn("Cold Coffee", str(ctx.exception))
        self.assertIn("Available: 3", str(ctx.exception))
        self.assertEqual(Order.objects.count(), 0)
        self.p2.refresh_from_db()
        self.assertEqual(self.p2.stock, 3)

    def test_failure_on_later_line_rolls_back_earlier_lines(self):
        with self.assertRaises(InsufficientStockError):
            self._place(
                [
                    {"product_id": self.p1.id, "quantity": 1},
                    {"product_id": self.p2.id, "quantity": 4},
                ]
            )

        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(OrderItem.objects.count(), 0)
        self.p1.refresh_from_db()
        self.assertEqual(self.p1.stock, 5)

    def test_stock_lost_after_validation_rolls_back_everything(self):
        real_bulk_create = OrderItem.objects.bulk_create

        def drain_coffee(objs, *args, **kwargs):
            created = real_bulk_create(objs, *args, **kwargs)
            Product.objects.filter(pk=self.p2.pk).update(stock=1)
            return created

        with patch.object(OrderItem.objects, "bulk_create", side_effect=drain_coffee):
            with self.assertRaises(InsufficientStockError) as ctx:
                self._place(
                    [
                        {"product_id": self.p1.id, "quantity": 2},
                        {"product_id": self.p2.id, "quantity": 3},
                    ]
                )

        self.assertIn("Cold Coffee", str(ctx.exception))
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(OrderItem.objects.count(), 0)

        self.p1.refresh_from_db()
        self.p2.refresh_from_db()
        self.assertEqual(self.p1.stock, 5)
        self.assertEqual(self.p2.stock, 3)

    def test_disallowed_payment_method_rejected_before_stock_moves(self):
        with self.assertRaises(PaymentMethodNotAllowedError) as ctx:
            self._place(
                [
                    {"product_id": self.p1.id, "quantity": 1},
                    {"product_id": self.cash_only.id, "quantity": 1},
                ],
                payment_method="upi",
            )

        self.assertIn("Samosa", str(ctx.exception))
        self.assertEqual(Order.objects.count(), 0)
        self.p1.refresh_from_db()
        self.cash_only.refresh_from_db()
        self.assertEqual(self.p1.stock, 5)
        self.assertEqual(self.cash_only.stock, 20)

    def test_inactive_product_rejected(self):
        self.p1.is_active = False
        self.p1.save()

        with self.assertRaises(ProductUnavailableError):
            self._place([{"product_id": self.p1.id, "quantity": 1}])

    def test_empty_cart_rejected(self):
        with self.assertRaises(EmptyOrderError):
            self._place([])

    def test_paused_store_rejects_before_other_checks(self):
        s = StoreSettings.load()
        s.accepting_orders = False
        s.save()

        # Over-stock would also fail; the pause must win.
        with self.assertRaises(OrderingPausedError):
            self._place([{"product_id": self.p2.id, "quantity": 10}])

        self.assertEqual(Order.objects.count(), 0)

    def test_passed_resume_time_reopens_ordering(self):
        s = StoreSettings.load()
        s.accepting_orders = False
        s.resume_at = timezone.now() - timedelta(minutes=5)
        s.save()

        order = self._place([{"product_id": self.p1.id, "quantity": 1}])
        self.assertEqual(order.total_amount, Decimal("50.00"))

    def test_future_resume_time_keeps_store_paused(self):
        s = StoreSettings.load()
        s.accepting_orders = False
        s.resume_at = timezone.now() + timedelta(hours=2)
        s.save()

        with self.assertRaises(OrderingPausedError):
            self._place([{"product_id": self.p1.id, "quantity": 1}])


class OrderApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="student@kiit.ac.in")
        self.other = User.objects.create_user(email="friend@kiit.ac.in")

        self.category = Category.objects.create(name="Snacks", icon="🍿", slug="snacks")
        self.p1 = Product.objects.create(
            category=self.category, name="Paneer Roll", price=Decimal("50.00"), stock=5
        )
        self.p2 = Product.objects.create(
            category=self.category, name="Veg Momos", price=Decimal("60.00"), stock=3
        )

    def _payload(self, items, payment_method="cash"):
        return {
            "items": items,
            "delivery_address": {"hostel_block": "KP-7", "room_number": "214"},
            "payment_method": payment_method,
            "phone_number": "9876543210",
            "payment_note": "",
        }

    def test_anonymous_cannot_order(self):
        res = self.client.post(
            "/api/orders/",
            self._payload([{"product_id": str(self.p1.id), "quantity": 1}]),
            format="json",
        )
        self.assertEqual(res.status_code, 401)

    def test_place_order(self):
        self.client.force_authenticate(user=self.user)

        res = self.client.post(
            "/api/orders/",
            self._payload([{"product_id": str(self.p1.id), "quantity": 2}]),
            format="json",
        )

        self.assertEqual(res.status_code, 201, res.data)
        self.assertEqual(res.data["total_amount"], "100.00")
        self.assertEqual(res.data["status"], "placed")
        self.assertEqual(res.data["hostel_block"], "KP-7")
        self.assertEqual(len(res.data["items"]), 1)
        self.assertEqual(res.data["items"][0]["product_name"], "Paneer Roll")

        self.p1.refresh_from_db()
        self.assertEqual(self.p1.stock, 3)

    def test_over_stock_returns_400_and_changes_nothing(self):
        self.client.force_authenticate(user=self.user)

        res = self.client.post(
            "/api/orders/",
            self._payload([{"product_id": str(self.p2.id), "quantity": 10}]),
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertIn("Veg Momos", res.data["detail"])
        self.assertEqual(Order.objects.count(), 0)
        self.p2.refresh_from_db()
        self.assertEqual(self.p2.stock, 3)

    def test_malformed_payload_returns_field_errors(self):
        self.client.force_authenticate(user=self.user)

        res = self.client.post(
            "/api/orders/",
            {
                "items": [{"product_id": "not-a-uuid", "quantity": 0}],
                "payment_method": "card",
            },
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertIn("items", res.data)
        self.assertIn("delivery_address", res.data)
        self.assertIn("payment_method", res.data)

    def test_unknown_product_is_rejected(self):
        self.client.force_authenticate(user=self.user)

        res = self.client.post(
            "/api/orders/",
            self._payload(
                [{"product_id": "00000000-0000-0000-0000-000000000000", "quantity": 1}]
            ),
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("detail", res.data)

    def test_list_returns_only_own_orders(self):
        place_order(
            user=self.user,
            items=[{"product_id": self.p1.id, "quantity": 1}],
            hostel_block="KP-7",
            room_number="214",
            payment_method="cash",
            phone_number="9876543210",
        )
        theirs = place_order(
            user=self.other,
            items=[{"product_id": self.p2.id, "quantity": 1}],
            hostel_block="KP-1",
            room_number="9",
            payment_method="upi",
            phone_number="9123456780",
        )

        self.client.force_authenticate(user=self.user)
        res = self.client.get("/api/orders/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(res.data), 1)
        self.assertEqual(res.data[0]["items"][0]["product_name"], "Paneer Roll")

        res = self.client.get(f"/api/orders/{theirs.id}/")
        self.assertEqual(res.status_code, 404)
