# store/tests/test_settings.py

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient

from store.models import StoreSettings
from store.services import is_accepting_orders

User = get_user_model()


class StoreSettingsModelTests(TestCase):
    def test_load_creates_singleton(self):
        self.assertEqual(StoreSettings.objects.count(), 0)

        s = StoreSettings.load()
        again = StoreSettings.load()

        self.assertEqual(s.pk, StoreSettings.SINGLETON_PK)
        self.assertEqual(again.pk, s.pk)
        self.assertEqual(StoreSettings.objects.count(), 1)

    def test_save_pins_primary_key(self):
        StoreSettings(pk=99, pickup_point="Gate 2").save()

        self.assertEqual(StoreSettings.objects.count(), 1)
        self.assertEqual(StoreSettings.load().pickup_point, "Gate 2")


class AvailabilityTests(TestCase):
    def test_open_when_accepting(self):
        s = StoreSettings.load()
        self.assertTrue(is_accepting_orders(s))

    def test_paused_without_resume_time(self):
        s = StoreSettings.load()
        s.accepting_orders = False
        s.save()

        self.assertFalse(is_accepting_orders(s))

    def test_paused_until_resume_time(self):
        now = timezone.now()
        s = StoreSettings.load()
        s.accepting_orders = False
        s.resume_at = now + timedelta(hours=1)
        s.save()

        self.assertFalse(is_accepting_orders(s, now=now))
        self.assertTrue(is_accepting_orders(s, now=now + timedelta(hours=2)))


class StoreSettingsApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="owner@kiit.ac.in", is_admin=True)
        self.customer = User.objects.create_user(email="student@kiit.ac.in")

    def test_public_settings(self):
        s = StoreSettings.load()
        s.pickup_point = "Hostel 7 canteen"
        s.upi_id = "snackit@upi"
        s.save()

        res = self.client.get("/api/settings/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["pickup_point"], "Hostel 7 canteen")
        self.assertEqual(res.data["upi_id"], "snackit@upi")
        self.assertTrue(res.data["is_open"])

    def test_admin_settings_requires_admin(self):
        res = self.client.get("/api/admin/settings/")
        self.assertEqual(res.status_code, 401)

        self.client.force_authenticate(user=self.customer)
        res = self.client.patch("/api/admin/settings/", {"upi_id": "x@upi"}, format="json")
        self.assertEqual(res.status_code, 403)
        self.assertEqual(StoreSettings.load().upi_id, "")

    def test_update_coerces_strings(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.put(
            "/api/admin/settings/",
            {
                "accepting_orders": "false",
                "resume_at": "2030-01-01T09:00:00Z",
                "contact_phone": " 9876543210 ",
            },
            format="json",
        )

        self.assertEqual(res.status_code, 200, res.data)
        s = StoreSettings.load()
        self.assertFalse(s.accepting_orders)
        self.assertEqual(s.resume_at.year, 2030)
        self.assertEqual(s.contact_phone, "9876543210")
        self.assertFalse(res.data["is_open"])

    def test_invalid_timestamp_rejected(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.patch(
            "/api/admin/settings/", {"resume_at": "next tuesday"}, format="json"
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("resume_at", res.data)

    def test_reopening_clears_resume_time(self):
        s = StoreSettings.load()
        s.accepting_orders = False
        s.resume_at = timezone.now() + timedelta(days=1)
        s.save()

        self.client.force_authenticate(user=self.admin)
        res = self.client.patch(
            "/api/admin/settings/", {"accepting_orders": "true"}, format="json"
        )

        self.assertEqual(res.status_code, 200, res.data)
        s = StoreSettings.load()
        self.assertTrue(s.accepting_orders)
        self.assertIsNone(s.resume_at)
