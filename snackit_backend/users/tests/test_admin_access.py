from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import CommandError, call_command
from django.test import TestCase
from rest_framework.test import APIRequestFactory

from users.permissions import IsAdmin

User = get_user_model()


class IsAdminPermissionTests(TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def _check(self, user):
        request = self.factory.get("/api/admin/stats/")
        request.user = user
        return IsAdmin().has_permission(request, view=None)

    def test_admin_flag_required(self):
        self.assertTrue(self._check(User.objects.create_user(email="a@kiit.ac.in", is_admin=True)))
        self.assertFalse(self._check(User.objects.create_user(email="b@kiit.ac.in")))

    def test_is_staff_alone_is_not_enough(self):
        staff = User.objects.create_user(email="c@kiit.ac.in", is_staff=True)
        self.assertFalse(self._check(staff))


class GrantAdminCommandTests(TestCase):
    def test_grant_and_revoke(self):
        user = User.objects.create_user(email="owner@kiit.ac.in")

        out = StringIO()
        call_command("grant_admin", "Owner@KIIT.ac.in", stdout=out)
        user.refresh_from_db()
        self.assertTrue(user.is_admin)
        self.assertIn("granted", out.getvalue())

        call_command("grant_admin", "owner@kiit.ac.in", "--revoke", stdout=StringIO())
        user.refresh_from_db()
        self.assertFalse(user.is_admin)

    def test_unknown_user(self):
        with self.assertRaises(CommandError):
            call_command("grant_admin", "ghost@kiit.ac.in", stdout=StringIO())
