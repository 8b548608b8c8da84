# users/management/commands/grant_admin.py

"""
PATH: users/management/commands/grant_admin.py

Admin flag assignment.

Usage:
    python manage.py grant_admin someone@kiit.ac.in
    python manage.py grant_admin someone@kiit.ac.in --revoke

The user must have signed in with Google at least once.
"""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from users.services.accounts import AccountError, set_admin_flag


class Command(BaseCommand):
    help = "Grant (or revoke) admin dashboard access for an existing user."

    def add_arguments(self, parser):
        parser.add_argument("email", help="Email of a user who has signed in before")
        parser.add_argument(
            "--revoke",
            action="store_true",
            help="Remove admin access instead of granting it",
        )

    def handle(self, *args, **options):
        is_admin = not options["revoke"]

        try:
            user = set_admin_flag(email=options["email"], is_admin=is_admin)
        except AccountError as exc:
            raise CommandError(str(exc)) from exc

        verb = "granted to" if is_admin else "revoked from"
        self.stdout.write(self.style.SUCCESS(f"Admin access {verb} {user.email}."))
