"""
======================================================
PATH: store/migrations/0001_initial.py
======================================================
MIGRATION: CREATE StoreSettings (singleton row)
"""

from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StoreSettings",
            fields=[
                (
                    "id",
                    models.PositiveSmallIntegerField(
                        default=1,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("pickup_point", models.CharField(blank=True, max_length=255)),
                ("contact_phone", models.CharField(blank=True, max_length=32)),
                ("upi_id", models.CharField(blank=True, max_length=255)),
                ("upi_qr_url", models.URLField(blank=True, max_length=500)),
                ("accepting_orders", models.BooleanField(default=True)),
                ("resume_at", models.DateTimeField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "store settings",
                "verbose_name_plural": "store settings",
            },
        ),
    ]
