# store/models/settings.py

from django.db import models


class StoreSettings(models.Model):
    """
    Store-wide operational settings (single row).

    Guarantees:
    - primary key is always SINGLETON_PK; save() pins it
    - load() creates the row on first access
    - the storefront is open when accepting_orders is on, or when a
      resume_at time has been set and has already passed
    """

    SINGLETON_PK = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_PK, editable=False)

    pickup_point = models.CharField(max_length=255, blank=True)
    contact_phone = models.CharField(max_length=32, blank=True)

    upi_id = models.CharField(max_length=255, blank=True)
    upi_qr_url = models.URLField(max_length=500, blank=True)

    accepting_orders = models.BooleanField(default=True)
    resume_at = models.DateTimeField(null=True, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "store settings"
        verbose_name_plural = "store settings"

    def __str__(self):
        return "Store settings"

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        # UPDATE-then-INSERT, so a fresh instance overwrites the existing row.
        self._state.adding = False
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> "StoreSettings":
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj
