# store/admin.py

from django.contrib import admin

from store.models import StoreSettings


@admin.register(StoreSettings)
class StoreSettingsAdmin(admin.ModelAdmin):
    list_display = ("pickup_point", "contact_phone", "accepting_orders", "resume_at", "updated_at")
    readonly_fields = ("updated_at",)

    def has_add_permission(self, request):
        return not StoreSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
