# orders/admin.py

from django.contrib import admin

from orders.models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    can_delete = False
    fields = ("product", "quantity", "unit_price", "total_price")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Read-mostly order view. Status changes should go through the dashboard
    API so cancellation restocks products.
    """

    list_display = (
        "id",
        "user",
        "status",
        "payment_method",
        "payment_status",
        "total_amount",
        "hostel_block",
        "room_number",
        "created_at",
    )
    list_filter = ("status", "payment_method", "payment_status", "created_at")
    search_fields = ("id", "user__email", "phone_number", "hostel_block", "room_number")
    ordering = ("-created_at",)
    readonly_fields = (
        "user",
        "status",
        "total_amount",
        "payment_method",
        "created_at",
        "updated_at",
    )
    inlines = [OrderItemInline]
