from django.contrib import admin

from core.cache import invalidate_path

from .models import Invoice
from .queries import listing_path


class ListingCacheAdmin(admin.ModelAdmin):
    """Admin writes mark the cached invoice listing stale, like the dashboard's own."""

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        invalidate_path(listing_path())

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        invalidate_path(listing_path())

    def delete_queryset(self, request, queryset):
        super().delete_queryset(request, queryset)
        invalidate_path(listing_path())


@admin.register(Invoice)
class InvoiceAdmin(ListingCacheAdmin):
    list_display = ("id", "customer", "amount", "status", "date")
    list_filter = ("status", "date")
    search_fields = ("id", "customer__name", "customer__email")
    readonly_fields = ("id", "date")
