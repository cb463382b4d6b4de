from django.contrib import admin

from invoices.admin import ListingCacheAdmin

from .models import Customer


# Listing rows carry customer name, email and image
@admin.register(Customer)
class CustomerAdmin(ListingCacheAdmin):
    list_display = ("name", "email", "id")
    search_fields = ("name", "email")
    ordering = ("name",)
