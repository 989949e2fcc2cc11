from django.contrib import admin

from .models import Pharmacy


@admin.register(Pharmacy)
class PharmacyAdmin(admin.ModelAdmin):
    list_display = ["name", "owner", "phone", "location", "license_number", "created_at"]
    list_filter = ["location", "created_at"]
    search_fields = ["name", "address", "location", "owner__email"]
    readonly_fields = ["created_at", "updated_at"]
