"""
Admin configuration for medicines app.
"""
from django.contrib import admin
from .models import Medicine


@admin.register(Medicine)
class MedicineAdmin(admin.ModelAdmin):
    """Admin interface for Medicine model."""
    list_display = ['name', 'pharmacy', 'category', 'price', 'stock', 'expiry_date', 'is_expired', 'created_at']
    list_filter = ['category', 'prescription_required', 'expiry_date', 'created_at']
    search_fields = ['name', 'brand', 'category', 'description']
    readonly_fields = ['created_at', 'updated_at']
    fieldsets = (
        ('Basic Information', {
            'fields': ('pharmacy', 'name', 'brand', 'category', 'dosage', 'description')
        }),
        ('Pricing & Stock', {
            'fields': ('price', 'stock', 'prescription_required', 'expiry_date')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at')
        }),
    )
