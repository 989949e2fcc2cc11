"""
Serializers for medicines app.

Handles serialization/deserialization of the Medicine model.
"""
from rest_framework import serializers

from apps.pharmacies.serializers import PharmacySummarySerializer
from .models import Medicine


class MedicineSerializer(serializers.ModelSerializer):
    """
    Serializer for Medicine model.

    The owning pharmacy is embedded with its display fields and is set by the
    view from the caller, never from the payload. It renders as ``null`` when
    the pharmacy has since been deleted.
    """
    pharmacy = PharmacySummarySerializer(read_only=True)
    is_expired = serializers.SerializerMethodField()

    class Meta:
        model = Medicine
        fields = [
            'id', 'name', 'brand', 'category', 'dosage', 'price', 'stock',
            'expiry_date', 'prescription_required', 'description',
            'pharmacy', 'is_expired', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'pharmacy', 'is_expired', 'created_at', 'updated_at']

    def get_is_expired(self, obj):
        """Check if medicine has expired."""
        return obj.is_expired()
