"""
Serializers for pharmacies app.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from apps.accounts.models import User
from .models import Pharmacy
from .services import PharmacyService


class OwnerSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'name', 'email']
        read_only_fields = fields


class PharmacySummarySerializer(serializers.ModelSerializer):
    """Display fields embedded in medicine responses."""

    class Meta:
        model = Pharmacy
        fields = ['id', 'name', 'address', 'phone', 'location']
        read_only_fields = fields


class PharmacySerializer(serializers.ModelSerializer):
    """
    Serializer for Pharmacy model.

    The owner is always the requesting user and cannot be reassigned.
    """
    owner = OwnerSummarySerializer(read_only=True)

    class Meta:
        model = Pharmacy
        fields = [
            'id', 'name', 'address', 'phone', 'email', 'license_number', 'location',
            'owner', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'owner', 'created_at', 'updated_at']

    def create(self, validated_data):
        owner = validated_data.pop("owner", None)
        try:
            return PharmacyService.register_pharmacy(owner=owner, pharmacy_data=validated_data)
        except DjangoValidationError as exc:
            if hasattr(exc, "message_dict"):
                raise serializers.ValidationError(exc.message_dict)
            raise serializers.ValidationError({"detail": exc.messages})
