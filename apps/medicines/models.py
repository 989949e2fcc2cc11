"""
Medicine models for MediFind.

This module defines the medicines a pharmacy lists for searchers.
"""
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class Medicine(models.Model):
    """
    Medicine model.

    Stores information about each listed medicine including price, stock and
    expiry date. Every medicine belongs to exactly one pharmacy.
    """
    owner_field = "pharmacy_id"

    name = models.CharField(
        max_length=200,
        help_text="Medicine name (e.g., Paracetamol 500mg)"
    )
    brand = models.CharField(max_length=120, blank=True, null=True)
    category = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        help_text="Dosage form (e.g., Tablet, Syrup)"
    )
    dosage = models.CharField(
        max_length=50,
        blank=True,
        null=True,
        help_text="Strength (e.g., 500mg)"
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Price per unit"
    )
    stock = models.PositiveIntegerField(help_text="Units currently in stock")
    expiry_date = models.DateField(null=True, blank=True)
    prescription_required = models.BooleanField(default=False)
    description = models.TextField(blank=True, null=True)
    # No database constraint: deleting a pharmacy leaves its medicines behind.
    pharmacy = models.ForeignKey(
        "pharmacies.Pharmacy",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="medicines",
        help_text="Pharmacy that owns this medicine",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Medicine"
        verbose_name_plural = "Medicines"
        ordering = ['name', 'id']

    def __str__(self):
        return self.name

    def is_in_stock(self):
        return self.stock > 0

    def is_expired(self):
        """Check if medicine has expired."""
        if not self.expiry_date:
            return False
        return self.expiry_date < timezone.now().date()
